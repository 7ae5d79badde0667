"""
Environment proxy resolution package.
"""
from .types import ProxyCredentials, ProxyDescriptor
from .registry import ProxyRegistry
from .env import get_env_var
from .parser import parse_bypass_list, parse_credentials, parse_proxy_value
from .resolver import (
    ProxyResolver,
    get_default_resolver,
    create_proxy_resolver,
    resolve_proxy_for
)
from .dispatcher import (
    build_mounts,
    get_httpx_proxy,
    get_request_kwargs,
    get_sync_client,
    get_async_client
)

__all__ = [
    "ProxyCredentials",
    "ProxyDescriptor",
    "ProxyRegistry",
    "ProxyResolver",
    "get_env_var",
    "parse_bypass_list",
    "parse_credentials",
    "parse_proxy_value",
    "get_default_resolver",
    "create_proxy_resolver",
    "resolve_proxy_for",
    "build_mounts",
    "get_httpx_proxy",
    "get_request_kwargs",
    "get_sync_client",
    "get_async_client",
]
