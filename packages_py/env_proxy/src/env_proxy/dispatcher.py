"""
httpx clients routed through the environment proxies.
"""
import ipaddress
import logging
from typing import Any, Dict, Optional, Union
import httpx
from .config import HTTPX_SCHEMES, LOOPBACK_HOSTS
from .resolver import ProxyResolver, get_default_resolver
from .types import ProxyDescriptor

logger = logging.getLogger(__name__)

Transport = Union[httpx.HTTPTransport, httpx.AsyncHTTPTransport]


def bypass_pattern(host: str) -> str:
    """Translate a NO_PROXY entry into an httpx mount pattern.

    Follows httpx's own NO_PROXY handling: explicit URLs are used as-is, IP
    addresses and ``localhost`` match exactly, anything else matches the
    domain and its subdomains.
    """
    if "://" in host:
        return host
    try:
        address = ipaddress.ip_address(host.strip("[]"))
    except ValueError:
        address = None

    if address is not None:
        if address.version == 6:
            return f"all://[{address.compressed}]"
        return f"all://{host}"
    if host.lower() == "localhost":
        return f"all://{host}"
    return f"all://*{host.lstrip('*')}"


def get_httpx_proxy(descriptor: ProxyDescriptor) -> httpx.Proxy:
    """httpx.Proxy for a descriptor, carrying its credentials as proxy auth.

    The proxy is dialed with the scheme its environment value carried, so
    an https target behind ``http://proxy:3128`` is tunnelled with CONNECT
    over plain HTTP. Schemes httpx cannot dial fall back to ``http``.
    """
    url = descriptor.connection_url
    if descriptor.proxy_scheme not in HTTPX_SCHEMES:
        url = f"http://{descriptor.authority}"
    auth = descriptor.credentials.as_tuple() if descriptor.credentials else None
    return httpx.Proxy(url=url, auth=auth)


def build_mounts(
    resolver: Optional[ProxyResolver] = None,
    async_client: bool = False
) -> Dict[str, Optional[Transport]]:
    """Build httpx ``mounts`` for every configured scheme and bypass host.

    ``None`` entries route the matching hosts over the client's default,
    direct transport.
    """
    resolver = resolver or get_default_resolver()
    transport_cls = httpx.AsyncHTTPTransport if async_client else httpx.HTTPTransport

    mounts: Dict[str, Optional[Transport]] = {}
    for scheme, descriptor in resolver.registry.items():
        if scheme not in HTTPX_SCHEMES:
            logger.debug(f"Skipping {scheme} proxy, httpx cannot mount {scheme}:// targets")
            continue

        mounts[f"{scheme}://"] = transport_cls(proxy=get_httpx_proxy(descriptor))

        bypass_hosts = list(descriptor.bypass_list)
        if descriptor.bypass_on_local:
            bypass_hosts.extend(LOOPBACK_HOSTS)
        for host in bypass_hosts:
            if any(ch.isspace() for ch in host):
                logger.debug(f"Skipping unusable bypass entry: {host!r}")
                continue
            mounts.setdefault(bypass_pattern(host), None)

    logger.debug(f"Built httpx mounts: {list(mounts.keys())}")
    return mounts


def get_request_kwargs(
    resolver: Optional[ProxyResolver] = None,
    async_client: bool = False,
    timeout: float = 30.0
) -> Dict[str, Any]:
    """Get kwargs for constructing an httpx client."""
    return {
        "mounts": build_mounts(resolver, async_client=async_client),
        "timeout": timeout,
        # Proxies come from the resolver snapshot only.
        "trust_env": False,
    }


def get_sync_client(
    resolver: Optional[ProxyResolver] = None,
    timeout: float = 30.0
) -> httpx.Client:
    """Get a configured sync httpx client."""
    kwargs = get_request_kwargs(resolver, async_client=False, timeout=timeout)
    return httpx.Client(**kwargs)


def get_async_client(
    resolver: Optional[ProxyResolver] = None,
    timeout: float = 30.0
) -> httpx.AsyncClient:
    """Get a configured async httpx client."""
    kwargs = get_request_kwargs(resolver, async_client=True, timeout=timeout)
    return httpx.AsyncClient(**kwargs)
