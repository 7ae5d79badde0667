"""
Process-wide proxy resolution from environment variables.
"""
import os
import logging
import threading
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlsplit
from .config import NO_PROXY_ENV_VAR, SCHEME_ENV_VARS
from .env import get_env_var
from .parser import parse_bypass_list, parse_proxy_value, redact_proxy_value
from .registry import ProxyRegistry
from .types import ProxyDescriptor

logger = logging.getLogger(__name__)


def get_url_scheme(url: Any) -> str:
    """Scheme of a URL given as a string or an object with a ``scheme`` attribute."""
    scheme = getattr(url, "scheme", None)
    if isinstance(scheme, str):
        return scheme.lower()
    try:
        return urlsplit(str(url)).scheme.lower()
    except ValueError:
        return ""


class ProxyResolver:
    """Resolves the proxy for a URL from a one-time read of the environment.

    The registry is built lazily on the first lookup, under a lock, and is
    published only once fully constructed. Later environment changes are
    not observed.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        schemes: Optional[Mapping[str, str]] = None
    ):
        self._environ = environ
        self._schemes: Dict[str, str] = dict(schemes if schemes is not None else SCHEME_ENV_VARS)
        self._lock = threading.Lock()
        self._registry: Optional[ProxyRegistry] = None
        self.initialization_count = 0

    @property
    def is_initialized(self) -> bool:
        return self._registry is not None

    @property
    def registry(self) -> ProxyRegistry:
        """The scheme -> descriptor registry, built on first access.

        An empty registry is returned, without being published, when
        initialization fails unexpectedly.
        """
        registry = self._registry
        if registry is not None:
            return registry

        with self._lock:
            if self._registry is None:
                try:
                    built = self._build_registry()
                except Exception:
                    logger.exception("Proxy registry initialization failed; will retry on next lookup")
                    return ProxyRegistry()
                self._registry = built
                self.initialization_count += 1
            return self._registry

    def resolve_proxy_for(self, url: Any) -> Optional[ProxyDescriptor]:
        """Return the proxy configured for the URL's scheme, or None to connect directly."""
        return self.registry.get(get_url_scheme(url))

    def _build_registry(self) -> ProxyRegistry:
        environ = self._environ if self._environ is not None else os.environ

        bypass_list = parse_bypass_list(get_env_var(NO_PROXY_ENV_VAR, environ))
        logger.debug(f"Resolved bypass list: {list(bypass_list)}")

        proxies: Dict[str, ProxyDescriptor] = {}
        for scheme, env_var in self._schemes.items():
            value = get_env_var(env_var, environ)
            if value is None:
                logger.debug(f"No {env_var} set; {scheme} requests connect directly")
                continue

            descriptor = parse_proxy_value(scheme, value, bypass_list)
            if descriptor is None:
                continue

            logger.debug(f"Registered {scheme} proxy {descriptor.address} from {env_var}={redact_proxy_value(value)}")
            proxies[scheme] = descriptor

        return ProxyRegistry(proxies)


# Global default resolver
_default_resolver = ProxyResolver()


def get_default_resolver() -> ProxyResolver:
    """Get the process-wide resolver."""
    return _default_resolver


def create_proxy_resolver(
    environ: Optional[Mapping[str, str]] = None,
    schemes: Optional[Mapping[str, str]] = None
) -> ProxyResolver:
    """Create a new, independent ProxyResolver instance."""
    return ProxyResolver(environ=environ, schemes=schemes)


def resolve_proxy_for(url: Any) -> Optional[ProxyDescriptor]:
    """Resolve the proxy for ``url`` using the process-wide resolver."""
    return _default_resolver.resolve_proxy_for(url)
