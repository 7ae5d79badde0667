"""
Static proxy environment configuration.
"""
from typing import Dict, Tuple

# Scheme -> environment variable holding its proxy URI. Insertion order is
# the order in which schemes are configured.
SCHEME_ENV_VARS: Dict[str, str] = {
    "http": "HTTP_PROXY",
    "https": "HTTPS_PROXY",
}

NO_PROXY_ENV_VAR = "NO_PROXY"

DEFAULT_PORTS: Dict[str, int] = {
    "http": 80,
    "https": 443,
}

LOOPBACK_HOSTS: Tuple[str, ...] = ("localhost", "127.0.0.1", "::1")

# Schemes httpx can mount transports for and dial proxies with.
HTTPX_SCHEMES: Tuple[str, ...] = ("http", "https")
