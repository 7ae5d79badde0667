"""
Parsing of proxy environment values.

Every helper here is lenient: malformed input yields ``None`` or an empty
result and never raises.
"""
import logging
from typing import Optional, Sequence, Tuple
from urllib.parse import SplitResult, unquote, urlsplit
from .config import DEFAULT_PORTS
from .types import ProxyCredentials, ProxyDescriptor

logger = logging.getLogger(__name__)


def parse_bypass_list(value: Optional[str]) -> Tuple[str, ...]:
    """Split a NO_PROXY value on commas, dropping empty segments, keeping order."""
    if not value:
        return ()
    return tuple(host.strip() for host in value.split(",") if host.strip())


def redact_proxy_value(value: str) -> str:
    """Hide user-info in a proxy value before it is logged."""
    scheme_sep = value.find("://")
    start = scheme_sep + 3 if scheme_sep >= 0 else 0
    at = value.find("@", start)
    if at < 0:
        return value
    return f"{value[:start]}***@{value[at + 1:]}"


def split_absolute_uri(value: str) -> Optional[SplitResult]:
    """Parse ``value`` as an absolute URI with a host, or return None."""
    try:
        parts = urlsplit(value.strip())
    except ValueError:
        return None

    if not parts.scheme or not parts.netloc:
        return None
    if any(ch.isspace() for ch in parts.netloc):
        return None
    if not parts.hostname:
        return None
    return parts


def get_port(parts: SplitResult) -> Optional[int]:
    """Explicit port, else the default port of the URI's own scheme."""
    try:
        port = parts.port
    except ValueError:
        return None
    if port is not None:
        return port
    return DEFAULT_PORTS.get(parts.scheme.lower())


def parse_credentials(parts: SplitResult) -> Optional[ProxyCredentials]:
    """Extract ``user:password`` user-info.

    Requires a ``:`` separator and a non-empty user; the password may be
    empty. Both segments are percent-decoded.
    """
    if "@" not in parts.netloc:
        return None
    userinfo = parts.netloc.rpartition("@")[0]
    if not userinfo:
        return None

    user, sep, password = userinfo.partition(":")
    if not sep or not user:
        return None
    return ProxyCredentials(username=unquote(user), password=unquote(password))


def parse_proxy_value(
    scheme: str,
    value: Optional[str],
    bypass_list: Sequence[str] = ()
) -> Optional[ProxyDescriptor]:
    """Build the descriptor for ``scheme`` from a ``<SCHEME>_PROXY`` value.

    Returns None when the value is absent, not an absolute URI, or carries
    an unusable port.
    """
    if not value:
        return None

    parts = split_absolute_uri(value)
    if parts is None:
        logger.debug(f"Ignoring {scheme} proxy value, not an absolute URI: {redact_proxy_value(value)}")
        return None

    port = get_port(parts)
    if port is None:
        logger.debug(f"Ignoring {scheme} proxy value, no usable port: {redact_proxy_value(value)}")
        return None

    credentials = parse_credentials(parts)

    return ProxyDescriptor(
        scheme=scheme.lower(),
        proxy_scheme=parts.scheme.lower(),
        host=parts.hostname,
        port=port,
        credentials=credentials,
        bypass_list=tuple(bypass_list),
        bypass_on_local=True,
    )
