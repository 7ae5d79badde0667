"""
Immutable scheme -> proxy mapping.
"""
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple
from .types import ProxyDescriptor


class ProxyRegistry(Mapping[str, ProxyDescriptor]):
    """Read-only, case-insensitive mapping of URL scheme to proxy descriptor."""

    def __init__(self, proxies: Optional[Mapping[str, ProxyDescriptor]] = None):
        entries: Dict[str, ProxyDescriptor] = {}
        for scheme, descriptor in (proxies or {}).items():
            entries[scheme.lower()] = descriptor
        self._proxies = MappingProxyType(entries)

    def __getitem__(self, scheme: str) -> ProxyDescriptor:
        return self._proxies[scheme.lower()]

    def __contains__(self, scheme: object) -> bool:
        return isinstance(scheme, str) and scheme.lower() in self._proxies

    def __iter__(self) -> Iterator[str]:
        return iter(self._proxies)

    def __len__(self) -> int:
        return len(self._proxies)

    def __repr__(self) -> str:
        return f"ProxyRegistry({dict(self._proxies)!r})"

    def get(self, scheme: str, default: Optional[ProxyDescriptor] = None) -> Optional[ProxyDescriptor]:
        """Descriptor for ``scheme`` in any letter case, or ``default``."""
        return self._proxies.get(scheme.lower(), default)

    @property
    def schemes(self) -> Tuple[str, ...]:
        """Configured schemes, lower-cased, in configuration order."""
        return tuple(self._proxies)
