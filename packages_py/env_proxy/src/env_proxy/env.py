"""
Environment variable lookup.
"""
import os
from typing import List, Mapping, Optional


def env_key_variants(name: str) -> List[str]:
    """Upper-case name first, then lower-case."""
    upper = name.upper()
    lower = name.lower()
    if upper == lower:
        return [upper]
    return [upper, lower]


def get_env_var(name: str, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Read an environment variable tolerating case-sensitive environments.

    Resolution order:
    1. NAME (upper-cased)
    2. name (lower-cased)

    Unset and empty values fall through to the next key; None when neither
    variant yields a value.
    """
    if environ is None:
        environ = os.environ

    for key in env_key_variants(name):
        val = environ.get(key)
        if val:
            return val

    return None
