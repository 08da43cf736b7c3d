"""Identifier values (CUID2).

CUID2 values are lowercase alphanumerics, so they are safe as cache key
parts and as record-store primary keys without escaping.
"""

from cuid2 import cuid_wrapper

# cuid_wrapper builds the fingerprint/counter state once per process.
_next_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new collision-resistant identifier value."""
    value = _next_cuid()
    if not isinstance(value, str) or not value.isalnum():
        raise TypeError(f"Unexpected CUID value: {value!r}")
    return value
