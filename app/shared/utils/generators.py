"""Primary key generation for API token and permission rows."""

from cuid2 import cuid_wrapper

_next_id = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new CUID2 string; default id for rows built on CuidMixin."""
    return _next_id()
