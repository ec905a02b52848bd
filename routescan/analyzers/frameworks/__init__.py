"""
Framework-specific endpoint adapters.

Each adapter provides:
- The member names that register routes in its framework
- The HTTP method derived from each of those members
"""

def _import_adapters():
    """Import adapter modules so each registers itself."""
    from . import gin
    from . import echo
    from . import gorilla_mux
    from . import nethttp
    from . import fiber

_import_adapters()

__all__ = ['gin', 'echo', 'gorilla_mux', 'nethttp', 'fiber']
