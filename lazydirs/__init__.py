"""Public package surface for lazydirs.

Exports ``main`` for programmatic CLI invocation.
The list engine lives in ``lazydirs.list_model``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
