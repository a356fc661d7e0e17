"""book_catalog package: command-driven in-memory book catalog.

Subpackages are imported directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
