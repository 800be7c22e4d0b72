"""Swappable infrastructure components.

Importing the production implementations here registers them as
subclasses of their component base.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
