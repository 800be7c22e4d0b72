"""In-memory providers and the container built from them."""

from .container import build_test_container
from .persistence import InMemoryPersistenceProvider

__all__ = ["InMemoryPersistenceProvider", "build_test_container"]
