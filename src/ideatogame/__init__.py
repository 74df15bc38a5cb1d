"""
IdeaToGame runtime package.

Provides the slot-based persistence system used by IdeaToGame titles:
- Persistence, the key/value save bag with slot save/load
- Pluggable save/load strategies (filesystem by default, in-memory for tests)
- Logging setup shared by tools and games embedding the runtime
"""
from .persistence import (
    Persistence,
    PersistenceSettings,
    FileSystemPersistenceStrategy,
    InMemoryPersistenceStrategy,
    PersistenceError,
)
from .logging_config import configure_logging

__version__ = "0.1.0"

__all__ = [
    "Persistence",
    "PersistenceSettings",
    "FileSystemPersistenceStrategy",
    "InMemoryPersistenceStrategy",
    "PersistenceError",
    "configure_logging",
    "__version__",
]
