"""In-memory cat record store."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import Lock
from typing import List

from services.gateway.app.schemas.cat import Cat

logger = logging.getLogger(__name__)


class CatNotFoundError(LookupError):
    """Raised when no stored cat has the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Cat {name} not found")
        self.name = name


@dataclass
class CatsService:
    """Append-only list of cats, looked up by exact name.

    ``find_all`` and ``find_one`` hand back the stored objects, not copies.
    The lock covers handing over the list reference; callers iterating the
    result of ``find_all`` do so outside the lock.
    """

    _cats: List[Cat] = field(default_factory=list, init=False, repr=False)
    _lock: Lock = field(default_factory=Lock, init=False, repr=False)

    def __len__(self) -> int:
        with self._lock:
            return len(self._cats)

    def create(self, cat: Cat) -> None:
        with self._lock:
            self._cats.append(cat)
            logger.debug("Stored cat %r (%d total)", cat.name, len(self._cats))

    def find_all(self) -> List[Cat]:
        with self._lock:
            return self._cats

    def find_one(self, name: str) -> Cat:
        with self._lock:
            for cat in self._cats:
                if cat.name == name:
                    return cat
        logger.debug("No cat named %r", name)
        raise CatNotFoundError(name)
