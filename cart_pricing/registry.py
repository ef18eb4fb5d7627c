"""Per-session cart registry.

One ``CartStore`` per shopping session. The registry lock only guards the
session map; each store serializes its own mutations, so two sessions never
wait on each other's cart.
"""

from __future__ import annotations

import threading
from typing import Callable

import structlog

from .store import CartStore

logger = structlog.get_logger()

StoreFactory = Callable[[str], CartStore]


class CartRegistry:
    def __init__(self, factory: StoreFactory | None = None) -> None:
        self._factory = factory or (lambda session_id: CartStore(cart_id=session_id))
        self._carts: dict[str, CartStore] = {}
        self._lock = threading.Lock()

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._carts

    def __len__(self) -> int:
        with self._lock:
            return len(self._carts)

    def get(self, session_id: str) -> CartStore | None:
        with self._lock:
            return self._carts.get(session_id)

    def get_or_create(self, session_id: str) -> CartStore:
        with self._lock:
            store = self._carts.get(session_id)
            if store is None:
                store = self._factory(session_id)
                self._carts[session_id] = store
                logger.info("cart_created", cart_id=session_id)
            return store

    def discard(self, session_id: str) -> None:
        with self._lock:
            if self._carts.pop(session_id, None) is not None:
                logger.info("cart_discarded", cart_id=session_id)
