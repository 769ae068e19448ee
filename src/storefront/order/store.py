"""In-memory order store.

Orders are kept most-recent-first and live as long as the store object does.
The application factory owns one store per app; tests build their own.
"""

import threading

from storefront.order.exceptions import DuplicateOrderError, OrderNotFoundError


class OrderStore:
    """Insert, look up, list and replace orders by id.

    Every operation runs under one re-entrant lock, so each call completes
    without interleaving even when handlers run on several threads.
    """

    def __init__(self, orders=None):
        self._orders = list(orders or [])
        self._lock = threading.RLock()

    def list(self):
        """All orders, most recently created first."""
        with self._lock:
            return list(self._orders)

    def get(self, order_id):
        with self._lock:
            return next((o for o in self._orders if str(o.id) == str(order_id)), None)

    def require(self, order_id):
        order = self.get(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    def insert(self, order):
        with self._lock:
            if self.get(order.id) is not None:
                raise DuplicateOrderError(order.id)
            self._orders.insert(0, order)

    def replace(self, order):
        with self._lock:
            for index, existing in enumerate(self._orders):
                if str(existing.id) == str(order.id):
                    self._orders[index] = order
                    return
            raise OrderNotFoundError(order.id)

    def count(self):
        with self._lock:
            return len(self._orders)

    def __len__(self):
        return self.count()
