"""Capacity-zero handoff queue used to hand work tokens to workers."""
import threading
from typing import Any, Iterator


class QueueClosed(Exception):
    """Raised by get() once the queue is closed and drained."""


class HandoffQueue:
    """Unbuffered producer/consumer channel.

    ``put`` blocks until a consumer has taken the item, so no item is ever
    buffered. ``close`` wakes every blocked consumer, which then stops
    iterating, and releases a producer still waiting on a handoff.
    """

    capacity = 0

    def __init__(self):
        self._cond = threading.Condition()
        self._item: Any = None
        self._has_item = False
        self._closed = False
        self._put_count = 0
        self._taken_count = 0

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def __len__(self) -> int:
        return 0

    def put(self, item: Any) -> bool:
        """Hand an item to a consumer.

        Returns:
            True once a consumer has received the item, False if the queue was
            closed before that happened.
        """
        with self._cond:
            while self._has_item and not self._closed:
                self._cond.wait()
            if self._closed:
                return False
            self._item = item
            self._has_item = True
            self._put_count += 1
            ticket = self._put_count
            self._cond.notify_all()
            while self._taken_count < ticket and not self._closed:
                self._cond.wait()
            if self._taken_count < ticket:
                # Closed with nobody left to receive.
                self._has_item = False
                self._item = None
                return False
            return True

    def get(self) -> Any:
        """Receive the next item, blocking until one is handed over.

        Raises:
            QueueClosed: If the queue is closed and no item is pending.
        """
        with self._cond:
            while not self._has_item and not self._closed:
                self._cond.wait()
            if not self._has_item:
                raise QueueClosed("queue closed")
            item = self._item
            self._item = None
            self._has_item = False
            self._taken_count += 1
            self._cond.notify_all()
            return item

    def close(self) -> None:
        """Signal that no more items will be handed over."""
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def __iter__(self) -> Iterator[Any]:
        while True:
            try:
                yield self.get()
            except QueueClosed:
                return
