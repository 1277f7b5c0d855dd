"""
Purpose: In-process lock manager for order assignment.
What it does:
Hands out one lock per key so that two assignments for the same city and the
same delivery time cannot both see a driver as free before either one saves.
Different keys never block each other.

Keys are any hashable value. A key's lock is dropped once its last holder
(or waiter) leaves, so finished slots do not accumulate.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Hashable, Iterator, List


class KeyedLockManager:
    def __init__(self):
        # key -> [lock, number of threads holding or waiting on it]
        self._locks: Dict[Hashable, List] = {}
        self._registry_lock = threading.Lock()

    def _acquire_entry(self, key: Hashable) -> threading.Lock:
        with self._registry_lock:
            entry = self._locks.get(key)
            if entry is None:
                entry = [threading.Lock(), 0]
                self._locks[key] = entry
            entry[1] += 1
            return entry[0]

    def _release_entry(self, key: Hashable) -> None:
        with self._registry_lock:
            entry = self._locks[key]
            entry[1] -= 1
            if entry[1] == 0:
                del self._locks[key]

    @contextmanager
    def lock(self, key: Hashable) -> Iterator[None]:
        key_lock = self._acquire_entry(key)
        try:
            with key_lock:
                yield
        finally:
            self._release_entry(key)

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._locks)
