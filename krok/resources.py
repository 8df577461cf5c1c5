"""Reference-counted handles and caches that hold them."""

from __future__ import annotations

import copy
import logging
from typing import Generic, Hashable, TypeVar

_log = logging.getLogger(__name__)


class _Tally:
    __slots__ = ("value",)

    def __init__(self) -> None:
        self.value = 1


class Counted:
    """A handle that shares a live-handle count with every handle made from it by ``share``."""

    def __init__(self) -> None:
        self._tally = _Tally()
        self._released = False

    def share(self):
        """Return a new handle to the same resource, raising the shared count by one."""
        other = copy.copy(self)
        other._released = False
        self._tally.value += 1
        return other

    def release(self) -> None:
        """Drop this handle; releasing twice has no further effect."""
        if self._released:
            return
        self._released = True
        self._tally.value -= 1

    def count(self) -> int:
        return self._tally.value

    def is_last(self) -> bool:
        return self.count() == 1

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.release()


R = TypeVar("R", bound=Counted)
K = TypeVar("K", bound=Hashable)


class ResourceCache(Generic[R, K]):
    """Stores one handle per key; each stored handle is shared from the one added."""

    def __init__(self) -> None:
        self._index: dict[K, int] = {}
        self._resources: list[R] = []

    def __len__(self) -> int:
        return len(self._resources)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def _key_at(self, index: int) -> K:
        for key, value in self._index.items():
            if value == index:
                return key
        raise ValueError("Value was not found in resource map")

    def get(self, key: K) -> R:
        return self._resources[self._index[key]]

    def exists(self, key: K) -> bool:
        return key in self._index

    def add(self, key: K, resource: R) -> None:
        if self.exists(key):
            raise ValueError(f"Key {key!r} already exists, cannot add a new resource")
        self._resources.append(resource.share())
        self._index[key] = len(self._resources) - 1

    def clear(self) -> None:
        """Release every stored handle, warning about those still shared elsewhere."""
        while self._resources:
            index = len(self._resources) - 1
            resource = self._resources[index]
            if not resource.is_last():
                _log.warning(
                    "Resource %r in cache is not the last handle and cannot be cleaned up",
                    self._key_at(index),
                )
            self._resources.pop()
            resource.release()
        self._index.clear()


class SelfRegResourceCache(ResourceCache[R, K]):
    """A cache that reuses slots whose resource is no longer held outside the cache."""

    def add(self, key: K, resource: R) -> None:
        if self.exists(key):
            raise ValueError(f"Key {key!r} already exists, cannot add a new resource")
        index = next(
            (i for i, stored in enumerate(self._resources) if stored.is_last()),
            len(self._resources),
        )
        if index == len(self._resources):
            self._resources.append(resource.share())
        else:
            _log.info("Found a lonely resource, it will be overwritten by a new one")
            previous = self._key_at(index)
            old = self._resources[index]
            self._resources[index] = resource.share()
            old.release()
            del self._index[previous]
        self._index[key] = index