"""Named key-value maps with all-or-nothing transactions.

Reads go straight to ``KeyValueStore``. Writes are only possible through
``KeyValueStore.transaction()``: the yielded ``Transaction`` stages puts and
deletes, sees its own staged writes, and applies them to every map in one
commit when the ``with`` block exits cleanly. Leaving the block by an
exception drops the staged writes and re-raises.
"""

from contextlib import contextmanager
from typing import Any, Dict, Hashable, Iterator, List, Tuple

_DELETED = object()


class KeyValueStore:
    def __init__(self):
        self._maps: Dict[str, Dict[Hashable, Any]] = {}

    def get(self, map_name: str, key: Hashable, default: Any = None) -> Any:
        return self._maps.get(map_name, {}).get(key, default)

    def contains(self, map_name: str, key: Hashable) -> bool:
        return key in self._maps.get(map_name, {})

    def items(self, map_name: str) -> List[Tuple[Hashable, Any]]:
        """Snapshot of one map for read-only consumers."""
        return list(self._maps.get(map_name, {}).items())

    @contextmanager
    def transaction(self) -> Iterator["Transaction"]:
        tx = Transaction(self)
        yield tx
        tx.commit()

    def _apply(self, writes: Dict[Tuple[str, Hashable], Any]) -> None:
        for (map_name, key), value in writes.items():
            target = self._maps.setdefault(map_name, {})
            if value is _DELETED:
                target.pop(key, None)
            else:
                target[key] = value


class Transaction:
    def __init__(self, store: KeyValueStore):
        self._store = store
        self._writes: Dict[Tuple[str, Hashable], Any] = {}
        self._committed = False

    def get(self, map_name: str, key: Hashable, default: Any = None) -> Any:
        if (map_name, key) in self._writes:
            value = self._writes[(map_name, key)]
            return default if value is _DELETED else value
        return self._store.get(map_name, key, default)

    def contains(self, map_name: str, key: Hashable) -> bool:
        if (map_name, key) in self._writes:
            return self._writes[(map_name, key)] is not _DELETED
        return self._store.contains(map_name, key)

    def put(self, map_name: str, key: Hashable, value: Any) -> None:
        self._check_open()
        self._writes[(map_name, key)] = value

    def delete(self, map_name: str, key: Hashable) -> None:
        self._check_open()
        self._writes[(map_name, key)] = _DELETED

    def commit(self) -> None:
        self._check_open()
        self._store._apply(self._writes)
        self._committed = True

    def _check_open(self) -> None:
        if self._committed:
            raise RuntimeError("Transaction already committed")
