"""Immutable locale-data snapshots and the copy-on-write store holding them.

A LocaleData snapshot wraps a CLDR-shaped tree::

    {
        "main": {"de-DE": {"dates": {...}, "numbers": {...}}, ...},
        "supplemental": {"weekData": {...}, "numberingSystems": {...}},
    }

The tree is deep-frozen into MappingProxyType views when the snapshot is
built. Merging produces a new snapshot; nothing is mutated in place, so a
compiled formatter that captured a snapshot keeps seeing exactly that data.

Thread Safety:
    LocaleData is immutable. LocaleDataStore swaps snapshots under an RLock.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from threading import RLock
from types import MappingProxyType
from typing import Any, ClassVar

from .defaults import DEFAULT_LOCALE_OBJECT, DEFAULT_NUMBERING_SYSTEMS

__all__ = [
    "LocaleData",
    "LocaleDataStore",
    "get_value",
]

logger = logging.getLogger(__name__)


def get_value(path: str, obj: Mapping | None) -> Any:
    """Read a dotted path from a nested mapping.

    Missing keys, or a non-mapping met along the way, yield None.

    Example:
        >>> get_value("numbers.currencies.USD.symbol", {"numbers": {"currencies": {"USD": {"symbol": "$"}}}})
        '$'
        >>> get_value("a.b", {"a": 1}) is None
        True
    """
    current: Any = obj
    for key in path.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
        if current is None:
            return None
    return current


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({str(k): _freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


def _merge_into(target: dict[str, Any], source: Mapping) -> None:
    for key, value in source.items():
        key = str(key)
        existing = target.get(key)
        if isinstance(value, Mapping) and isinstance(existing, dict):
            _merge_into(existing, value)
        elif isinstance(value, Mapping):
            fresh: dict[str, Any] = {}
            _merge_into(fresh, value)
            target[key] = fresh
        else:
            target[key] = value


def _thaw(value: Mapping) -> dict[str, Any]:
    result: dict[str, Any] = {}
    _merge_into(result, value)
    return result


class LocaleData:
    """Immutable snapshot of a CLDR-shaped locale tree.

    Construct with ``LocaleData(tree)`` or grow an existing snapshot with
    ``merge()``. Snapshots hash by identity, so they can key compiled-closure
    caches.

    Example:
        >>> data = LocaleData.empty().merge({"main": {"fr": {"numbers": {}}}})
        >>> data.cultures
        ('fr',)
        >>> LocaleData.empty().cultures
        ()
    """

    __slots__ = ("_numbering_systems", "_tree")

    _EMPTY: ClassVar[LocaleData | None] = None

    def __init__(self, tree: Mapping | None = None) -> None:
        self._tree: Mapping[str, Any] = _freeze(tree or {})
        supplemental = get_value("supplemental.numberingSystems", self._tree) or {}
        self._numbering_systems: Mapping[str, Any] = MappingProxyType(
            {**_freeze(DEFAULT_NUMBERING_SYSTEMS), **supplemental}
        )

    @classmethod
    def empty(cls) -> LocaleData:
        """Shared snapshot with no loaded cultures."""
        if cls._EMPTY is None:
            cls._EMPTY = cls()
        return cls._EMPTY

    def __repr__(self) -> str:
        return f"LocaleData(cultures={self.cultures!r})"

    @property
    def tree(self) -> Mapping[str, Any]:
        """Read-only view of the whole tree."""
        return self._tree

    @property
    def cultures(self) -> tuple[str, ...]:
        """Culture ids present under ``main``."""
        return tuple(self._tree.get("main", {}))

    @property
    def numbering_systems(self) -> Mapping[str, Any]:
        """``supplemental.numberingSystems`` layered over the built-in table."""
        return self._numbering_systems

    def get(self, path: str) -> Any:
        """Read a dotted path, e.g. ``"supplemental.weekData.firstDay"``."""
        return get_value(path, self._tree)

    def merge(self, *trees: Mapping) -> LocaleData:
        """Deep-merge trees into a new snapshot; later trees win.

        Args:
            *trees: CLDR-shaped trees (plain dicts or frozen views)

        Returns:
            New LocaleData; the receiver is unchanged
        """
        merged = _thaw(self._tree)
        for tree in trees:
            _merge_into(merged, tree)
        return LocaleData(merged)

    def find_culture(self, culture: str) -> str | None:
        """Resolve a culture id against the loaded ones.

        Tries the exact id first, then a match ignoring ``-``/``_`` spelling
        and letter case.
        """
        main = self._tree.get("main", {})
        if culture in main:
            return culture
        wanted = culture.replace("_", "-").casefold()
        for candidate in main:
            if candidate.replace("_", "-").casefold() == wanted:
                return candidate
        return None

    def main_object(self, culture: str) -> Mapping[str, Any]:
        """Culture subtree, or the built-in default object when absent."""
        found = self.find_culture(culture) if culture else None
        if found is not None:
            return self._tree["main"][found]
        logger.debug("Culture %r not loaded; using built-in default locale object", culture)
        return _DEFAULT_MAIN_OBJECT


_DEFAULT_MAIN_OBJECT: Mapping[str, Any] = _freeze(DEFAULT_LOCALE_OBJECT)


class LocaleDataStore:
    """Holder of the current LocaleData snapshot with copy-on-write loading.

    Loading is expected during application start-up. Readers take a
    snapshot and keep using it; a concurrent ``load`` never changes a
    snapshot that was already handed out.

    Example:
        >>> store = LocaleDataStore()
        >>> before = store.snapshot
        >>> after = store.load({"main": {"de": {}}})
        >>> before.cultures, after.cultures
        ((), ('de',))
    """

    __slots__ = ("_lock", "_snapshot")

    def __init__(self, initial: LocaleData | None = None) -> None:
        self._lock = RLock()
        self._snapshot = initial or LocaleData.empty()

    @property
    def snapshot(self) -> LocaleData:
        """Current immutable snapshot."""
        with self._lock:
            return self._snapshot

    def load(self, *trees: Mapping) -> LocaleData:
        """Merge trees into a new snapshot and make it current.

        Returns:
            The new current snapshot
        """
        with self._lock:
            self._snapshot = self._snapshot.merge(*trees)
            logger.debug("Locale data loaded; cultures now %s", self._snapshot.cultures)
            return self._snapshot

    def reset(self) -> None:
        """Drop all loaded data."""
        with self._lock:
            self._snapshot = LocaleData.empty()
