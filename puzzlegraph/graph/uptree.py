"""Disjoint-set forest ("up-tree") over hashable keys.

Finding and merging sets is delegated to `networkx.utils.UnionFind`; this
wrapper adds strict key management, per-key values and ordered flattening.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, Hashable, List, TypeVar

from networkx.utils import UnionFind

K = TypeVar("K", bound=Hashable)


class UpTree(Generic[K]):
    """Union-find structure with union by size and path compression.

    Unlike `UnionFind`, unknown keys are never added implicitly: they must be
    inserted with :meth:`insert_root` first. Each key may carry an arbitrary
    value, returned by :meth:`flatten`.
    """

    def __init__(self) -> None:
        self._sets = UnionFind()
        self._values: Dict[K, Any] = {}
        self._num_components = 0

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    @property
    def num_components(self) -> int:
        """Number of disjoint sets."""
        return self._num_components

    def insert_root(self, key: K, value: Any = None) -> None:
        """Add ``key`` as a new singleton set.

        Raises:
            KeyError: If ``key`` is already present.
        """
        if key in self._values:
            raise KeyError(f"Key {key!r} already exists in this up-tree")
        self._values[key] = value
        self._sets[key]  # registers key as its own root
        self._num_components += 1

    def find(self, key: K) -> K:
        """Return the root of the set containing ``key``.

        Raises:
            KeyError: If ``key`` was never inserted.
        """
        if key not in self._values:
            raise KeyError(f"Key {key!r} is not in this up-tree")
        return self._sets[key]

    def union(self, a: K, b: K) -> bool:
        """Merge the sets containing ``a`` and ``b``.

        Returns:
            False if they were already in the same set, True otherwise.
        """
        if self.find(a) == self.find(b):
            return False
        self._sets.union(a, b)
        self._num_components -= 1
        return True

    def flatten(self) -> List[Dict[K, Any]]:
        """Return every set as a mapping of its keys to their values.

        Sets are ordered by their earliest inserted key, and keys within a
        set keep insertion order.
        """
        groups: Dict[K, Dict[K, Any]] = {}
        for key, value in self._values.items():
            groups.setdefault(self.find(key), {})[key] = value
        return list(groups.values())
