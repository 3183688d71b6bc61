"""A B-tree of order N whose pages hold between N and 2N keys.

Inserting a key that is already present increments its counter
instead of adding a second entry; removing a key drops it with its
counter.
"""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


@dataclass
class Entry:
    """A key stored in a page, with its occurrence count and right child."""

    key: Any
    count: int = 1
    child: Optional["Page"] = None


@dataclass
class Page:
    """A tree page: a leftmost child followed by entries in key order."""

    first: Optional["Page"] = None
    entries: list[Entry] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return self.first is None

    def child(self, position: int) -> Optional["Page"]:
        """Child left of entry ``position``; ``len(entries)`` gives the last child."""
        return self.first if position == 0 else self.entries[position - 1].child

    def position_of(self, key: Any) -> int:
        return bisect_left([entry.key for entry in self.entries], key)


class BTree:
    """A B-tree keeping distinct keys with a counter for repeated inserts."""

    def __init__(self, order: int = 2) -> None:
        if order < 1:
            raise ValueError("order must be at least 1")
        self.order = order
        self.root: Optional[Page] = None
        self._size = 0

    @property
    def capacity(self) -> int:
        return 2 * self.order

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __iter__(self) -> Iterator[Any]:
        return iter(self.keys())

    def count(self, key: Any) -> int:
        """How many times ``key`` was inserted since it was last removed."""
        entry = self._find(key)
        return entry.count if entry else 0

    def keys(self) -> list[Any]:
        """All distinct keys in ascending order."""
        return list(self._walk(self.root))

    def levels(self) -> list[tuple[int, list[Any]]]:
        """Pages as (level, keys) pairs, children listed before their parent."""
        result: list[tuple[int, list[Any]]] = []
        self._collect_levels(self.root, 0, result)
        return result

    def render(self) -> str:
        """One line per page, in the order given by :meth:`levels`."""
        return "\n".join(
            f"Level {level}: " + " ".join(str(key) for key in keys)
            for level, keys in self.levels()
        )

    def insert(self, key: Any) -> None:
        """Add ``key``, or count one more occurrence if it is present."""
        if self.root is None:
            self.root = Page(entries=[Entry(key)])
            self._size += 1
            return
        promoted = self._insert(self.root, key)
        if promoted is not None:
            self.root = Page(first=self.root, entries=[promoted])

    def remove(self, key: Any) -> None:
        """Remove ``key`` entirely; an absent key leaves the tree unchanged."""
        if self.root is None or key not in self:
            return
        self._remove(self.root, key)
        self._size -= 1
        while self.root is not None and not self.root.entries:
            self.root = self.root.first

    def _find(self, key: Any) -> Optional[Entry]:
        page = self.root
        while page is not None:
            position = page.position_of(key)
            if position < len(page.entries) and page.entries[position].key == key:
                return page.entries[position]
            page = page.child(position)
        return None

    def _walk(self, page: Optional[Page]) -> Iterator[Any]:
        if page is None:
            return
        yield from self._walk(page.first)
        for entry in page.entries:
            yield entry.key
            yield from self._walk(entry.child)

    def _collect_levels(
        self, page: Optional[Page], level: int, out: list[tuple[int, list[Any]]]
    ) -> None:
        if page is None:
            return
        self._collect_levels(page.first, level + 1, out)
        for entry in page.entries:
            self._collect_levels(entry.child, level + 1, out)
        out.append((level, [entry.key for entry in page.entries]))

    def _insert(self, page: Page, key: Any) -> Optional[Entry]:
        """Insert below ``page``; return the entry pushed up by a split, if any."""
        position = page.position_of(key)
        if position < len(page.entries) and page.entries[position].key == key:
            page.entries[position].count += 1
            return None
        if page.is_leaf:
            incoming: Optional[Entry] = Entry(key)
            self._size += 1
        else:
            incoming = self._insert(page.child(position), key)
            if incoming is None:
                return None
        page.entries.insert(position, incoming)
        if len(page.entries) <= self.capacity:
            return None
        median = page.entries[self.order]
        right = Page(first=median.child, entries=page.entries[self.order + 1:])
        page.entries = page.entries[: self.order]
        median.child = right
        return median

    def _remove(self, page: Page, key: Any) -> bool:
        """Remove ``key`` below ``page``; return whether ``page`` underflowed."""
        position = page.position_of(key)
        if position < len(page.entries) and page.entries[position].key == key:
            if page.is_leaf:
                del page.entries[position]
                return len(page.entries) < self.order
            if self._remove_max(page.child(position), page.entries[position]):
                self._rebalance(page, position)
            return len(page.entries) < self.order
        child = page.child(position)
        if child is None:
            return False
        if self._remove(child, key):
            self._rebalance(page, position)
        return len(page.entries) < self.order

    def _remove_max(self, page: Page, target: Entry) -> bool:
        """Move the largest entry below ``page`` into ``target``."""
        if page.is_leaf:
            largest = page.entries.pop()
            target.key, target.count = largest.key, largest.count
            return len(page.entries) < self.order
        position = len(page.entries)
        if self._remove_max(page.child(position), target):
            self._rebalance(page, position)
        return len(page.entries) < self.order

    def _rebalance(self, parent: Page, position: int) -> None:
        """Fix the underflowing child at ``position`` by borrowing or merging."""
        child = parent.child(position)
        if position == 0:
            use_right = True
        elif position == len(parent.entries):
            use_right = False
        else:
            left = parent.child(position - 1)
            right = parent.child(position + 1)
            use_right = len(right.entries) > len(left.entries)

        if use_right:
            right = parent.child(position + 1)
            separator = parent.entries[position]
            child.entries.append(Entry(separator.key, separator.count, right.first))
            if len(right.entries) <= self.order:
                child.entries.extend(right.entries)
                del parent.entries[position]
            else:
                borrowed = right.entries.pop(0)
                right.first = borrowed.child
                separator.key, separator.count = borrowed.key, borrowed.count
        else:
            left = parent.child(position - 1)
            separator = parent.entries[position - 1]
            if len(left.entries) <= self.order:
                left.entries.append(Entry(separator.key, separator.count, child.first))
                left.entries.extend(child.entries)
                del parent.entries[position - 1]
            else:
                borrowed = left.entries.pop()
                child.entries.insert(
                    0, Entry(separator.key, separator.count, child.first)
                )
                child.first = borrowed.child
                separator.key, separator.count = borrowed.key, borrowed.count