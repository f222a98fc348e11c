"""A container that stores values in fixed-size blocks with stable positions."""

from __future__ import annotations

import copy as _copy
import sys
from functools import total_ordering
from typing import Any, Iterator

_HOLE = object()


class _Block:
    """A fixed number of slots, reusing the most recently freed slot first."""

    __slots__ = ("owner", "slots", "fresh", "deleted", "size")

    def __init__(self, owner: "BucketStorage", capacity: int) -> None:
        self.owner = owner
        self.slots: list = [_HOLE] * capacity
        self.fresh = 0
        self.deleted: list[int] = []
        self.size = 0

    @property
    def full(self) -> bool:
        return self.size == len(self.slots)

    def insert(self, value: Any) -> int:
        slot = self.deleted.pop() if self.deleted else self._take_fresh()
        self.slots[slot] = value
        self.size += 1
        return slot

    def _take_fresh(self) -> int:
        slot = self.fresh
        self.fresh += 1
        return slot

    def erase(self, slot: int) -> bool:
        """Free a slot; return True if the block was full before."""
        was_full = self.full
        self.slots[slot] = _HOLE
        self.deleted.append(slot)
        self.size -= 1
        return was_full


@total_ordering
class Cursor:
    """An immutable position inside a BucketStorage."""

    __slots__ = ("_block", "_slot")

    def __init__(self, block: _Block, slot: int) -> None:
        self._block = block
        self._slot = slot

    @property
    def _storage(self) -> "BucketStorage":
        return self._block.owner

    @property
    def _is_end(self) -> bool:
        return self._block is self._storage._end

    def _position(self) -> tuple[int, int]:
        storage = self._storage
        if self._is_end:
            return len(storage._blocks), 0
        return storage._blocks.index(self._block), self._slot

    def _live(self) -> bool:
        return not self._is_end and self._block.slots[self._slot] is not _HOLE

    def value(self) -> Any:
        """Return the value at this position."""
        if not self._live():
            raise IndexError("cursor does not point at a value")
        return self._block.slots[self._slot]

    def next(self) -> "Cursor":
        """Return the cursor of the following value, or the end cursor."""
        if self._is_end:
            raise IndexError("cannot advance past the end")
        index, slot = self._position()
        return self._storage._forward(index, slot + 1)

    def prev(self) -> "Cursor":
        """Return the cursor of the preceding value."""
        index, slot = self._position()
        found = self._storage._backward(index, slot - 1 if not self._is_end else None)
        if found is None:
            raise IndexError("cannot move before the beginning")
        return found

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._block is other._block and self._slot == other._slot

    def __hash__(self) -> int:
        return hash((id(self._block), self._slot))

    def __lt__(self, other: "Cursor") -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._position() < other._position()

    def __repr__(self) -> str:
        if self._is_end:
            return "Cursor(end)"
        return f"Cursor(block={self._position()[0]}, slot={self._slot})"


class BucketStorage:
    """Unordered storage of values in blocks of a fixed capacity."""

    def __init__(self, block_capacity: int = 64) -> None:
        if block_capacity < 1:
            raise ValueError("block capacity must be positive")
        self._block_capacity = block_capacity
        self._blocks: list[_Block] = []
        self._free: list[_Block] = []
        self._count = 0
        self._end = _Block(self, 0)

    def _forward(self, index: int, slot: int) -> Cursor:
        for block in self._blocks[index:]:
            for position in range(slot, len(block.slots)):
                if block.slots[position] is not _HOLE:
                    return Cursor(block, position)
            slot = 0
        return self.end()

    def _backward(self, index: int, slot: int | None) -> Cursor | None:
        while index > 0 or (index == 0 and self._blocks and slot is not None and slot >= 0):
            if slot is None:
                index -= 1
                if index < 0:
                    return None
                slot = len(self._blocks[index].slots) - 1
            block = self._blocks[index]
            for position in range(slot, -1, -1):
                if block.slots[position] is not _HOLE:
                    return Cursor(block, position)
            slot = None
        return None

    def insert(self, value: Any) -> Cursor:
        """Store a value and return its cursor."""
        if not self._free:
            block = _Block(self, self._block_capacity)
            self._blocks.append(block)
            self._free.append(block)
        block = self._free[-1]
        slot = block.insert(value)
        self._count += 1
        if block.full:
            self._free.pop()
        return Cursor(block, slot)

    def erase(self, position: Cursor) -> Cursor:
        """Remove the value at a cursor and return the cursor of the next one."""
        if position == self.end():
            raise ValueError("Cannot delete through the end iterator")
        if position._storage is not self or not position._live():
            raise ValueError("cursor does not point at a value of this storage")
        following = position.next()
        block = position._block
        self._count -= 1
        if block.erase(position._slot):
            self._free.append(block)
        elif block.size == 0:
            self._blocks.remove(block)
            self._free.remove(block)
        return following

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __iter__(self) -> Iterator[Any]:
        for block in self._blocks:
            for value in block.slots:
                if value is not _HOLE:
                    yield value

    def capacity(self) -> int:
        """Return the number of slots held by all blocks."""
        return len(self._blocks) * self._block_capacity

    def shrink_to_fit(self) -> None:
        """Repack the values into as few blocks as possible."""
        if len(self) == self.capacity():
            return
        values = list(self)
        self.clear()
        for value in values:
            self.insert(value)

    def clear(self) -> None:
        """Remove every value and every block."""
        self._blocks = []
        self._free = []
        self._count = 0

    def swap(self, other: "BucketStorage") -> None:
        """Exchange the contents of two storages."""
        for name in ("_block_capacity", "_blocks", "_free", "_count", "_end"):
            mine, theirs = getattr(self, name), getattr(other, name)
            setattr(self, name, theirs)
            setattr(other, name, mine)
        for storage in (self, other):
            storage._end.owner = storage
            for block in storage._blocks:
                block.owner = storage

    def copy(self) -> "BucketStorage":
        """Return a copy with the same layout and copies of the values."""
        clone = BucketStorage(self._block_capacity)
        mapping: dict[int, _Block] = {}
        for block in self._blocks:
            twin = _Block(clone, self._block_capacity)
            twin.slots = [v if v is _HOLE else _copy.copy(v) for v in block.slots]
            twin.fresh = block.fresh
            twin.deleted = list(block.deleted)
            twin.size = block.size
            mapping[id(block)] = twin
            clone._blocks.append(twin)
        clone._free = [mapping[id(block)] for block in self._free]
        clone._count = self._count
        return clone

    def begin(self) -> Cursor:
        """Return the cursor of the first value, or the end cursor."""
        return self._forward(0, 0)

    def end(self) -> Cursor:
        """Return the cursor one past the last value."""
        return Cursor(self._end, 0)

    def get_to_distance(self, position: Cursor, distance: int) -> Cursor:
        """Move a cursor forward (positive) or backward (negative) by steps."""
        for _ in range(abs(distance)):
            position = position.next() if distance > 0 else position.prev()
        return position


def main(argv=None) -> int:
    """Store three integers and print them in storage order."""
    storage = BucketStorage()
    for i in range(3):
        storage.insert(i)
    position = storage.begin()
    while position < storage.end():
        print(position.value())
        position = position.next()
    return 0


if __name__ == "__main__":
    sys.exit(main())