"""Item stacks held in a fixed number of slots, and a selectable inventory bar."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass
class Item:
    """Description of an item kind: its name, how many fit in one slot, its picture."""

    name: str = ""
    stack_max: int = 1
    texture: Any = None
    kind: int = 0


@dataclass(order=True)
class UniqueItem:
    """One slot's content: an item id and how many of it are stacked.

    Item id 0 means the slot is empty. Ordering is by item id, then stack.
    """

    item: int = 0
    stack: int = 0


class ShareItem:
    """A resizable list of item slots."""

    def __init__(self, size: int = 0) -> None:
        self.slots: list[UniqueItem] = []
        self.resize(size)

    def resize(self, size: int) -> ShareItem:
        """Set the number of slots; new slots are empty."""
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")
        del self.slots[size:]
        self.slots.extend(UniqueItem() for _ in range(size - len(self.slots)))
        return self

    def grow(self, delta: int) -> ShareItem:
        """Change the number of slots by ``delta``, never going below zero."""
        return self.resize(max(0, len(self.slots) + delta))

    def sort_up(self) -> ShareItem:
        """Sort slots by item id, then stack, ascending."""
        self.slots.sort()
        return self

    def sort_down(self) -> ShareItem:
        """Sort slots by item id, then stack, descending."""
        self.slots.sort(reverse=True)
        return self

    def __len__(self) -> int:
        return len(self.slots)

    def __iter__(self) -> Iterator[UniqueItem]:
        return iter(self.slots)

    def __getitem__(self, index: int) -> UniqueItem:
        return self.slots[index]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.slots):
            raise IndexError(f"slot index out of range: {index}")

    def put(self, index: int, item: int | UniqueItem, stack: int = 1) -> ShareItem:
        """Overwrite one slot with ``item`` stacked ``stack`` times."""
        self._check_index(index)
        if isinstance(item, UniqueItem):
            self.slots[index] = UniqueItem(item.item, item.stack)
        else:
            self.slots[index] = UniqueItem(item, stack)
        return self

    def add(self, item: int, stack: int, maximum: int) -> UniqueItem:
        """Store ``stack`` of ``item``, filling matching or empty slots in order.

        Each slot holds at most ``maximum``; a slot already above the maximum
        takes everything that is left. Returns what did not fit.
        """
        remaining = stack
        for slot in self.slots:
            if slot.item != item and slot.item != 0:
                continue
            slot.item = item
            room = maximum - slot.stack
            if room < 0 or room >= remaining:
                slot.stack += remaining
                return UniqueItem(item, 0)
            slot.stack += room
            remaining -= room
        return UniqueItem(item, remaining)

    def clear(self, index: int) -> UniqueItem:
        """Empty one slot and return what it held; out of range gives an empty item."""
        if not 0 <= index < len(self.slots):
            return UniqueItem()
        previous = self.slots[index]
        self.slots[index] = UniqueItem()
        return previous


@dataclass
class Inventory:
    """A bar of ``num_frame`` frames over a ``ShareItem`` with one frame selected."""

    share_item: ShareItem | None = field(default=None)
    num_frame: int = 0
    select_frame: int = 0

    def clear_item(self) -> UniqueItem:
        """Empty the selected slot and return what it held."""
        if self.share_item is None:
            return UniqueItem()
        return self.share_item.clear(self.select_frame)

    def select_add(self, delta: int) -> Inventory:
        """Move the selection by ``delta`` frames, wrapping around."""
        self.select_frame = (delta + self.select_frame + self.num_frame) % self.num_frame
        return self

    def select_next(self, pressed: bool) -> Inventory:
        """Move the selection one frame forward when ``pressed``."""
        if pressed:
            self.select_frame = (self.select_frame + 1) % self.num_frame
        return self

    def select_previous(self, pressed: bool) -> Inventory:
        """Move the selection one frame back when ``pressed``."""
        if pressed:
            self.select_frame = (self.select_frame + self.num_frame - 1) % self.num_frame
        return self

    def grow(self, delta: int) -> Inventory:
        """Change both the slot count and the frame count by ``delta``."""
        if self.share_item is None:
            return self
        self.share_item.grow(delta)
        self.num_frame = max(0, self.num_frame + delta)
        return self