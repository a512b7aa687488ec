from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .config import MAX_BLOCK_SLOTS


@dataclass(frozen=True)
class SlotBlock:
    """A run of consecutive leader slots, at most MAX_BLOCK_SLOTS long."""

    slots: Tuple[int, ...]

    def __post_init__(self):
        if not self.slots:
            raise ValueError("SlotBlock needs at least one slot")

    @property
    def first_slot(self) -> int:
        return self.slots[0]

    @property
    def last_slot(self) -> int:
        return self.slots[-1]

    def __len__(self):
        return len(self.slots)

    def __iter__(self):
        return iter(self.slots)


def group_slot_blocks(slots: Iterable[int], max_size: int = MAX_BLOCK_SLOTS) -> List[SlotBlock]:
    """
    Split sorted absolute slots into consecutive runs.

    A run ends at a gap, when it reaches max_size slots, or at the last slot.
    [100, 101, 102, 103, 104, 200, 201] -> [100..103], [104], [200, 201]
    """
    if max_size < 1:
        raise ValueError(f"max_size must be positive, got {max_size}")

    ordered = list(slots)
    blocks = []
    current = []
    for i, slot in enumerate(ordered):
        current.append(slot)
        is_last = i + 1 == len(ordered)
        if is_last or ordered[i + 1] != slot + 1 or len(current) == max_size:
            blocks.append(SlotBlock(tuple(current)))
            current = []
    return blocks
