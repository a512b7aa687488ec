from dataclasses import dataclass
from typing import Optional

from .leader_schedule import LeaderScheduleIndex
from .slot_blocks import SlotBlock


@dataclass(frozen=True)
class BlockNeighbors:
    previous_slot: int
    previous_leader: Optional[str]
    next_slot: int
    next_leader: Optional[str]


def resolve_neighbors(index: LeaderScheduleIndex, block: SlotBlock) -> BlockNeighbors:
    # Leaders outside the epoch or unscheduled slots come back as None
    previous_slot = max(block.first_slot - 1, 0)
    next_slot = block.last_slot + 1
    return BlockNeighbors(
        previous_slot=previous_slot,
        previous_leader=index.leader_at(previous_slot),
        next_slot=next_slot,
        next_leader=index.leader_at(next_slot),
    )
