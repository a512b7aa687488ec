import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from .config import NON_PRODUCED_DELAY
from .slot_blocks import SlotBlock

logger = logging.getLogger(__name__)


class SlotStatus(Enum):
    PRODUCED_BY_TARGET = "produced_by_target"
    PRODUCED_BY_OTHER = "produced_by_other"
    NOT_PRODUCED = "not_produced"


@dataclass(frozen=True)
class SlotProduction:
    slot: int
    status: SlotStatus
    leader: Optional[str] = None

    @property
    def produced_by_target(self) -> bool:
        return self.status is SlotStatus.PRODUCED_BY_TARGET


class SlotProductionChecker:
    """Checks, slot by slot, whether the target validator produced the block."""

    def __init__(self, rpc, validator: str, delay: float = NON_PRODUCED_DELAY,
                 sleep: Callable[[float], None] = time.sleep):
        self.rpc = rpc
        self.validator = validator
        self.delay = delay
        self.sleep = sleep

    def is_slot_produced(self, slot: int) -> bool:
        return len(self.rpc.get_blocks(slot, slot)) > 0

    def slot_leader(self, slot: int) -> Optional[str]:
        leaders = self.rpc.get_slot_leaders(slot, 1)
        return leaders[0] if leaders else None

    def check_slot(self, slot: int) -> SlotProduction:
        if not self.is_slot_produced(slot):
            result = SlotProduction(slot, SlotStatus.NOT_PRODUCED)
        else:
            leader = self.slot_leader(slot)
            if leader == self.validator:
                return SlotProduction(slot, SlotStatus.PRODUCED_BY_TARGET, leader)
            if leader is None:
                # Block exists but the node has no leader info for it
                result = SlotProduction(slot, SlotStatus.NOT_PRODUCED)
            else:
                result = SlotProduction(slot, SlotStatus.PRODUCED_BY_OTHER, leader)

        logger.debug(f"Slot {slot}: {result.status.value} (leader={result.leader})")
        if self.delay > 0:
            self.sleep(self.delay)
        return result

    def check_block(self, block: SlotBlock, current_slot: int,
                    on_slot: Optional[Callable[[int], None]] = None) -> List[SlotProduction]:
        """
        Check every slot of block up to current_slot and return the ones the
        validator did not produce, ascending. Future slots are left out entirely.
        """
        non_produced = []
        for slot in block:
            if slot > current_slot:
                continue
            result = self.check_slot(slot)
            if not result.produced_by_target:
                non_produced.append(result)
            if on_slot is not None:
                on_slot(slot)
        return non_produced
