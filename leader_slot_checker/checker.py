import logging
import time
from dataclasses import dataclass
from typing import Optional

from tqdm import tqdm

from .config import AVERAGE_SLOT_DURATION, MAX_BLOCK_SLOTS
from .epoch_slots import resolve_epoch_window
from .exceptions import NoLeaderScheduleError
from .leader_schedule import LeaderScheduleIndex
from .neighbors import resolve_neighbors
from .production import SlotProductionChecker
from .report import ConsoleReporter, estimate_slot_time
from .skip_enrichment import EnrichmentProvider, enrich_leader
from .slot_blocks import group_slot_blocks

logger = logging.getLogger(__name__)


@dataclass
class CheckSummary:
    validator: str
    epoch: int
    scheduled: bool
    scheduled_slots: int = 0
    checked_slots: int = 0
    non_produced_slots: int = 0
    blocks_reported: int = 0


def check_validator_slots(rpc, provider: EnrichmentProvider, validator: str, epoch: Optional[int] = None,
                          reporter: ConsoleReporter = None, checker: SlotProductionChecker = None,
                          show_progress: bool = True, now: Optional[float] = None) -> CheckSummary:
    """
    Reconcile one validator's leader slots for an epoch against produced blocks.

    Blocks are processed in ascending slot order, one RPC or HTTP request at a
    time. Any lookup failure propagates and ends the run; there are no partial
    results.
    """
    if reporter is None:
        reporter = ConsoleReporter()
    if checker is None:
        checker = SlotProductionChecker(rpc, validator)

    epoch_info = rpc.get_epoch_info()
    current_slot = rpc.get_slot()
    window = resolve_epoch_window(epoch_info, epoch)
    reporter.epoch_selected(window)
    logger.info(f"Epoch {window.epoch} starts at slot {window.first_slot}, current slot {current_slot}")

    schedule = rpc.get_leader_schedule(window.first_slot)
    if schedule is None:
        raise NoLeaderScheduleError(window.epoch)

    index = LeaderScheduleIndex(schedule, window.first_slot)
    our_slots = index.slots_for(validator)
    if our_slots is None:
        reporter.not_scheduled(validator, window.epoch)
        return CheckSummary(validator, window.epoch, scheduled=False)

    summary = CheckSummary(validator, window.epoch, scheduled=True, scheduled_slots=len(our_slots))
    reporter.assigned(validator, len(our_slots), window.epoch)
    logger.info(f"Schedule has {len(index)} slots across {index.identity_count} identities")

    blocks = group_slot_blocks(our_slots, MAX_BLOCK_SLOTS)
    if now is None:
        now = time.time()
    reporter.slot_duration(AVERAGE_SLOT_DURATION)

    with tqdm(total=len(our_slots), disable=not show_progress, unit="slot") as progress:
        def on_slot(slot):
            summary.checked_slots += 1
            progress.update(1)

        for block in blocks:
            non_produced = checker.check_block(block, current_slot, on_slot=on_slot)
            if not non_produced:
                continue

            summary.blocks_reported += 1
            summary.non_produced_slots += len(non_produced)
            neighbors = resolve_neighbors(index, block)

            reporter.block_header(block, estimate_slot_time(block.first_slot, current_slot, now))
            previous = None
            if neighbors.previous_leader is not None:
                previous = enrich_leader(provider, neighbors.previous_leader)
            reporter.previous_leader(neighbors.previous_slot, previous)
            reporter.our_slots(block, validator)
            reporter.next_leader(neighbors.next_slot, neighbors.next_leader)
            reporter.non_produced(non_produced)

    reporter.summary(summary)
    logger.info(f"Checked {summary.checked_slots} slots, {summary.non_produced_slots} not produced")
    return summary
