import sys
import time
from datetime import datetime, timezone
from typing import Iterable, Optional

from tqdm import tqdm

from .config import AVERAGE_SLOT_DURATION

BAD_SKIP_MARKER = "##ON BAD SKIP LIST##"
RED = '\033[91m'
RESET = '\033[0m'
SEPARATOR = "-" * 40


def estimate_slot_time(slot: int, current_slot: int, now: Optional[float] = None,
                       slot_duration: float = AVERAGE_SLOT_DURATION) -> datetime:
    """Wall clock estimate for slot, extrapolated from the current slot at a fixed slot duration."""
    if now is None:
        now = time.time()
    return datetime.fromtimestamp(now + (slot - current_slot) * slot_duration, tz=timezone.utc)


def format_timestamp(moment: datetime) -> str:
    return moment.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]


class ConsoleReporter:
    """
    Line-oriented report on a text stream.

    Lines go through tqdm.write so a running progress bar is redrawn below them
    instead of being torn.
    """

    def __init__(self, stream=None, color: Optional[bool] = None):
        self.stream = stream if stream is not None else sys.stdout
        if color is None:
            color = hasattr(self.stream, 'isatty') and self.stream.isatty()
        self.color = color

    def write(self, line: str = ""):
        tqdm.write(line, file=self.stream)

    def _marker(self) -> str:
        if self.color:
            return f"{RED}{BAD_SKIP_MARKER}{RESET}"
        return BAD_SKIP_MARKER

    def epoch_selected(self, window):
        if window.is_current:
            self.write(f"Using current epoch: {window.epoch}")
        else:
            self.write(f"Using configured epoch: {window.epoch}")

    def not_scheduled(self, validator: str, epoch: int):
        self.write(f"Validator {validator} is not scheduled to lead in epoch {epoch}.")

    def assigned(self, validator: str, slot_count: int, epoch: int):
        self.write(f"Validator {validator} is assigned to {slot_count} slots in epoch {epoch}.")

    def slot_duration(self, seconds: float):
        self.write(f"Using average slot duration: {seconds:.3f} seconds")

    def block_header(self, block, estimated_time: datetime):
        self.write(SEPARATOR)
        self.write(f"Block of slots: {list(block.slots)} at approximately {format_timestamp(estimated_time)} UTC")

    def previous_leader(self, slot: int, record):
        if record is None:
            self.write(f"Previous Slot {slot} Leader: Unknown or No Leader")
        elif not record.on_blame_list:
            self.write(f"Previous Slot {slot} Leader: {record.identity}")
        elif record.rank is None:
            self.write(f"Previous Slot {slot} Leader: {record.identity} {self._marker()}")
        else:
            self.write(f"Previous Slot {slot} Leader: {record.identity} {self._marker()} "
                       f"(Latency: {record.average_latency:.6f}, Rank: {record.rank})")

    def our_slots(self, block, validator: str):
        self.write(f"Our Validator Slots {block.first_slot} - {block.last_slot}: {validator}")

    def next_leader(self, slot: int, leader: Optional[str]):
        self.write(f"Next Slot {slot} Leader: {leader if leader is not None else 'Unknown or No Leader'}")

    def non_produced(self, results: Iterable):
        for result in results:
            if result.leader is not None:
                self.write(f"Slot {result.slot}: block produced by {result.leader}, not us!")
            else:
                self.write(f"Slot {result.slot}: no block produced (skipped?) or no leader info. Not produced by us.")

    def summary(self, summary):
        self.write(f"Done checking slots! Epoch {summary.epoch}: {summary.checked_slots}/{summary.scheduled_slots} "
                   f"slots checked, {summary.non_produced_slots} not produced by us "
                   f"across {summary.blocks_reported} blocks.")
