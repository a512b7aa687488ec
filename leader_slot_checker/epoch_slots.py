from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class EpochWindow:
    epoch: int
    first_slot: int
    slot_count: int
    is_current: bool

    @property
    def last_slot(self) -> int:
        return self.first_slot + self.slot_count - 1


def resolve_epoch_window(epoch_info, requested_epoch: Optional[int] = None) -> EpochWindow:
    """
    Return the slot window of an epoch relative to the chain's current epoch.

    epoch_info needs the attributes of a solders EpochInfo: epoch, absolute_slot,
    slot_index and slots_in_epoch.

    Past and future epochs are offset by the current slots_in_epoch. Epochs that
    ran with a different epoch length (early mainnet history) come out
    approximate; the first slot is never below 0.
    """
    current_epoch = epoch_info.epoch
    current_first_slot = epoch_info.absolute_slot - epoch_info.slot_index
    slots_per_epoch = epoch_info.slots_in_epoch

    if requested_epoch is None or requested_epoch == current_epoch:
        return EpochWindow(current_epoch, current_first_slot, slots_per_epoch, True)

    first_slot = current_first_slot + (requested_epoch - current_epoch) * slots_per_epoch
    return EpochWindow(requested_epoch, max(first_slot, 0), slots_per_epoch, False)
