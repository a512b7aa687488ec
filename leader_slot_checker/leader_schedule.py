from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple


class LeaderScheduleIndex:
    """
    Absolute-slot view of one epoch's leader schedule.

    Built once from the RPC schedule (identity -> relative slot indices) and the
    epoch's first absolute slot. Both lookups are finalized in the constructor
    and exposed read-only.
    """

    def __init__(self, schedule: Mapping[str, Iterable[int]], epoch_first_slot: int):
        self.epoch_first_slot = epoch_first_slot

        slots_by_identity: Dict[str, Tuple[int, ...]] = {}
        slot_leaders: Dict[int, str] = {}
        for identity, relative_slots in schedule.items():
            absolute_slots = sorted(epoch_first_slot + slot for slot in relative_slots)
            slots_by_identity[identity] = tuple(absolute_slots)
            for slot in absolute_slots:
                slot_leaders[slot] = identity

        self._slots_by_identity = MappingProxyType(slots_by_identity)
        self._slot_leaders = MappingProxyType(dict(sorted(slot_leaders.items())))

    @property
    def slot_leaders(self) -> Mapping[int, str]:
        """Absolute slot -> identity, ascending by slot."""
        return self._slot_leaders

    @property
    def identity_count(self) -> int:
        return len(self._slots_by_identity)

    def __len__(self):
        return len(self._slot_leaders)

    def __contains__(self, identity):
        return identity in self._slots_by_identity

    def slots_for(self, identity: str) -> Optional[Tuple[int, ...]]:
        """Sorted absolute slots for identity, or None when it is not scheduled."""
        return self._slots_by_identity.get(identity)

    def leader_at(self, slot: int) -> Optional[str]:
        return self._slot_leaders.get(slot)
