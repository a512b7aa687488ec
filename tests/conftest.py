import logging
from types import SimpleNamespace

import pytest

from leader_slot_checker.logging_config import PACKAGE_LOGGER
from leader_slot_checker.skip_enrichment import EnrichmentProvider


class FakeLedgerRpc:
    """In-memory stand-in for LedgerRpc that records every call in order."""

    def __init__(self, schedule=None, produced=None, epoch=500, absolute_slot=1100,
                 slot_index=100, slots_in_epoch=432000, current_slot=None):
        self.schedule = schedule
        self.produced = produced or {}
        self.epoch_info = SimpleNamespace(epoch=epoch, absolute_slot=absolute_slot,
                                          slot_index=slot_index, slots_in_epoch=slots_in_epoch)
        self.current_slot = absolute_slot if current_slot is None else current_slot
        self.calls = []

    def get_epoch_info(self):
        self.calls.append(("get_epoch_info",))
        return self.epoch_info

    def get_slot(self):
        self.calls.append(("get_slot",))
        return self.current_slot

    def get_leader_schedule(self, slot):
        self.calls.append(("get_leader_schedule", slot))
        return self.schedule

    def get_blocks(self, start_slot, end_slot):
        self.calls.append(("get_blocks", start_slot, end_slot))
        return [slot for slot in range(start_slot, end_slot + 1) if slot in self.produced]

    def get_slot_leaders(self, start_slot, limit):
        self.calls.append(("get_slot_leaders", start_slot, limit))
        leader = self.produced.get(start_slot)
        return [leader] if leader is not None else []

    def call_names(self):
        return [call[0] for call in self.calls]


class FakeEnrichmentProvider(EnrichmentProvider):

    def __init__(self, blamed=(), ranks=None):
        self.blamed = set(blamed)
        self.ranks = ranks or {}
        self.calls = []

    def is_skip_blamed(self, identity):
        self.calls.append(("is_skip_blamed", identity))
        return identity in self.blamed

    def latency_rank(self, identity):
        self.calls.append(("latency_rank", identity))
        return self.ranks.get(identity)


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
