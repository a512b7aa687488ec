from .checker import CheckSummary, check_validator_slots
from .epoch_slots import EpochWindow, resolve_epoch_window
from .leader_schedule import LeaderScheduleIndex
from .neighbors import BlockNeighbors, resolve_neighbors
from .production import SlotProduction, SlotProductionChecker, SlotStatus
from .skip_enrichment import EnrichmentProvider, HttpEnrichmentProvider, SkipBlameRecord, enrich_leader
from .slot_blocks import SlotBlock, group_slot_blocks

__version__ = '0.1.0'

__all__ = [
    'CheckSummary',
    'check_validator_slots',
    'EpochWindow',
    'resolve_epoch_window',
    'LeaderScheduleIndex',
    'BlockNeighbors',
    'resolve_neighbors',
    'SlotProduction',
    'SlotProductionChecker',
    'SlotStatus',
    'EnrichmentProvider',
    'HttpEnrichmentProvider',
    'SkipBlameRecord',
    'enrich_leader',
    'SlotBlock',
    'group_slot_blocks',
]
