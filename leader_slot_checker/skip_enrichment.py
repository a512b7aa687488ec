"""
Skip blame and vote latency lookups for the leader scheduled before a gap.

Two third-party services are involved:

* the Trillium skip blame list, a GET returning ``data.validators[]`` with an
  ``identity_pubkey`` per chronic skipper, and
* the vx.tools voting leaderboard, a POST with an empty JSON body returning
  ``records[]`` with ``nodeAddress``, ``totalLatency`` and ``votedSlots``.

Responses are decoded into small typed records at the boundary. A body that
cannot be fetched or decoded is fatal (EnrichmentError). A decoded body that is
missing the expected list degrades: the identity is treated as not blamed, or
the latency detail is left out.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import FrozenSet, List, Optional

import requests

from .config import HTTP_HEADERS, SKIP_BLAME_URL, VX_LEADERBOARD_URL
from .exceptions import EnrichmentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LatencyRank:
    average_latency: float
    rank: int


@dataclass(frozen=True)
class SkipBlameRecord:
    identity: str
    on_blame_list: bool
    average_latency: Optional[float] = None
    rank: Optional[int] = None


@dataclass(frozen=True)
class SkipBlameList:
    identities: FrozenSet[str]

    @classmethod
    def from_json(cls, payload) -> Optional['SkipBlameList']:
        """Decode a skip blame body; None when the validators array is missing."""
        if not isinstance(payload, dict):
            raise EnrichmentError("Skip blame response is not a JSON object")
        data = payload.get("data")
        validators = data.get("validators") if isinstance(data, dict) else None
        if not isinstance(validators, list):
            return None
        identities = set()
        for validator in validators:
            if isinstance(validator, dict) and isinstance(validator.get("identity_pubkey"), str):
                identities.add(validator["identity_pubkey"])
        return cls(frozenset(identities))

    def __contains__(self, identity):
        return identity in self.identities


@dataclass(frozen=True)
class LatencyRecord:
    node_address: Optional[str]
    total_latency: Optional[int]
    voted_slots: Optional[int]

    @classmethod
    def from_json(cls, record) -> 'LatencyRecord':
        if not isinstance(record, dict):
            return cls(None, None, None)
        return cls(
            node_address=record.get("nodeAddress") if isinstance(record.get("nodeAddress"), str) else None,
            total_latency=_as_count(record.get("totalLatency")),
            voted_slots=_as_count(record.get("votedSlots")),
        )


def _as_count(value) -> Optional[int]:
    # bool is an int subclass, and JSON true is not a count
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    return None


def parse_leaderboard(payload) -> Optional[List[LatencyRecord]]:
    """Decode a leaderboard body; None when the records array is missing."""
    if not isinstance(payload, dict):
        raise EnrichmentError("Leaderboard response is not a JSON object")
    records = payload.get("records")
    if not isinstance(records, list):
        return None
    return [LatencyRecord.from_json(record) for record in records]


def find_latency_rank(records: List[LatencyRecord], identity: str) -> Optional[LatencyRank]:
    """
    Rank and average latency of the first record for identity.

    Later duplicates are ignored. Returns None when there is no record, when
    either count is missing, or when the node voted on no slots.
    """
    for index, record in enumerate(records):
        if record.node_address != identity:
            continue
        if record.total_latency is None or not record.voted_slots:
            return None
        return LatencyRank(record.total_latency / record.voted_slots, index + 1)
    return None


class EnrichmentProvider(ABC):

    @abstractmethod
    def is_skip_blamed(self, identity: str) -> bool:
        ...

    @abstractmethod
    def latency_rank(self, identity: str) -> Optional[LatencyRank]:
        ...


class HttpEnrichmentProvider(EnrichmentProvider):
    """Live lookups against the skip blame and vx.tools services, no caching."""

    def __init__(self, session: requests.Session = None, skip_blame_url: str = SKIP_BLAME_URL,
                 leaderboard_url: str = VX_LEADERBOARD_URL, timeout: Optional[float] = None):
        self.session = session if session is not None else requests.Session()
        self.skip_blame_url = skip_blame_url
        self.leaderboard_url = leaderboard_url
        self.timeout = timeout

    def _fetch_json(self, what: str, method: str, url: str, **kwargs):
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise EnrichmentError(f"Failed to fetch {what} data: {e}") from e
        try:
            return response.json()
        except ValueError as e:
            raise EnrichmentError(f"Failed to parse {what} response JSON: {e}") from e

    def fetch_skip_blame_list(self) -> Optional[SkipBlameList]:
        payload = self._fetch_json("skip blame", "GET", self.skip_blame_url)
        return SkipBlameList.from_json(payload)

    def fetch_leaderboard(self) -> Optional[List[LatencyRecord]]:
        payload = self._fetch_json("latency", "POST", self.leaderboard_url,
                                   json={}, headers=HTTP_HEADERS)
        return parse_leaderboard(payload)

    def is_skip_blamed(self, identity: str) -> bool:
        blame_list = self.fetch_skip_blame_list()
        if blame_list is None:
            logger.warning("'validators' array missing or skip blame JSON response changed.")
            return False
        return identity in blame_list

    def latency_rank(self, identity: str) -> Optional[LatencyRank]:
        records = self.fetch_leaderboard()
        if records is None:
            logger.debug("'records' array missing from leaderboard response")
            return None
        rank = find_latency_rank(records, identity)
        if rank is None:
            logger.debug(f"No usable leaderboard record for {identity}")
        return rank


def enrich_leader(provider: EnrichmentProvider, identity: str) -> SkipBlameRecord:
    """Skip blame annotation for one leader; the leaderboard is only hit for blamed identities."""
    if not provider.is_skip_blamed(identity):
        return SkipBlameRecord(identity, False)

    rank = provider.latency_rank(identity)
    if rank is None:
        return SkipBlameRecord(identity, True)
    return SkipBlameRecord(identity, True, rank.average_latency, rank.rank)
