import logging
from typing import Dict, List, Optional

from solana.rpc.api import Client
from solana.rpc.commitment import Finalized

from .config import RPC_ENDPOINT
from .exceptions import RpcLookupError

logger = logging.getLogger(__name__)


class LedgerRpc:
    """
    Read-only view of a Solana RPC node.

    Every call is issued synchronously, one at a time. Failures are re-raised
    as RpcLookupError with the originating exception chained; nothing is retried.
    """

    def __init__(self, rpc_url: str = RPC_ENDPOINT, client: Client = None):
        self.rpc_url = rpc_url
        self.client = client if client is not None else Client(rpc_url, commitment=Finalized)

    def _call(self, what: str, fn, *args):
        logger.debug(f"RPC {what} {args} on {self.rpc_url}")
        try:
            return fn(*args).value
        except Exception as e:
            raise RpcLookupError(f"Failed to {what}: {e}") from e

    def get_epoch_info(self):
        return self._call("get epoch info", self.client.get_epoch_info)

    def get_slot(self) -> int:
        return self._call("get current slot", self.client.get_slot)

    def get_leader_schedule(self, slot: int) -> Optional[Dict[str, List[int]]]:
        schedule = self._call("get leader schedule", self.client.get_leader_schedule, slot)
        if schedule is None:
            return None
        return {str(identity): list(slots) for identity, slots in schedule.items()}

    def get_blocks(self, start_slot: int, end_slot: int) -> List[int]:
        return list(self._call("get blocks", self.client.get_blocks, start_slot, end_slot))

    def get_slot_leaders(self, start_slot: int, limit: int) -> List[str]:
        leaders = self._call("get slot leaders", self.client.get_slot_leaders, start_slot, limit)
        return [str(leader) for leader in leaders]
