class SlotCheckError(Exception):
    """Base class for every fatal condition raised by the checker."""


class InvalidPubkeyError(SlotCheckError):
    def __init__(self, pubkey):
        super().__init__(f"Invalid validator pubkey: {pubkey}")
        self.pubkey = pubkey


class RpcLookupError(SlotCheckError):
    """An RPC call failed; the originating exception is chained."""


class NoLeaderScheduleError(SlotCheckError):
    def __init__(self, epoch):
        super().__init__(f"No leader schedule returned for epoch {epoch}")
        self.epoch = epoch


class EnrichmentError(SlotCheckError):
    """A skip blame or leaderboard lookup could not be completed or decoded."""
