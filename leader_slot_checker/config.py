import os

# RPC endpoint, override with SOLANA_RPC_URL
RPC_ENDPOINT = os.environ.get('SOLANA_RPC_URL', 'https://api.mainnet-beta.solana.com')

# Third-party enrichment services
SKIP_BLAME_URL = os.environ.get('SKIP_BLAME_URL', 'https://api.trillium.so/skip_blame/')
VX_LEADERBOARD_URL = os.environ.get('VX_LEADERBOARD_URL', 'https://api.vx.tools/epochs/leaderboard/voting')

LOG_DIR = os.environ.get('LEADER_SLOT_CHECKER_LOG_DIR', os.path.expanduser('~/log'))

# Leader slots are handed out in runs of 4
MAX_BLOCK_SLOTS = 4

# Rough estimate in seconds, used for wall clock estimates only
AVERAGE_SLOT_DURATION = 0.4

# Pause after each non-produced slot to go easy on the RPC node
NON_PRODUCED_DELAY = 0.02

HTTP_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
    "User-Agent": "leader-slot-checker",
}
