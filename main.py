"""
Main entrypoint: resolve one address to its Mango trade-log accounts.

Env: SOLANA_RPC_URL, MANGO_LOG_INDEX_URL, MANGO_PROGRAM_ID, RPC_TIMEOUT_SEC, INDEX_TIMEOUT_SEC,
LOG_LEVEL, LOG_FORMAT. Same as the installed `mangologs` console script.
"""

import sys

# Configure structured logging before other imports that may log
from mangologs.mangologs_logging import get_logger  # noqa: F401
from mangologs.cli import main

if __name__ == "__main__":
    sys.exit(main())
