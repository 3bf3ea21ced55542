"""
Client for the Mango transaction-log indexing service (wallet -> mango accounts).
"""

from mangologs.log_index.client import LogIndexClient

__all__ = ["LogIndexClient"]
