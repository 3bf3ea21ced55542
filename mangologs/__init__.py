"""
MangoLogs — resolve a Solana address to its Mango Markets trade-log accounts.

Validates the address, reads its on-chain account, follows Mango v3 accounts
back to their owner wallet and asks the transaction-log indexing service which
Mango accounts it has logs for. Read-only; never writes to the chain.
"""

__version__ = "0.1.0"
