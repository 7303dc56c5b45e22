"""
Repositories package

Contains data access layer:
- base_repository: Base repository holding the shared database handle
- faucet_repository: Faucet-related database operations
"""

from .base_repository import BaseRepository
from .faucet_repository import FaucetRepository, is_unique_violation

__all__ = [
    "BaseRepository",
    "FaucetRepository",
    "is_unique_violation",
]
