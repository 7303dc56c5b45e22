"""
Services package

Contains business logic services:
- catalog_service: Filtered read access to verified faucets
- submission_service: Validation and storage of new faucet submissions
"""

from .catalog_service import CatalogService
from .submission_service import SubmissionService

__all__ = [
    "CatalogService",
    "SubmissionService",
]
