from .base import BaseRepository
from .submission_repository import SubmissionRepository

__all__ = [
    "BaseRepository",
    "SubmissionRepository",
]
