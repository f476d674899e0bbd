from .buckets import BucketMap, to_bucket_sets
from .cards import Card, card_key
from .enums import DIFFICULTY_LABELS, AnswerDifficulty
from .errors import (
    CardNotFound,
    ContractViolation,
    DuplicateCard,
    InvalidDifficulty,
    SchedulerError,
)
from .hints import get_hint
from .logic import practice, review, transition, update
from .progress import compute_progress
from .records import PracticeRecord, ProgressStats

__all__ = [
    "AnswerDifficulty",
    "BucketMap",
    "Card",
    "CardNotFound",
    "ContractViolation",
    "DIFFICULTY_LABELS",
    "DuplicateCard",
    "InvalidDifficulty",
    "PracticeRecord",
    "ProgressStats",
    "SchedulerError",
    "card_key",
    "compute_progress",
    "get_hint",
    "practice",
    "review",
    "to_bucket_sets",
    "transition",
    "update",
]
