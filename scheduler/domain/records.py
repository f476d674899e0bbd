from dataclasses import dataclass, field
from typing import Dict, Optional

from .cards import Card
from .enums import AnswerDifficulty


@dataclass(frozen=True)
class PracticeRecord:
    """One review outcome. Records are append-only and never edited."""

    card: Card
    day: int
    difficulty: AnswerDifficulty
    previous_bucket: int
    new_bucket: int


@dataclass(frozen=True)
class ProgressStats:
    accuracy_rate: float
    bucket_distribution: Dict[int, int] = field(default_factory=dict)
    average_difficulty: Optional[float] = None

    def as_dict(self):
        # an empty history has no average, so the key is left out entirely
        data = {
            "accuracyRate": self.accuracy_rate,
            "bucketDistribution": dict(self.bucket_distribution),
        }
        if self.average_difficulty is not None:
            data["averageDifficulty"] = self.average_difficulty
        return data
