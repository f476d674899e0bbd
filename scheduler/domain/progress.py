"""
Progress statistics over the bucket map and the practice history.

Accuracy counts every attempt in the history, not only the latest attempt
per card: a card answered Wrong twice then Easy contributes 1/3.
"""

from collections import Counter
from typing import Iterable

from .enums import AnswerDifficulty
from .records import PracticeRecord, ProgressStats


def compute_progress(bucket_map, history: Iterable[PracticeRecord]) -> ProgressStats:
    distribution = {
        bucket: len(cards)
        for bucket, cards in sorted(bucket_map.items())
        if len(cards) > 0
    }

    difficulties = Counter(
        AnswerDifficulty.coerce(record.difficulty) for record in history
    )
    attempts = sum(difficulties.values())
    if attempts == 0:
        return ProgressStats(accuracy_rate=0.0, bucket_distribution=distribution)

    correct = attempts - difficulties[AnswerDifficulty.WRONG]
    total = sum(int(difficulty) * count for difficulty, count in difficulties.items())
    return ProgressStats(
        accuracy_rate=correct / attempts,
        bucket_distribution=distribution,
        average_difficulty=total / attempts,
    )
