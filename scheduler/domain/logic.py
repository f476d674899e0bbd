from typing import FrozenSet, Sequence, Tuple

from .buckets import BucketMap
from .cards import Card
from .enums import AnswerDifficulty
from .errors import CardNotFound, ContractViolation
from .records import PracticeRecord


def practice(bucket_sets: Sequence[FrozenSet[Card]], day: int) -> FrozenSet[Card]:
    """
    Cards due on ``day``: the bucket at index b is due when day % 2**b == 0.

    Bucket 0 is therefore due every day, and day 0 makes every bucket due.
    """
    if isinstance(day, bool) or not isinstance(day, int):
        raise ContractViolation(f"Practice day must be an int, got {day!r}")
    if day < 0:
        raise ContractViolation(f"Practice day must be non-negative, got {day}")

    due = set()
    for bucket, cards in enumerate(bucket_sets):
        if day % (1 << bucket) == 0:
            due.update(cards)
    return frozenset(due)


def transition(bucket: int, difficulty) -> int:
    difficulty = AnswerDifficulty.coerce(difficulty)
    if difficulty == AnswerDifficulty.WRONG:
        return 0
    if difficulty == AnswerDifficulty.HARD:
        return max(bucket - 1, 0)
    # Easy has no ceiling; high buckets just come up less and less often
    return bucket + 1


def update(bucket_map, card: Card, difficulty) -> BucketMap:
    """
    Return the bucket map with ``card`` moved according to ``difficulty``.

    The input map is never modified. When the card stays in its bucket (Wrong
    or Hard at bucket 0) the same immutable map comes back; otherwise a new
    map is built. Raises InvalidDifficulty for values
    outside AnswerDifficulty and CardNotFound when the card is in no bucket.
    """
    difficulty = AnswerDifficulty.coerce(difficulty)
    if not isinstance(bucket_map, BucketMap):
        bucket_map = BucketMap(bucket_map)

    current = bucket_map.bucket_of(card)
    if current is None:
        raise CardNotFound(card)
    return bucket_map.moved(card, transition(current, difficulty))


def review(bucket_map, card: Card, difficulty, day: int) -> Tuple[BucketMap, PracticeRecord]:
    """``update`` plus the PracticeRecord describing the move."""
    difficulty = AnswerDifficulty.coerce(difficulty)
    if not isinstance(bucket_map, BucketMap):
        bucket_map = BucketMap(bucket_map)

    new_map = update(bucket_map, card, difficulty)
    record = PracticeRecord(
        card=bucket_map.lookup(card),
        day=day,
        difficulty=difficulty,
        previous_bucket=bucket_map.bucket_of(card),
        new_bucket=new_map.bucket_of(card),
    )
    return new_map, record
