"""
Bucket storage for the Leitner scheduler.

A BucketMap is the scheduler's whole state: a sparse, immutable mapping from
bucket number to the frozenset of cards in that bucket. The sets partition
the card universe, so every card sits in exactly one bucket.
"""

from collections.abc import Mapping
from typing import Dict, FrozenSet, Iterable, Optional, Tuple

from .cards import Card
from .errors import ContractViolation
from ..config import INITIAL_BUCKET


def _check_bucket_number(bucket):
    if isinstance(bucket, bool) or not isinstance(bucket, int):
        raise ContractViolation(f"Bucket number must be an int, got {bucket!r}")
    if bucket < 0:
        raise ContractViolation(f"Bucket number must be non-negative, got {bucket}")


class BucketMap(Mapping):
    """
    Immutable bucket number -> frozenset[Card] mapping.

    Empty buckets are never stored. Use ``moved`` to derive a new map; the
    untouched bucket sets are shared with the original.
    """

    __slots__ = ("_buckets",)

    def __init__(self, buckets=None):
        self._buckets: Dict[int, FrozenSet[Card]] = {}
        seen: Dict[Card, int] = {}
        for bucket, cards in (buckets or {}).items():
            _check_bucket_number(bucket)
            cards = frozenset(cards)
            for card in cards:
                if not isinstance(card, Card):
                    raise ContractViolation(f"Bucket {bucket} holds a non-card: {card!r}")
                if card in seen:
                    raise ContractViolation(f"{card} is in buckets {seen[card]} and {bucket}")
                seen[card] = bucket
            if cards:
                self._buckets[bucket] = cards

    @classmethod
    def fresh(cls, cards: Iterable[Card]) -> "BucketMap":
        """Every card starts out in the least retained bucket."""
        return cls({INITIAL_BUCKET: cards})

    def __getitem__(self, bucket):
        return self._buckets[bucket]

    def __iter__(self):
        return iter(sorted(self._buckets))

    def __len__(self):
        return len(self._buckets)

    def __repr__(self):
        inner = ", ".join(f"{b}: {len(self._buckets[b])} cards" for b in self)
        return f"BucketMap({{{inner}}})"

    def bucket_of(self, card: Card) -> Optional[int]:
        for bucket, cards in self._buckets.items():
            if card in cards:
                return bucket
        return None

    def lookup(self, card: Card) -> Optional[Card]:
        """Return the stored card equal to ``card``, carrying its hint and tags."""
        bucket = self.bucket_of(card)
        if bucket is None:
            return None
        return next(stored for stored in self._buckets[bucket] if stored == card)

    def moved(self, card: Card, target: int) -> "BucketMap":
        """
        Return a map with ``card`` moved to bucket ``target``.

        Only the source and target bucket sets are rebuilt; the new map shares
        every other set with this one. When the card already sits in
        ``target`` this map itself is returned.
        """
        _check_bucket_number(target)
        source = self.bucket_of(card)
        if source is None:
            raise ContractViolation(f"{card} is not in any bucket")
        if source == target:
            return self
        stored = self.lookup(card)

        buckets = dict(self._buckets)
        remaining = buckets[source] - {stored}
        if remaining:
            buckets[source] = remaining
        else:
            del buckets[source]
        buckets[target] = buckets.get(target, frozenset()) | {stored}

        new_map = BucketMap.__new__(BucketMap)
        new_map._buckets = buckets
        return new_map


def to_bucket_sets(bucket_map) -> Tuple[FrozenSet[Card], ...]:
    """
    Densify a sparse bucket mapping into a tuple indexed 0..max bucket.

    Bucket numbers absent from the mapping become empty sets. Accepts a
    BucketMap or any plain mapping of bucket number to card collection.
    """
    if not bucket_map:
        return ()
    for bucket in bucket_map:
        _check_bucket_number(bucket)
    dense = [frozenset()] * (max(bucket_map) + 1)
    for bucket, cards in bucket_map.items():
        dense[bucket] = frozenset(cards)
    return tuple(dense)
