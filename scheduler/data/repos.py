from django.db import IntegrityError, transaction

from ..domain import (
    AnswerDifficulty,
    BucketMap,
    Card,
    CardNotFound,
    DuplicateCard,
    PracticeRecord,
    card_key,
)
from .models import CardBucket, PracticeLog, StudyClock

CLOCK_PK = 1


def _to_card(row):
    return Card(row.front, row.back, hint=row.hint or None, tags=row.tags or ())


def _bucket_map_from(rows):
    buckets = {}
    for row in rows:
        buckets.setdefault(row.bucket, []).append(_to_card(row))
    return BucketMap(buckets)


def load_bucket_map():
    return _bucket_map_from(CardBucket.objects.all())


def lock_bucket_map():
    """
    Read the bucket map with every card row locked for update.
    Must be called inside transaction.atomic().
    """
    return _bucket_map_from(CardBucket.objects.select_for_update().order_by("id"))


def get_card(front, back):
    try:
        return _to_card(CardBucket.objects.get(card_key=card_key(front, back)))
    except CardBucket.DoesNotExist:
        raise CardNotFound(Card(front, back)) from None


def create_card(card):
    """
    Insert a new card into the first bucket. A card with the same front and
    back already stored trips the unique key and becomes DuplicateCard.
    """
    try:
        with transaction.atomic():
            return CardBucket.objects.create(
                front=card.front,
                back=card.back,
                hint=card.hint or "",
                tags=list(card.tags),
                bucket=0,
            )
    except IntegrityError:
        raise DuplicateCard(card.front, card.back) from None


def save_bucket(card, bucket):
    updated = CardBucket.objects.filter(card_key=card.key).update(bucket=bucket)
    if updated == 0:
        raise CardNotFound(card)


def append_practice_record(record):
    return PracticeLog.objects.create(
        card_key=record.card.key,
        front=record.card.front,
        back=record.card.back,
        day=record.day,
        difficulty=int(record.difficulty),
        previous_bucket=record.previous_bucket,
        new_bucket=record.new_bucket,
    )


def load_history():
    # the log keeps only front/back, hint and tags come from the card table
    cards = {row.card_key: _to_card(row) for row in CardBucket.objects.all()}
    history = []
    for log in PracticeLog.objects.all():
        card = cards.get(log.card_key) or Card(log.front, log.back)
        history.append(
            PracticeRecord(
                card=card,
                day=log.day,
                difficulty=AnswerDifficulty(log.difficulty),
                previous_bucket=log.previous_bucket,
                new_bucket=log.new_bucket,
            )
        )
    return history


def current_day():
    clock, _ = StudyClock.objects.get_or_create(pk=CLOCK_PK)
    return clock.day


def advance_day():
    with transaction.atomic():
        StudyClock.objects.get_or_create(pk=CLOCK_PK)
        clock = StudyClock.objects.select_for_update().get(pk=CLOCK_PK)
        clock.day += 1
        clock.save(update_fields=["day", "updated_at"])
        return clock.day


def reset_deck(cards):
    """Wipe cards, history and clock, then insert ``cards`` at bucket 0, day 0."""
    with transaction.atomic():
        PracticeLog.objects.all().delete()
        CardBucket.objects.all().delete()
        StudyClock.objects.update_or_create(pk=CLOCK_PK, defaults={"day": 0})
        CardBucket.objects.bulk_create(
            CardBucket(
                card_key=card.key,
                front=card.front,
                back=card.back,
                hint=card.hint or "",
                tags=list(card.tags),
                bucket=0,
            )
            for card in cards
        )
