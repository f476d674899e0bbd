from operator import attrgetter

import structlog
from django.db import transaction

from ..config import PRACTICE_ORDER
from ..data import repos
from ..domain import (
    AnswerDifficulty,
    Card,
    compute_progress,
    get_hint,
    practice,
    review,
    to_bucket_sets,
)

logger = structlog.get_logger()


def practice_session():
    """Cards due on the current host day, in a stable order."""
    day = repos.current_day()
    due = practice(to_bucket_sets(repos.load_bucket_map()), day)
    cards = sorted(due, key=attrgetter(*PRACTICE_ORDER))

    logger.info("practice_session", day=day, card_count=len(cards))
    return cards, day


def record_review(front, back, difficulty):
    difficulty = AnswerDifficulty.coerce(difficulty)
    logger.info("review_received", front=front, back=back, difficulty=int(difficulty))

    # Read, compute and publish the new map as one atomic step per review
    with transaction.atomic():
        bucket_map = repos.lock_bucket_map()
        day = repos.current_day()
        card = Card(front, back)
        _, record = review(bucket_map, card, difficulty, day)
        repos.save_bucket(record.card, record.new_bucket)
        repos.append_practice_record(record)

    logger.info(
        "review_recorded",
        front=front,
        back=back,
        day=day,
        difficulty=difficulty.name,
        previous_bucket=record.previous_bucket,
        new_bucket=record.new_bucket,
    )
    return record


def hint_for(front, back):
    card = repos.get_card(front, back)
    hint = get_hint(card)
    logger.info("hint_generated", front=front, default=hint != card.hint)
    return hint


def progress():
    stats = compute_progress(repos.load_bucket_map(), repos.load_history())
    logger.info(
        "progress_computed",
        accuracy_rate=stats.accuracy_rate,
        average_difficulty=stats.average_difficulty,
        bucket_count=len(stats.bucket_distribution),
    )
    return stats


def next_day():
    day = repos.advance_day()
    logger.info("day_advanced", current_day=day)
    return day


def add_card(front, back, hint=None, tags=()):
    card = Card(front, back, hint=hint, tags=tags)
    row = repos.create_card(card)
    logger.info("card_created", card_id=row.pk, front=front, tags=list(card.tags))
    return row
