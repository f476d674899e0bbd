# Django loads models from <app>.models; the tables live in data/models.py
from .data.models import CardBucket, PracticeLog, StudyClock  # noqa: F401
