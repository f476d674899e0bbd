from django.db import models
from django.utils import timezone

from ..domain.cards import card_key


class CardBucket(models.Model):
    card_key = models.CharField(max_length=64, unique=True, editable=False)
    front = models.TextField()
    back = models.TextField()
    hint = models.TextField(blank=True, default="")
    tags = models.JSONField(default=list, blank=True)
    bucket = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(default=timezone.now)  # UTC
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["bucket"], name="cardbucket_bucket_idx"),
        ]

    def save(self, *args, **kwargs):
        self.card_key = card_key(self.front, self.back)
        super().save(*args, **kwargs)


class PracticeLog(models.Model):
    card_key = models.CharField(max_length=64, editable=False)
    front = models.TextField()
    back = models.TextField()
    day = models.PositiveIntegerField()
    difficulty = models.SmallIntegerField()
    previous_bucket = models.PositiveIntegerField()
    new_bucket = models.PositiveIntegerField()
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["card_key", "created_at"], name="practicelog_card_idx"),
        ]

    def save(self, *args, **kwargs):
        self.card_key = card_key(self.front, self.back)
        super().save(*args, **kwargs)


class StudyClock(models.Model):
    """Single row holding the host's practice day counter."""

    day = models.PositiveIntegerField(default=0)
    updated_at = models.DateTimeField(auto_now=True)
