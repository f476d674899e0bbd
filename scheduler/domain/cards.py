import hashlib
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .errors import ContractViolation


def card_key(front: str, back: str) -> str:
    """Stable content hash of a card's identity, usable across processes."""
    digest = hashlib.sha256()
    digest.update(front.encode("utf-8"))
    digest.update(b"\x00")
    digest.update(back.encode("utf-8"))
    return digest.hexdigest()


@dataclass(frozen=True)
class Card:
    """
    A flashcard. Two cards are the same card when front and back match;
    hint and tags are content only and never take part in equality.
    """

    front: str
    back: str
    hint: Optional[str] = field(default=None, compare=False)
    tags: Tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self):
        if not isinstance(self.front, str) or not isinstance(self.back, str):
            raise ContractViolation("Flashcard front and back must be strings.")
        if not self.front.strip() or not self.back.strip():
            raise ContractViolation("Flashcard front and back cannot be empty.")
        tags = self.tags if self.tags is not None else ()
        # a bare string would otherwise split into characters
        if not isinstance(tags, (list, tuple)):
            raise ContractViolation(f"Flashcard tags must be a list of strings, got {tags!r}")
        if not all(isinstance(tag, str) for tag in tags):
            raise ContractViolation(f"Flashcard tags must be strings, got {tags!r}")
        # frozen: bypass __setattr__ to normalise tags into a hashable tuple
        object.__setattr__(self, "tags", tuple(tags))

    @property
    def key(self) -> str:
        """Registry key the host stores cards under."""
        return card_key(self.front, self.back)

    def __str__(self):
        return f'Card(Front: "{self.front}", Back: "{self.back}")'
