from ..config import DEFAULT_HINT_PREFIX
from .cards import Card


def get_hint(card: Card) -> str:
    # only the emptiness check looks at the stripped hint
    hint = card.hint
    if isinstance(hint, str) and hint.strip():
        return hint
    return DEFAULT_HINT_PREFIX + card.front
