from enum import IntEnum

from .errors import InvalidDifficulty


class AnswerDifficulty(IntEnum):
    WRONG = 0
    HARD = 1
    EASY = 2

    @classmethod
    def coerce(cls, value):
        """Return the member for ``value`` or raise InvalidDifficulty.

        Accepts members, plain ints and numeric strings (wire formats send
        either). Booleans are rejected even though they are ints.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidDifficulty(value)
        if isinstance(value, str):
            try:
                value = int(value.strip())
            except ValueError:
                raise InvalidDifficulty(value) from None
        if not isinstance(value, int):
            raise InvalidDifficulty(value)
        try:
            return cls(value)
        except ValueError:
            raise InvalidDifficulty(value) from None


DIFFICULTY_LABELS = {
    AnswerDifficulty.WRONG: "Wrong",
    AnswerDifficulty.HARD: "Hard",
    AnswerDifficulty.EASY: "Easy",
}
