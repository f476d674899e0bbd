class SchedulerError(Exception):
    """Base class for every failure raised by the scheduler."""


class CardNotFound(SchedulerError, LookupError):
    def __init__(self, card):
        self.card = card
        super().__init__(f"Card not found: {card!r}")


class InvalidDifficulty(SchedulerError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid difficulty level: {value}")


class ContractViolation(SchedulerError, ValueError):
    """The caller broke a precondition (negative day, malformed bucket map...)."""


class DuplicateCard(SchedulerError):
    def __init__(self, front, back):
        self.front = front
        self.back = back
        super().__init__(f"Card already exists: {front!r} / {back!r}")
