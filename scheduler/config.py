INITIAL_BUCKET = 0
DEFAULT_HINT_PREFIX = "Think about the key concepts related to "
PRACTICE_ORDER = ("front", "back")  # due cards are listed in this order
