class Constants:
    DEFAULT_WEIGHT = 1
