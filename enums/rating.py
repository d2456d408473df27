from enum import StrEnum, auto


class StarFill(StrEnum):
    FULL = auto()
    HALF = auto()
    EMPTY = auto()
