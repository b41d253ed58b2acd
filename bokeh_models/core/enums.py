from enum import Enum


class Position(Enum):
    BELOW = "below"
    LEFT = "left"
    RIGHT = "right"
    ABOVE = "above"


class SpatialUnits(Enum):
    SCREEN = "screen"
    DATA = "data"


class IdStrategy(Enum):
    COUNTER = "counter"
    HASH = "hash"
