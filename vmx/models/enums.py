from enum import Enum


class Band(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Direction(str, Enum):
    INCREASE = "increase"
    DECREASE = "decrease"
    FLAT = "flat"


class HeatLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SortMode(str, Enum):
    IMPACT = "impact"
    CATEGORY = "category"
