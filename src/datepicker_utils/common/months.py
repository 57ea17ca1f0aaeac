"""
Month and range-boundary enumerations shared by the date picker helpers.
"""

from enum import Enum, IntEnum


class Months(IntEnum):
    """Calendar months, numbered the way ``datetime`` numbers them."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class DateRangeBoundary(Enum):
    """Side of a ``DateRange``."""

    START = 0
    END = 1
