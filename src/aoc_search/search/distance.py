# search/distance.py
import math
from typing import Protocol


class Distance(Protocol):
    """
    Path cost. Needs addition with itself and a total order.
    Python ints never overflow, so accumulated costs stay exact.
    """

    def __add__(self, other, /): ...
    def __lt__(self, other, /) -> bool: ...


ZERO = 0
INFINITY = math.inf  # "unknown" sentinel; compares above every finite cost
