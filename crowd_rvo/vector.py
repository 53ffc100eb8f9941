"""A small immutable 2D vector used by all of the collision avoidance geometry.

Every operation returns a new instance so agent state is only ever replaced,
never mutated in place."""

import math
from collections.abc import Mapping
from typing import NamedTuple, Tuple, Union


class Vector2(NamedTuple):
    """A 2D vector value.

    Usage:
        >>> Vector2(3.0, 4.0).mag()
        5.0
        >>> Vector2(1.0, 2.0) + Vector2(0.5, 0.5)
        Vector2(x=1.5, y=2.5)
        >>> Vector2(1.0, 2.0) * 2
        Vector2(x=2.0, y=4.0)
    """

    x: float = 0.0
    y: float = 0.0

    @staticmethod
    def zero() -> "Vector2":
        return Vector2(0.0, 0.0)

    @staticmethod
    def from_value(value: Union[Tuple[float, float], Mapping[str, float]]) -> "Vector2":
        """Build a vector from an (x, y) pair or a mapping with x and y keys.

        Usage:
            >>> Vector2.from_value({"x": 1, "y": -1})
            Vector2(x=1.0, y=-1.0)
        """
        if isinstance(value, Mapping):
            return Vector2(float(value["x"]), float(value["y"]))
        return Vector2(float(value[0]), float(value[1]))

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def abs_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    def mag(self) -> float:
        return math.hypot(self.x, self.y)

    def dist(self, other: "Vector2") -> float:
        return (self - other).mag()

    def normalize(self) -> "Vector2":
        """Return the unit vector. A zero vector stays zero.

        Usage:
            >>> Vector2(0.0, 2.0).normalize()
            Vector2(x=0.0, y=1.0)
            >>> Vector2.zero().normalize()
            Vector2(x=0.0, y=0.0)
        """
        magnitude = self.mag()
        if magnitude == 0:
            return Vector2.zero()
        return self * (1 / magnitude)

    def limit(self, max_magnitude: float) -> "Vector2":
        """Scale the vector down so its magnitude is at most `max_magnitude`.

        Usage:
            >>> Vector2(0.0, 10.0).limit(5.0)
            Vector2(x=0.0, y=5.0)
            >>> Vector2(0.3, 0.4).limit(5.0)
            Vector2(x=0.3, y=0.4)
        """
        if self.mag() <= max_magnitude:
            return self
        return self.normalize() * max_magnitude


def det(a: Vector2, b: Vector2) -> float:
    """The 2D cross product of `a` and `b`.

    Usage:
        >>> det(Vector2(1.0, 0.0), Vector2(0.0, 1.0))
        1.0
    """
    return a.x * b.y - a.y * b.x


def perp(vector: Vector2) -> Vector2:
    """Rotate `vector` by 90 degrees counter-clockwise."""
    return Vector2(-vector.y, vector.x)
