"""Simple geometric values.

Thread Safety:
Rectangle is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Rectangle with width and height.

    Examples:
        >>> r = Rectangle(10, 20)
        >>> r.width, r.height
        (10, 20)
        >>> r.get_area()
        200

    """

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    def get_area(self) -> float:
        """Return width times height."""
        return self.area
