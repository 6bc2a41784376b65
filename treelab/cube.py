"""A cube described by the length of its edge."""

from __future__ import annotations


class Cube:
    """A cube with a mutable edge length."""

    __slots__ = ("length",)

    def __init__(self, length: float) -> None:
        self.length = length

    def volume(self) -> float:
        """Return the volume of the cube."""
        return self.length * self.length * self.length

    def surface_area(self) -> float:
        """Return the total area of the six faces."""
        return 6 * self.length * self.length

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cube):
            return NotImplemented
        return self.length == other.length

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Cube({self.length!r})"