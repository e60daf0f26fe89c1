"""Routes between two stations."""

from dataclasses import dataclass

from railbooking.errors import ParameterException


@dataclass(frozen=True, eq=False)
class Route:
    """A route of a given length in kilometres between two points."""

    length: int
    start_point: str
    end_point: str

    def __post_init__(self):
        if self.length <= 0:
            raise ParameterException("Error! Length must be positive")
        if self.start_point == "":
            raise ParameterException("Error! Start point is required")
        if self.end_point == "":
            raise ParameterException("Error! End point is required")

    def info(self):
        return (
            f"Trasa {self.start_point} - {self.end_point}. "
            f"Dlugosc: {self.length} km."
        )

    def __eq__(self, other):
        if not isinstance(other, Route):
            return NotImplemented
        return (
            self.length == other.length
            and self.start_point == other.start_point
            and self.end_point == other.end_point
        )

    def __hash__(self):
        return hash((self.length, self.start_point, self.end_point))