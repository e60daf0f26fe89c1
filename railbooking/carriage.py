"""Carriages and travel classes."""

from enum import Enum

from railbooking.errors import AvailableException, ParameterException


class TravelClass(Enum):
    """Class of travel offered by a carriage or a ticket."""

    FIRST = 0
    SECOND = 1


class Carriage:
    """A carriage of a single travel class with numbered seats.

    Each seat carries a flag; ``True`` marks a seat that has been booked.
    """

    MIN_SEATS = 30

    def __init__(self, number_of_seats, carriage_class):
        if number_of_seats < self.MIN_SEATS:
            raise ParameterException("Error! Number of seats < 30")
        self._number_of_seats = number_of_seats
        self._carriage_class = TravelClass(carriage_class)
        self._seats = [False] * number_of_seats

    @property
    def number_of_seats(self):
        return self._number_of_seats

    @property
    def carriage_class(self):
        return self._carriage_class

    @property
    def free_seats(self):
        """Seat flags in seat order."""
        return tuple(self._seats)

    def info(self):
        return (
            f"Wagon klasy {self._carriage_class.value} posiada "
            f"{self._number_of_seats} miejsc."
        )

    def set_free_seat(self, index, value):
        if not 0 <= index < self._number_of_seats:
            raise AvailableException("Error! Seat not found")
        self._seats[index] = bool(value)

    def __eq__(self, other):
        if not isinstance(other, Carriage):
            return NotImplemented
        return (
            self._number_of_seats == other._number_of_seats
            and self._carriage_class == other._carriage_class
            and self._seats == other._seats
        )

    def __repr__(self):
        return (
            f"Carriage({self._number_of_seats!r}, {self._carriage_class})"
        )