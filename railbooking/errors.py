"""Exceptions raised by the booking model."""


class BookingError(Exception):
    """Base class for every error raised by the booking model."""


class AvailableException(BookingError, LookupError):
    """A requested item is missing, taken or the collection is empty."""


class DuplicateException(BookingError):
    """An equal item is already stored."""


class ParameterException(BookingError, ValueError):
    """An argument given to a constructor or setter is invalid."""