"""Scheduled runs of a train along a route."""

import uuid
from datetime import timedelta

from railbooking.errors import ParameterException


def _format_time(moment):
    text = moment.strftime("%Y-%m-%d %H:%M:%S")
    zone = moment.tzname()
    return f"{text} {zone}" if zone else text


class Timetable:
    """A train running along a route between a start and an end time."""

    def __init__(self, train, route, start_time, end_time):
        if train is None:
            raise ParameterException("Error! Train is required")
        if start_time is None:
            raise ParameterException("Error! Start time is required")
        if route is None:
            raise ParameterException("Error! Route is required")
        if end_time is None:
            raise ParameterException("Error! End time is required")
        self._id = uuid.uuid4()
        self._train = train
        self._route = route
        self._start_time = start_time
        self._end_time = end_time

    @property
    def id(self):
        return self._id

    @property
    def train(self):
        return self._train

    @train.setter
    def train(self, value):
        if value is None:
            raise ParameterException("Error! Train can't be nullptr")
        self._train = value

    @property
    def route(self):
        return self._route

    @route.setter
    def route(self, value):
        if value is None:
            raise ParameterException("Error! Route can't be nullptr")
        self._route = value

    @property
    def start_time(self):
        return self._start_time

    @start_time.setter
    def start_time(self, value):
        if value is None:
            raise ParameterException("Error! Start time can't be nullptr")
        self._start_time = value

    @property
    def end_time(self):
        return self._end_time

    @end_time.setter
    def end_time(self, value):
        if value is None:
            raise ParameterException("Error! End time can't be nullptr")
        self._end_time = value

    def info(self):
        return (
            f"Trasa {self._route.start_point} - {self._route.end_point}. "
            f"Start o godzinie {_format_time(self._start_time)}, "
            f"koniec trasy o godzinie {_format_time(self._end_time)}. "
            f"Trase pokona pociag{self._train.id}."
        )

    def duration(self):
        """Journey time as hours plus minutes in hundredths: 1h36m gives 1.36."""
        length = self._end_time - self._start_time
        sign = -1 if length < timedelta(0) else 1
        total_minutes = int(abs(length).total_seconds()) // 60
        hours, minutes = divmod(total_minutes, 60)
        return sign * (hours + 0.01 * minutes)

    def __eq__(self, other):
        if not isinstance(other, Timetable):
            return NotImplemented
        return (
            self._id == other._id
            and self._start_time == other._start_time
            and self._end_time == other._end_time
            and self._route == other._route
            and self._train == other._train
        )

    __hash__ = None

    def __repr__(self):
        return (
            f"Timetable(id={self._id}, train={self._train.id!r}, "
            f"route={self._route!r})"
        )