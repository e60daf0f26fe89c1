import uuid
from datetime import datetime, timedelta, timezone

import pytest

from railbooking.carriage import Carriage, TravelClass
from railbooking.errors import ParameterException
from railbooking.route import Route
from railbooking.timetable import Timetable
from railbooking.train import Train

CET = timezone(timedelta(hours=1), "CET")
START = datetime(2020, 1, 20, 10, 56, tzinfo=CET)
END = datetime(2020, 1, 20, 12, 34, tzinfo=CET)


def make_train(train_id=1233, name="Mickiewicz", first_seats=43):
    return Train(
        train_id,
        name,
        [Carriage(first_seats, TravelClass.FIRST), Carriage(32, TravelClass.SECOND)],
    )


def make_route():
    return Route(120, "Lodz", "Warszawa")


def make_timetable(end=END):
    return Timetable(make_train(), make_route(), START, end)


def test_id():
    timetable = make_timetable()
    assert isinstance(timetable.id, uuid.UUID)
    assert len(str(timetable.id)) == 36
    assert make_timetable().id != timetable.id


def test_get_train():
    train = make_train()
    timetable = Timetable(train, make_route(), START, END)
    assert timetable.train is train


def test_get_route():
    route = make_route()
    timetable = Timetable(make_train(), route, START, END)
    assert timetable.route is route


def test_set_train():
    timetable = make_timetable()
    train1 = make_train(2343, "Slowacki")
    timetable.train = train1
    assert timetable.train is train1


def test_set_route():
    timetable = make_timetable()
    route1 = Route(250, "Lodz", "Wroclaw")
    timetable.route = route1
    assert timetable.route is route1


def test_get_start_time():
    assert make_timetable().start_time is START


def test_get_end_time():
    assert make_timetable().end_time is END


def test_set_time():
    timetable = make_timetable()
    start1 = datetime(2020, 2, 20, 10, 34, tzinfo=CET)
    end1 = datetime(2020, 2, 20, 12, 34, tzinfo=CET)
    timetable.start_time = start1
    timetable.end_time = end1
    assert timetable.start_time is start1
    assert timetable.end_time is end1


@pytest.mark.parametrize("field", ["train", "route", "start_time", "end_time"])
def test_setters_reject_none(field):
    timetable = make_timetable()
    original = getattr(timetable, field)
    with pytest.raises(ParameterException):
        setattr(timetable, field, None)
    assert getattr(timetable, field) is original


def test_duration():
    timetable = make_timetable(datetime(2020, 1, 20, 12, 32, tzinfo=CET))
    assert timetable.duration() == pytest.approx(1.36, rel=1e-4)


def test_duration_whole_hours():
    timetable = make_timetable(datetime(2020, 1, 20, 13, 56, tzinfo=CET))
    assert timetable.duration() == pytest.approx(3.0)


def test_info():
    timetable = Timetable(
        make_train(first_seats=53), make_route(), START,
        datetime(2020, 1, 20, 12, 32, tzinfo=CET),
    )
    assert timetable.info() == (
        "Trasa Lodz - Warszawa. Start o godzinie 2020-01-20 10:56:00 CET, "
        "koniec trasy o godzinie 2020-01-20 12:32:00 CET. "
        "Trase pokona pociag1233."
    )


def test_equality():
    train = make_train(first_seats=53)
    route = make_route()
    route3 = Route(300, "Wrocław", "Warszawa")
    end = datetime(2020, 1, 20, 12, 32, tzinfo=CET)
    timetable = Timetable(train, route, START, end)
    timetable2 = timetable
    timetable3 = Timetable(train, route3, START, end)

    assert (timetable == timetable2) is True
    assert (timetable == timetable3) is False
    assert (timetable != timetable3) is True
    assert (timetable != timetable2) is False


@pytest.mark.parametrize("field", ["train", "route", "start_time", "end_time"])
def test_invalid_parameters(field):
    arguments = {
        "train": make_train(),
        "route": make_route(),
        "start_time": START,
        "end_time": END,
    }
    arguments[field] = None
    with pytest.raises(ParameterException):
        Timetable(**arguments)