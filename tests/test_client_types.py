import pytest

from railbooking.client_types import (
    BasicClient,
    ClientType,
    PensionerClient,
    StudentClient,
)
from railbooking.errors import ParameterException


def test_type_names():
    assert StudentClient().type_name() == "Student"
    assert BasicClient().type_name() == "Podstawowy"
    assert PensionerClient().type_name() == "Senior"


def test_max_age():
    assert StudentClient().max_age == 26
    assert BasicClient().max_age == 67
    assert PensionerClient().max_age == 150


def test_discount():
    assert StudentClient().discount == 0.5
    assert BasicClient().discount == 1
    assert PensionerClient().discount == 0.7


def test_count_discount():
    assert StudentClient().count_discount(63.87) == pytest.approx(31.94, rel=1e-4)
    assert BasicClient().count_discount(63.87) == pytest.approx(63.87, rel=1e-4)
    assert PensionerClient().count_discount(63.87) == pytest.approx(44.71, rel=1e-4)


def test_student_price_is_whole_cents():
    price = StudentClient().count_discount(63.87)
    assert round(price * 100) == pytest.approx(price * 100)


def test_base_type_keeps_price_and_has_empty_name():
    client_type = ClientType(0.3, 10)
    assert client_type.count_discount(63.87) == 63.87
    assert client_type.type_name() == ""
    assert client_type.discount == 0.3
    assert client_type.max_age == 10


def test_negative_discount_rejected():
    with pytest.raises(ParameterException):
        ClientType(-0.1, 10)


@pytest.mark.parametrize("max_age", [0, -5])
def test_non_positive_max_age_rejected(max_age):
    with pytest.raises(ParameterException):
        ClientType(0.5, max_age)