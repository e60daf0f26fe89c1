"""Client categories and the discounts they receive."""

import math

from railbooking.errors import ParameterException


def _round_half_away(value, digits):
    scale = 10 ** digits
    scaled = value * scale
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) / scale


class ClientType:
    """A client category with a discount factor and an upper age limit."""

    def __init__(self, discount, max_age):
        if discount < 0:
            raise ParameterException("Error! Discount must be non-negative")
        if max_age <= 0:
            raise ParameterException("Error! Max age must be positive")
        self._discount = discount
        self._max_age = max_age

    @property
    def discount(self):
        return self._discount

    @property
    def max_age(self):
        return self._max_age

    def count_discount(self, price):
        """Return the price this category pays."""
        return price

    def type_name(self):
        return ""

    def __repr__(self):
        return (
            f"{type(self).__name__}(discount={self._discount!r}, "
            f"max_age={self._max_age!r})"
        )


class BasicClient(ClientType):
    """A regular client paying the full price."""

    def __init__(self):
        super().__init__(1.0, 67)

    def count_discount(self, price):
        return price

    def type_name(self):
        return "Podstawowy"


class StudentClient(ClientType):
    """A young client paying half price, rounded up to the cent."""

    def __init__(self):
        super().__init__(0.5, 26)

    def count_discount(self, price):
        return _round_half_away(price * self.discount + 0.005, 2)

    def type_name(self):
        return "Student"


class PensionerClient(ClientType):
    """A senior client with a 30 percent discount."""

    def __init__(self):
        super().__init__(0.7, 150)

    def count_discount(self, price):
        return price * self.discount

    def type_name(self):
        return "Senior"