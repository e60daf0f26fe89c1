"""Tickets bought by clients for a train journey."""

import uuid
from datetime import datetime, timedelta, timezone

from railbooking.carriage import TravelClass
from railbooking.errors import ParameterException

_PURCHASE_ZONE = timezone(timedelta(hours=1), "CET")
_FIRST_CLASS_SURCHARGE = 1.5


def _format_time(moment):
    text = moment.strftime("%Y-%m-%d %H:%M:%S")
    zone = moment.tzname()
    return f"{text} {zone}" if zone else text


class Ticket:
    """A ticket for one seat on a train along a route.

    Creating a ticket books the first free seat of its class on the train
    and prices the journey with the client's discount.
    """

    def __init__(self, ticket_class, client, train, route, price_per_km,
                 start_time, end_time):
        if client is None:
            raise ParameterException("Error! Client required")
        if train is None:
            raise ParameterException("Error! Train required")
        if route is None:
            raise ParameterException("Error! Route required")
        if start_time is None:
            raise ParameterException("Error! Start time required")
        if end_time is None:
            raise ParameterException("Error! End time required")
        if price_per_km <= 0:
            raise ParameterException("Error! Price per km must be positive")

        self._id = uuid.uuid4()
        self._ticket_class = TravelClass(ticket_class)
        self._client = client
        self._train = train
        self._route = route
        self._start_time = start_time
        self._end_time = end_time
        self._date_of_purchase = datetime.now(_PURCHASE_ZONE).replace(microsecond=0)

        surcharge = (
            _FIRST_CLASS_SURCHARGE if self._ticket_class is TravelClass.FIRST else 1
        )
        self._price = client.client_type.count_discount(
            route.length * price_per_km * surcharge
        )
        self._seat = train.book_seat(self._ticket_class)

    @property
    def id(self):
        return self._id

    @property
    def price(self):
        return self._price

    @property
    def date_of_purchase(self):
        return self._date_of_purchase

    @property
    def seat(self):
        return self._seat

    @property
    def ticket_class(self):
        return self._ticket_class

    @ticket_class.setter
    def ticket_class(self, value):
        self._ticket_class = TravelClass(value)

    @property
    def start_time(self):
        return self._start_time

    @property
    def end_time(self):
        return self._end_time

    @property
    def client(self):
        return self._client

    @property
    def train(self):
        return self._train

    @property
    def route(self):
        return self._route

    def info(self, show_client_info=False):
        text = (
            f"Bilet ID: {self._id}Klasa biletu: {self._ticket_class.value} "
            f"Data zakupu: {_format_time(self._date_of_purchase)} "
            f"Cena: {self._price:g} Miejsce: {self._seat} "
            f"Pociąg: {self._train.name} {self._train.id} {self._route.info()} "
            f"Czas odjazdu: {_format_time(self._start_time)} "
            f"Czas dojazdu: {_format_time(self._end_time)}"
        )
        if show_client_info:
            text += f" Klient: {self._client.info(False)}"
        return text

    def __eq__(self, other):
        if not isinstance(other, Ticket):
            return NotImplemented
        return (
            self._id == other._id
            and self._date_of_purchase == other._date_of_purchase
            and self._price == other._price
            and self._seat == other._seat
            and self._start_time == other._start_time
            and self._end_time == other._end_time
            and self._train == other._train
            and self._route == other._route
            and self._ticket_class == other._ticket_class
        )

    __hash__ = None

    def __repr__(self):
        return f"Ticket(id={self._id}, seat={self._seat!r}, price={self._price!r})"