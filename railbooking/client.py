"""Clients of the railway and the tickets they hold."""

from datetime import datetime, timedelta

from railbooking.client_types import BasicClient, PensionerClient, StudentClient
from railbooking.errors import AvailableException, ParameterException

_HOURS_PER_YEAR = 24 * 365


def _format_time(moment):
    text = moment.strftime("%Y-%m-%d %H:%M:%S")
    zone = moment.tzname()
    return f"{text} {zone}" if zone else text


class Client:
    """A person buying tickets, identified by a personal ID."""

    def __init__(self, personal_id, first_name, last_name, date_of_birth):
        if first_name == "":
            raise ParameterException("Error! First name is required")
        if last_name == "":
            raise ParameterException("Error! Last name is required")
        if personal_id == "":
            raise ParameterException("Error! Personal ID is required")
        if date_of_birth is None:
            raise ParameterException("Error! Date of birth is required")
        self._personal_id = personal_id
        self._first_name = first_name
        self._last_name = last_name
        self._date_of_birth = date_of_birth
        self._tickets = []
        self._client_type = None
        self.update_client_type()

    @property
    def personal_id(self):
        return self._personal_id

    @property
    def id(self):
        return self._personal_id

    @property
    def first_name(self):
        return self._first_name

    @property
    def last_name(self):
        return self._last_name

    @property
    def date_of_birth(self):
        return self._date_of_birth

    @property
    def client_type(self):
        return self._client_type

    @property
    def tickets(self):
        return tuple(self._tickets)

    def age(self):
        """Age in whole 365-day years, counted from the birth moment to now."""
        now = datetime.now(self._date_of_birth.tzinfo)
        hours = int((now - self._date_of_birth) / timedelta(hours=1))
        return int(hours / _HOURS_PER_YEAR)

    def info(self, show_tickets=False):
        text = (
            f"Pesel: {self._personal_id} Imie: {self._first_name} "
            f"Nazwisko: {self._last_name} "
            f"Data urodzenia: {_format_time(self._date_of_birth)} "
            f"Typ: {self._client_type.type_name()}"
        )
        if show_tickets:
            lines = "".join(f"{ticket.info(False)}\n" for ticket in self._tickets)
            text += f"\nTickets: \n{lines}"
        return text

    def add_ticket(self, ticket):
        self._tickets.append(ticket)

    def remove_ticket(self, ticket):
        for index, stored in enumerate(self._tickets):
            if stored == ticket:
                del self._tickets[index]
                return
        raise AvailableException("Error! Ticket not found")

    def update_client_type(self):
        """Choose the client category that matches the current age."""
        age = self.age()
        if age <= 26:
            self._client_type = StudentClient()
        elif age <= 67:
            self._client_type = BasicClient()
        else:
            self._client_type = PensionerClient()

    def __eq__(self, other):
        if not isinstance(other, Client):
            return NotImplemented
        return (
            self._personal_id == other._personal_id
            and self._first_name == other._first_name
            and self._last_name == other._last_name
            and self._date_of_birth == other._date_of_birth
            and self._tickets == other._tickets
        )

    __hash__ = None

    def __repr__(self):
        return (
            f"Client({self._personal_id!r}, {self._first_name!r}, "
            f"{self._last_name!r}, {self._date_of_birth!r})"
        )