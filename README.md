# railbooking

An in-memory library for modelling a small railway: trains made of carriages,
routes, timetables, clients with age-based discounts, and tickets that book the
first free seat in a carriage of the requested class.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Overview

- `railbooking.carriage`: `TravelClass` (`FIRST` or `SECOND`) and `Carriage`.
  A carriage has at least 30 seats. `free_seats` is a tuple of per-seat flags,
  where `True` marks a booked seat. `set_free_seat(index, value)` sets one flag.
- `railbooking.train`: `Train` has an ID, which must be greater than 1000, a
  name, and a non-empty list of carriages. `book_seat(travel_class)` reserves
  the first free seat in a carriage of that class. It returns the seat's number
  counted across the whole train, carriage after carriage. Carriages can be
  changed with `add_carriage`, `remove_carriage` and `remove_carriage_at`.
- `railbooking.route`: `Route` is a length in kilometres between a start point
  and an end point.
- `railbooking.client_types`: the client categories.
  - `StudentClient`: up to age 26, pays half the price, rounded to the cent.
  - `BasicClient`: up to age 67, pays the full price.
  - `PensionerClient`: pays 70% of the price.

  Each category has `count_discount(price)` and `type_name()`.
- `railbooking.client`: `Client` picks its category from its age in whole
  365-day years. `update_client_type()` recomputes the category. Tickets are
  kept with `add_ticket` and `remove_ticket`.
- `railbooking.ticket`: `Ticket` gets a random UUID and records its purchase
  time. It books a seat on the train when it is created. Its price is the route
  length times the price per km, times 1.5 for first class, with the client's
  discount applied.
- `railbooking.timetable`: `Timetable` is a train running a route between a
  start time and an end time. `duration()` returns hours plus minutes as
  hundredths, so 1 h 36 min gives `1.36`.
- `railbooking.errors`: all exceptions derive from `BookingError`.
  - `ParameterException` (also a `ValueError`): an argument is invalid.
  - `AvailableException` (also a `LookupError`): an item or seat cannot be found.
  - `DuplicateException`: an entry is repeated.

The `info()` methods return short human-readable descriptions in Polish.

## Example

```python
from datetime import datetime

from railbooking.carriage import Carriage, TravelClass
from railbooking.client import Client
from railbooking.route import Route
from railbooking.ticket import Ticket
from railbooking.timetable import Timetable
from railbooking.train import Train

train = Train(1233, "Mickiewicz", [
    Carriage(43, TravelClass.FIRST),
    Carriage(32, TravelClass.SECOND),
])
route = Route(120, "Lodz", "Warszawa")
start = datetime(2020, 1, 20, 10, 56)
end = datetime(2020, 1, 20, 12, 34)
timetable = Timetable(train, route, start, end)

client = Client("1234567890", "Jan", "Kowalski", datetime(1990, 12, 21, 10, 56, 12))

ticket = Ticket(TravelClass.SECOND, client, train, route, 0.5, start, end)
client.add_ticket(ticket)

print(ticket.seat)          # 43: the first seat of the second-class carriage
print(timetable.duration())
print(client.info(show_tickets=True))
```

Errors are raised as exceptions:

```python
from railbooking.errors import ParameterException
from railbooking.route import Route

try:
    Route(0, "Lodz", "Warszawa")
except ParameterException as exc:
    print(exc)
```

## What this package does not do

The package provides only the individual model objects.

- There are no collections that register clients, trains, timetables or
  tickets, and no lookup by ID across them. Keep your own lists or
  dictionaries.
- There is no ticket-office layer that buys or cancels tickets in one step.
  To sell a ticket, create a `Ticket` and add it to the client yourself.
- Nothing is stored on disk.
- There is no command-line program.