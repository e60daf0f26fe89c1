"""Trains made of carriages."""

from railbooking.errors import AvailableException, ParameterException


class Train:
    """A numbered, named train with an ordered list of carriages."""

    def __init__(self, train_id, name, carriages):
        if train_id <= 1000:
            raise ParameterException("Error! Train ID > 1000 required")
        if name == "":
            raise ParameterException("Error! Train name required")
        carriages = list(carriages)
        if not carriages:
            raise ParameterException("Error! Carriages required")
        self.train_id = train_id
        self.name = name
        self._carriages = carriages

    @property
    def id(self):
        return self.train_id

    @property
    def carriages(self):
        return tuple(self._carriages)

    def get_carriage(self, index):
        if not 0 <= index < len(self._carriages):
            raise IndexError("carriage index out of range")
        return self._carriages[index]

    def book_seat(self, travel_class):
        """Book the first free seat of the given class and return its number.

        Seats are numbered across the whole train, carriage after carriage.
        """
        if not self._carriages:
            raise AvailableException("Error! The train has no carriages")
        offset = 0
        for carriage in self._carriages:
            if carriage.carriage_class == travel_class:
                for index, booked in enumerate(carriage.free_seats):
                    if not booked:
                        carriage.set_free_seat(index, True)
                        return offset + index
            offset += carriage.number_of_seats
        raise AvailableException("Error! Couldn't find a free seat")

    def info(self):
        return (
            f"Pociag {self.name} o numerze {self.train_id} sklada sie z "
            f"{len(self._carriages)} wagonow."
        )

    def add_carriage(self, carriage):
        self._carriages.append(carriage)
        return True

    def remove_carriage(self, carriage):
        if not self._carriages:
            raise AvailableException("Error! The train has no carriages")
        for index, stored in enumerate(self._carriages):
            if stored == carriage:
                del self._carriages[index]
                return True
        raise AvailableException("Error! Carriage not found!")

    def remove_carriage_at(self, index):
        if 0 <= index < len(self._carriages):
            del self._carriages[index]
            return True
        raise AvailableException("Error! Carriage not found!")

    def __eq__(self, other):
        if not isinstance(other, Train):
            return NotImplemented
        return (
            self.train_id == other.train_id
            and self.name == other.name
            and self._carriages == other._carriages
        )

    def __repr__(self):
        return f"Train({self.train_id!r}, {self.name!r}, {self._carriages!r})"