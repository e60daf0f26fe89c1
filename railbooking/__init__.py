"""In-memory model of trains, carriages, routes, timetables, clients and tickets."""

__version__ = "0.1.0"