"""Reservations app package.

Desk reservations of a space for an inclusive range of dates. The price
of a reservation is derived from the space's daily rate and the number of
days the space is open within the range; it is never set by clients.
"""
