"""Bookings app package.

This app encapsulates the booking domain: the conflict-detection and
validation core (``domain``), the use cases built on it
(``application``) and the collaborators the core talks to, namely the
ORM-backed booking store and the HTTP API. Bookings on one resource must
keep a 10-minute buffer from each other; the store serializes inserts per
resource so concurrent writers cannot both pass the check.
"""
