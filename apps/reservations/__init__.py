"""Reservations app package.

This app holds the booking engine: the availability check, the
transactional reserve operation and the cancellation of the most recent
reservation. No two reservations of a room may overlap on the same date;
the engine enforces this by locking the room row for the duration of the
check-then-insert transaction, and a unique constraint on the slot key
backs it up at the database level.
"""
