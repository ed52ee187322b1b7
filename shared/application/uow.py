"""
Unit of Work Pattern

Manages database transactions for the booking engine and translates
database failures into the reservation error taxonomy, so that no raw
database exception leaves a unit of work.
"""

from contextlib import contextmanager
import logging

from django.db import DEFAULT_DB_ALIAS, transaction
from django.db.utils import (
    DatabaseError,
    Error,
    IntegrityError,
    InterfaceError,
    OperationalError,
)

from shared.domain.exceptions import Conflict, Internal, Unavailable

logger = logging.getLogger(__name__)


@contextmanager
def translate_database_errors(operation: str):
    """
    Map django.db errors raised inside the block to the error taxonomy

    - IntegrityError -> Conflict (duplicate slot key)
    - OperationalError / InterfaceError -> Unavailable (connection lost,
      timeout, lock wait exceeded)
    - any other database error -> Internal
    """
    try:
        yield
    except IntegrityError as exc:
        logger.warning(f"{operation}: constraint violation: {exc}")
        raise Conflict("Duplicate reservation.") from exc
    except (OperationalError, InterfaceError) as exc:
        logger.error(f"{operation}: database unavailable: {exc}")
        raise Unavailable() from exc
    except (DatabaseError, Error) as exc:
        logger.error(f"{operation}: unexpected database error: {exc}", exc_info=True)
        raise Internal(str(exc)) from exc


class DjangoUnitOfWork:
    """
    Django implementation of Unit of Work

    Wraps transaction.atomic(). Everything executed inside the block is
    committed together or not at all, and database errors (including the
    ones raised by the final COMMIT) surface as ReservationError subclasses.

    Usage:
        with DjangoUnitOfWork("reserve") as uow:
            room = store.lock_room(room_id)
            ...
            store.insert(...)
            # Transaction commits here
    """

    def __init__(self, operation: str = "unit of work", using: str = DEFAULT_DB_ALIAS):
        self.operation = operation
        self.using = using
        self._translation = None
        self._transaction = None

    def __enter__(self):
        """Start database transaction"""
        self._translation = translate_database_errors(self.operation)
        self._translation.__enter__()
        try:
            self._transaction = transaction.atomic(using=self.using)
            self._transaction.__enter__()
        except BaseException as exc:
            if not self._translation.__exit__(type(exc), exc, exc.__traceback__):
                raise
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Complete or rollback transaction, then translate failures"""
        try:
            if exc_type is None:
                logger.debug(f"Committing transaction for {self.operation}")
            else:
                logger.debug(f"Rolling back transaction for {self.operation}")
            if self._transaction:
                self._transaction.__exit__(exc_type, exc_val, exc_tb)
        except BaseException as exc:
            # Commit failed: replace the pending outcome with the translated error
            self._translation.__exit__(type(exc), exc, exc.__traceback__)
            raise
        return self._translation.__exit__(exc_type, exc_val, exc_tb)
