"""Error taxonomy shared by the ordering and catalogue contexts.

Every failure that crosses a layer boundary is classified into one of a
closed set of kinds. Layers match on the kind returned by ``error_kind()``
rather than on exception subtypes:

    NOT_FOUND               requested order/product/category does not exist
    INVALID_BUSINESS_STATE  a state-machine guard rejected the operation
    CONSTRAINT_VIOLATION    the persistence layer rejected the data
    TRANSIENT               connectivity, timeout or backend unavailable
    UNEXPECTED              anything else

Known kinds are re-raised verbatim. Transient errors keep their original
exception type all the way to the boundary so callers can decide on retry.
Only UNEXPECTED failures are wrapped, and each layer they cross wraps them
again with its own context, so a store failure seen by a handler reads
"Service error: Repository error during update: ...".
"""

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError
from sqlalchemy import exc as sa_exc

logger = structlog.get_logger(__name__)


class ErrorKind(Enum):
    NOT_FOUND = "NotFound"
    INVALID_BUSINESS_STATE = "InvalidBusinessState"
    CONSTRAINT_VIOLATION = "ConstraintViolation"
    TRANSIENT = "Transient"
    UNEXPECTED = "Unexpected"


class DomainError(Exception):
    """A classified failure carrying its ``ErrorKind``."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"DomainError({self.kind.name}, {self.message!r})"


class Errors:
    @staticmethod
    def not_found(msg: str) -> DomainError:
        return DomainError(ErrorKind.NOT_FOUND, msg)

    @staticmethod
    def invalid_state(msg: str) -> DomainError:
        return DomainError(ErrorKind.INVALID_BUSINESS_STATE, msg)

    @staticmethod
    def constraint_violation(msg: str) -> DomainError:
        return DomainError(ErrorKind.CONSTRAINT_VIOLATION, msg)

    @staticmethod
    def unexpected(msg: str) -> DomainError:
        return DomainError(ErrorKind.UNEXPECTED, msg)


_TRANSIENT_TYPES = (
    ConnectionError,
    TimeoutError,
    sa_exc.OperationalError,
    sa_exc.DisconnectionError,
    sa_exc.TimeoutError,
)

_CONSTRAINT_TYPES = (
    ValidationError,
    sa_exc.IntegrityError,
)


def error_kind(exc: BaseException) -> ErrorKind:
    """Classify an exception into the closed ``ErrorKind`` set."""
    if isinstance(exc, DomainError):
        return exc.kind
    if isinstance(exc, ObjectNotFoundError):
        return ErrorKind.NOT_FOUND
    # OperationalError and IntegrityError share a DBAPIError base; test transient first
    if isinstance(exc, _TRANSIENT_TYPES):
        return ErrorKind.TRANSIENT
    if isinstance(exc, _CONSTRAINT_TYPES):
        return ErrorKind.CONSTRAINT_VIOLATION
    return ErrorKind.UNEXPECTED


def is_transient(exc: BaseException) -> bool:
    return error_kind(exc) is ErrorKind.TRANSIENT


@contextmanager
def wrap_unexpected(context: str) -> Iterator[None]:
    """Re-raise classified failures as they are; wrap unexpected ones with ``context``."""
    try:
        yield
    except Exception as exc:
        if error_kind(exc) is not ErrorKind.UNEXPECTED:
            raise
        logger.error("Unexpected failure", context=context, error=str(exc))
        raise Errors.unexpected(f"{context}: {exc}") from exc
