import math
from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterable, TypeVar

from finance_engine.domain import Kind, Transaction
from finance_engine.errors import DataIntegrityError

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')


def parse_kind(value) -> Kind | None:
    try:
        return Kind(value)
    except ValueError:
        return None


class Either(Generic[E, T], ABC):

    @abstractmethod
    def map(self, f: Callable[[T], U]) -> 'Either[E, U]':
        pass

    @abstractmethod
    def bind(self, f: Callable[[T], 'Either[E, U]']) -> 'Either[E, U]':
        pass

    @abstractmethod
    def get_or_else(self, default: T) -> T:
        pass

    @abstractmethod
    def is_right(self) -> bool:
        pass

    @abstractmethod
    def is_left(self) -> bool:
        pass

    @abstractmethod
    def get_error(self) -> E:
        pass


class Right(Either[E, T]):

    def __init__(self, value: T):
        self._value = value

    def map(self, f: Callable[[T], U]) -> 'Either[E, U]':
        return Right(f(self._value))

    def bind(self, f: Callable[[T], 'Either[E, U]']) -> 'Either[E, U]':
        return f(self._value)

    def get_or_else(self, default: T) -> T:
        return self._value

    def is_right(self) -> bool:
        return True

    def is_left(self) -> bool:
        return False

    def get_error(self) -> E:
        raise ValueError("Cannot get error from Right")

    def __repr__(self) -> str:
        return f"Right({self._value})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Right) and self._value == other._value


class Left(Either[E, T]):

    def __init__(self, error: E):
        self._error = error

    def map(self, f: Callable[[T], U]) -> 'Either[E, U]':
        return Left(self._error)

    def bind(self, f: Callable[[T], 'Either[E, U]']) -> 'Either[E, U]':
        return Left(self._error)

    def get_or_else(self, default: T) -> T:
        return default

    def is_right(self) -> bool:
        return False

    def is_left(self) -> bool:
        return True

    def get_error(self) -> E:
        return self._error

    def __repr__(self) -> str:
        return f"Left({self._error})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Left) and self._error == other._error


def check_kind(t: Transaction) -> Either[dict, Transaction]:
    if parse_kind(t.kind) is None:
        return Left({
            "error": "unknown_kind",
            "message": f"Transaction {t.id} has unknown kind {t.kind!r}",
            "transaction_id": t.id,
            "kind": t.kind,
        })
    return Right(t)


def check_amount(t: Transaction) -> Either[dict, Transaction]:
    if not isinstance(t.amount, (int, float)) or not math.isfinite(t.amount):
        return Left({
            "error": "non_finite_amount",
            "message": f"Transaction {t.id} amount {t.amount!r} is not a finite number",
            "transaction_id": t.id,
            "amount": t.amount,
        })
    if t.amount < 0:
        return Left({
            "error": "negative_amount",
            "message": f"Transaction {t.id} stores a signed amount; expected a magnitude",
            "transaction_id": t.id,
            "amount": t.amount,
        })
    return Right(t)


def check_date(t: Transaction) -> Either[dict, Transaction]:
    if t.date is None:
        return Left({
            "error": "missing_date",
            "message": f"Transaction {t.id} has no date",
            "transaction_id": t.id,
        })
    return Right(t)


def validate_transaction(t: Transaction) -> Either[dict, Transaction]:
    return Right(t).bind(check_kind).bind(check_date).bind(check_amount)


def require_kind(t: Transaction) -> Kind:
    """Kind of ``t``; an unrecognized kind fails loudly."""
    result = check_kind(t)
    if result.is_left():
        err = result.get_error()
        raise DataIntegrityError(err["message"], err)
    return parse_kind(t.kind)


def ensure_valid(
    trans: Iterable[Transaction], allow_signed: bool = True
) -> tuple[Transaction, ...]:
    """
    Validate every transaction and return them as a tuple.

    Signed amounts are tolerated by default: the aggregators only ever use
    magnitudes, so a negative stored amount cannot corrupt a total.
    """
    checked = tuple(trans)
    for t in checked:
        result = validate_transaction(t)
        if result.is_left():
            err = result.get_error()
            if allow_signed and err["error"] == "negative_amount":
                continue
            raise DataIntegrityError(err["message"], err)
    return checked
