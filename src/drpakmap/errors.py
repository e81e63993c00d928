from typing import Any, Type, TypeVar, Union

from typing_extensions import Protocol

T = TypeVar("T", bound="Comparable")


class Comparable(Protocol):
    def __lt__(self: T, other: T) -> bool:
        pass  # pragma: no cover

    def __le__(self: T, other: T) -> bool:
        pass  # pragma: no cover

    def __gt__(self: T, other: T) -> bool:
        pass  # pragma: no cover

    def __ge__(self: T, other: T) -> bool:
        pass  # pragma: no cover


class DRError(Exception):
    """Base error for all errors in the library."""


class DRConfigError(DRError):
    """An offset table, sentinel, or section layout is invalid."""


class DRUnsupportedError(DRError):
    """The executable is not one of the supported builds."""


class DRReadError(DRError):
    """A seek or read went outside of the stream."""


class DRTableError(DRReadError):
    """A listing ran off the end of the stream without a sentinel."""


def _assert_base(  # pylint: disable=too-many-arguments
    result: bool,
    operator: str,
    name: str,
    expected: Any,
    actual: Any,
    location: Union[int, str],
    error_class: Type[DRError],
) -> None:
    if not result:
        raise error_class(f"{name}: {actual!r} {operator} {expected!r} (at {location})")


def assert_eq(
    name: str,
    expected: Any,
    actual: Any,
    location: Union[int, str],
    error_class: Type[DRError] = DRConfigError,
) -> None:
    result = actual == expected
    _assert_base(result, "==", name, expected, actual, location, error_class)


def assert_ge(
    name: str,
    expected: T,
    actual: T,
    location: Union[int, str],
    error_class: Type[DRError] = DRConfigError,
) -> None:
    result = actual >= expected
    _assert_base(result, ">=", name, expected, actual, location, error_class)

