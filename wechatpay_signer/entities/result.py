from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .exceptions import SigningEngineError

T = TypeVar("T")
E = TypeVar("E", bound=SigningEngineError)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        raise self.error


Result = Union[Ok[T], Err[E]]
