"""Result of one call to the text-generation collaborator."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class ExternalFailure:
    reason: str


Outcome = Union[Ok[T], ExternalFailure]
