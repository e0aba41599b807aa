"""All-settled join for independent upstream fetches.

Unlike ``asyncio.gather`` without ``return_exceptions``, a failing awaitable
never short-circuits the others: every item is awaited and reported as an
``Outcome`` in input order.
"""

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


@dataclass
class Outcome(Generic[T]):
    """Result of one awaitable in a settled join.

    Attributes:
        value: The awaited result, if it completed.
        error: The exception raised instead, if any.
    """

    value: Optional[T] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: BaseException) -> "Outcome[T]":
        return cls(error=error)


async def settle(awaitables: Iterable[Awaitable[T]]) -> list[Outcome[T]]:
    """Await everything concurrently and return one Outcome per item."""
    results = await asyncio.gather(*awaitables, return_exceptions=True)

    outcomes: list[Outcome[T]] = []
    for result in results:
        if isinstance(result, BaseException):
            outcomes.append(Outcome.failure(result))
        else:
            outcomes.append(Outcome.success(result))
    return outcomes


def successes(outcomes: Iterable[Outcome[T]]) -> list[T]:
    """Values of the fulfilled outcomes, in order."""
    return [o.value for o in outcomes if o.ok]
