"""Identity generators for elements added without an id."""

from __future__ import annotations

import itertools
import random
from dataclasses import dataclass, field
from typing import Iterator, Protocol

DEFAULT_MAX = 100


def format_id(prefix: str, number: int) -> str:
    return f"{prefix}#{number}"


class IdGenerator(Protocol):
    def __call__(self, prefix: str) -> str: ...


@dataclass
class RandomIdGenerator:
    """Draw ``<prefix>#<n>`` ids with ``n`` in ``[0, max_value)``.

    Collisions are possible and are not checked. Pass ``seed`` for a
    reproducible sequence.
    """

    max_value: int = DEFAULT_MAX
    seed: int | None = None
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.max_value <= 0:
            raise ValueError("max_value must be positive")
        self._rng = random.Random(self.seed)

    def __call__(self, prefix: str) -> str:
        return format_id(prefix, self._rng.randrange(self.max_value))


@dataclass
class CounterIdGenerator:
    """Sequential ids, unique per generator instance."""

    start: int = 0
    _counter: Iterator[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._counter = itertools.count(self.start)

    def __call__(self, prefix: str) -> str:
        return format_id(prefix, next(self._counter))


__all__ = ["CounterIdGenerator", "IdGenerator", "RandomIdGenerator", "format_id"]
