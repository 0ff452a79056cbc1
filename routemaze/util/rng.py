"""Seeded random sources for maze generation.

Generation never touches the process-wide ``random`` module. Every phase
receives its random source explicitly. ``RNGProvider`` turns one master seed
into an independent ``random.Random`` per named domain, so adding rest stops
to a maze never changes the maze a seed produces.

Usage:
    provider = RNGProvider(master_seed="level-3")
    grid = engine.generate(config, provider.get("maze.generate"))
    stops = placer.place(grid, grid.center, provider.get("maze.rest_stops"))
"""

from __future__ import annotations

import zlib
from random import Random
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from routemaze.types import RandomSeed


class RNG(Protocol):
    """The slice of the ``random.Random`` interface generation draws from."""

    def random(self) -> float: ...

    def randint(self, a: int, b: int) -> int: ...

    def randrange(self, start: int, stop: int | None = None, step: int = 1) -> int: ...

    def shuffle(self, x: list) -> None: ...


def derive_seed(master_seed: RandomSeed, domain: str) -> int:
    # crc32 rather than hash(): str hashing is salted per interpreter run.
    return zlib.crc32(f"{master_seed}:{domain}".encode())


class RNGProvider:
    """Hands out one independent Random per domain name.

    With no master seed every domain draws from system entropy.
    """

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self.master_seed = master_seed
        self._streams: dict[str, Random] = {}

    def get(self, domain: str) -> Random:
        """Return the Random for ``domain``, creating it on first use."""
        stream = self._streams.get(domain)
        if stream is None:
            if self.master_seed is None:
                stream = Random()
            else:
                stream = Random(derive_seed(self.master_seed, domain))
            self._streams[domain] = stream
        return stream
