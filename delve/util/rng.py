"""Seeded random streams, one per generation stage.

A dungeon is generated by several stages that each draw random numbers.
Giving every stage its own stream, derived from one master seed, means:

- the same master seed always reproduces the same dungeon, and
- a change in how much randomness one stage consumes (say, carving) leaves
  the layouts of the other stages untouched.

Usage:
    provider = RNGProvider(dungeon_config.seed)
    carve_rng = provider.get("map.carve")
    direction = carve_rng.choice(CARDINAL_DIRECTIONS)

Stream handles stay valid across provider.reset(), so layers may hold on to
them.

Stage domains in use: "map.partition", "map.carve", "map.room_types".

Each DungeonGenerator owns a provider; there is no shared module-level one.
"""

from __future__ import annotations

import zlib
from collections.abc import Sequence
from random import Random
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from delve.types import RandomSeed

T = TypeVar("T")


class RNGStream:
    """Handle on one domain's Random that survives provider resets.

    Every call looks the domain up again on the provider, so the handle
    follows the provider to whatever seed it was last reset to.
    """

    def __init__(self, provider: RNGProvider, domain: str) -> None:
        self._provider = provider
        self._domain = domain

    @property
    def domain(self) -> str:
        return self._domain

    def _rng(self) -> Random:
        return self._provider._get_raw(self._domain)

    # -------------------------------------------------------------------------
    # Forwarded Random methods
    # -------------------------------------------------------------------------

    def random(self) -> float:
        """Float in [0.0, 1.0)."""
        return self._rng().random()

    def randint(self, a: int, b: int) -> int:
        """Integer in [a, b], both ends included."""
        return self._rng().randint(a, b)

    def randrange(self, start: int, stop: int | None = None, step: int = 1) -> int:
        return self._rng().randrange(start, stop, step)

    def choice(self, seq: Sequence[T]) -> T:
        """One element of a non-empty sequence."""
        return self._rng().choice(seq)

    def shuffle(self, x: list) -> None:
        self._rng().shuffle(x)


# Anything a generation function can draw from: a plain Random in tests, or
# a provider stream during generation.
type RNG = Random | RNGStream


class RNGProvider:
    """Hands out one deterministic Random per named domain.

    Domain streams are created lazily. With a master seed each stream is
    seeded from crc32(f"{master_seed}:{domain}"); without one, each stream
    draws from system entropy.
    """

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self._master_seed = master_seed
        self._streams: dict[str, Random] = {}
        self._handles: dict[str, RNGStream] = {}

    @property
    def master_seed(self) -> RandomSeed:
        return self._master_seed

    def get(self, domain: str) -> RNGStream:
        """Return the (cached) stream handle for a domain.

        Args:
            domain: Dotted stage name such as "map.partition".
        """
        handle = self._handles.get(domain)
        if handle is None:
            handle = self._handles[domain] = RNGStream(self, domain)
        return handle

    def _get_raw(self, domain: str) -> Random:
        rng = self._streams.get(domain)
        if rng is None:
            if self._master_seed is None:
                rng = Random()
            else:
                # crc32 rather than hash(): str hashes change between
                # interpreter runs unless PYTHONHASHSEED is fixed.
                rng = Random(zlib.crc32(f"{self._master_seed}:{domain}".encode()))
            self._streams[domain] = rng
        return rng

    def reset(self, master_seed: RandomSeed = None) -> None:
        """Re-seed every domain from a new master seed.

        Handles returned by get() keep working and pick up the new streams.
        """
        self._master_seed = master_seed
        self._streams.clear()
