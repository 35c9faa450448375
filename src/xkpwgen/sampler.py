"""Uniform random word sampling and passphrase assembly."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from xkpwgen.errors import InvalidInput

logger = logging.getLogger(__name__)


def make_rng(seed: int | None = None) -> random.Random:
    """Return a new generator, seeded from the OS unless seed is given."""
    if seed is None:
        logger.debug("Seeding generator from OS entropy")
    else:
        logger.debug("Seeding generator with %d", seed)
    return random.Random(seed)


def sample(
    wordlist: Sequence[str],
    count: int,
    rng: random.Random | None = None,
) -> list[str]:
    """Draw count words uniformly from wordlist, with replacement.

    randrange maps onto [0, N) by rejection sampling, so there is no
    modulo bias for list sizes that do not divide the generator range.
    Raises InvalidInput for an empty wordlist or a negative count.
    """
    if count < 0:
        raise InvalidInput(f"Word count must not be negative, got {count}.")
    if not wordlist:
        raise InvalidInput("Cannot sample from an empty wordlist.")
    if rng is None:
        rng = make_rng()
    size = len(wordlist)
    return [wordlist[rng.randrange(size)] for _ in range(count)]


def generate_passphrase(
    wordlist: Sequence[str],
    length: int,
    rng: random.Random | None = None,
    separator: str = " ",
) -> str:
    """Return one passphrase of length words joined by separator."""
    return separator.join(sample(wordlist, length, rng))


def generate_passphrases(
    wordlist: Sequence[str],
    length: int,
    number: int,
    rng: random.Random | None = None,
    separator: str = " ",
) -> list[str]:
    """Return number independent passphrases, one sampler call each."""
    if number < 0:
        raise InvalidInput(f"Passphrase count must not be negative, got {number}.")
    if rng is None:
        rng = make_rng()
    logger.debug("Generating %d passphrase(s) of %d word(s)", number, length)
    return [generate_passphrase(wordlist, length, rng, separator) for _ in range(number)]
