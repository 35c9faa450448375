"""Bundled and user wordlists: loading, validation and statistics."""

from __future__ import annotations

import logging
import statistics
from collections import Counter
from dataclasses import dataclass
from importlib.resources import files

from xkpwgen.errors import InvalidInput, ResourceLoadFailure

logger = logging.getLogger(__name__)

DEFAULT_WORDLIST = "formal"


def list_wordlists() -> list[str]:
    """Return sorted names of the wordlists bundled with the package."""
    directory = files("xkpwgen").joinpath("wordlists")
    return sorted(
        entry.name[: -len(".txt")]
        for entry in directory.iterdir()
        if entry.name.endswith(".txt")
    )


def validate_words(words: list[str]) -> list[str]:
    """Check that words is a usable wordlist and return it unchanged.

    Raises InvalidInput if the list is empty, if any entry contains
    whitespace, or if any entry appears more than once.
    """
    if not words:
        raise InvalidInput("Wordlist is empty.")
    for word in words:
        if any(c.isspace() for c in word):
            raise InvalidInput(f"Word '{word}' contains whitespace.")
    duplicates = sorted(w for w, n in Counter(words).items() if n > 1)
    if duplicates:
        raise InvalidInput(f"Duplicate words in wordlist: {' '.join(duplicates)}")
    return words


def _read_text(name_or_path: str) -> str:
    if name_or_path in list_wordlists():
        resource = files("xkpwgen").joinpath("wordlists", f"{name_or_path}.txt")
        logger.debug("Loading bundled wordlist '%s'", name_or_path)
        return resource.read_text(encoding="utf-8")
    logger.debug("Loading wordlist from %s", name_or_path)
    with open(name_or_path, encoding="utf-8") as f:
        return f.read()


def load_wordlist(name_or_path: str | None = None) -> list[str]:
    """Load a bundled wordlist by name, or a wordlist file by path.

    Defaults to the bundled formal list. Raises ResourceLoadFailure if
    the file cannot be read, InvalidInput if its contents are unusable.
    """
    source = name_or_path or DEFAULT_WORDLIST
    try:
        text = _read_text(source)
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceLoadFailure(f"Cannot load wordlist '{source}': {e}") from e
    words = [line.strip() for line in text.splitlines() if line.strip()]
    validate_words(words)
    logger.info("Loaded %d words from '%s'", len(words), source)
    return words


@dataclass(frozen=True)
class WordlistStatistics:
    """Summary of word lengths in a wordlist."""

    number_of_words: int
    min_word_length: int
    max_word_length: int
    avg_word_length: float
    median_word_length: float

    @classmethod
    def from_words(cls, words: list[str]) -> WordlistStatistics:
        if not words:
            raise InvalidInput("Cannot describe an empty wordlist.")
        lengths = [len(w) for w in words]
        return cls(
            number_of_words=len(words),
            min_word_length=min(lengths),
            max_word_length=max(lengths),
            avg_word_length=sum(lengths) / len(lengths),
            median_word_length=statistics.median(lengths),
        )

    def render(self) -> str:
        return (
            f"{self.number_of_words} words "
            f"(lengths: min {self.min_word_length}, max {self.max_word_length}, "
            f"avg {self.avg_word_length:.2f}, median {self.median_word_length:g})"
        )
