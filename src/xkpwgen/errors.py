"""Exceptions raised by xkpwgen."""

from __future__ import annotations


class InvalidInput(ValueError):
    """A count, wordlist or preset value that cannot be used."""


class ResourceLoadFailure(OSError):
    """A wordlist or preset file could not be read or decoded."""
