"""Generate XKCD 936 style passphrases from a curated wordlist."""

__version__ = "0.2.0"
