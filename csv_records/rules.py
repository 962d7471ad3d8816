"""
Parsing rules.

Kept as plain constants so every caller shares the same defaults.
"""

DEFAULT_SEPARATOR = ","
ACCEPTED_SUFFIXES = (".csv", ".tsv", ".txt")
TEXT_ENCODING = "utf-8"
