"""Parsing of free-form delimited integer input"""

import re

# Tokens are separated by commas, spaces, semicolons and line breaks
DELIMITERS = re.compile(r'[, ;\n\r]')

# Optional surrounding whitespace, optional sign, ASCII digits only
INTEGER_TOKEN = re.compile(r'\s*(?P<sign>[+-]?)(?P<digits>[0-9]+)\s*', re.ASCII)

INT_MIN = -2**31
INT_MAX = 2**31 - 1

def parse_integers(raw):
    """
    Parse a delimited string into a list of integers

    Tokens that are not signed 32-bit integers are dropped silently.

    Args:
        raw: Input text, e.g. "5, 3;8\\n4 2"

    Returns:
        None when raw is empty or only whitespace, otherwise a list
        (possibly empty) of the parsed integers in input order
    """
    if raw is None or not raw.strip():
        return None

    tokens = [token for token in DELIMITERS.split(raw) if token]
    values = [_to_integer(token) for token in tokens]
    return [value for value in values if value is not None]

def _to_integer(token):
    match = INTEGER_TOKEN.fullmatch(token)
    if match is None:
        return None

    # Leading zeros don't count toward the size check
    digits = match.group('digits').lstrip('0') or '0'
    if len(digits) > len(str(INT_MAX)):
        return None

    value = int(match.group('sign') + digits)
    if value < INT_MIN or value > INT_MAX:
        return None
    return value
