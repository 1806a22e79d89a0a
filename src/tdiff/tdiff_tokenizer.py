"""
Line tokenizer for word-level diffing.

A line is split into maximal runs of characters that share a class: whitespace,
word characters (letters, decimal digits and underscore) or anything else.
Concatenating the tokens always gives back the original line.
"""

from enum import IntEnum
from typing import List


class TokenClass(IntEnum):
    """Character classes used to split lines into tokens."""
    WHITESPACE = 0
    WORD = 1
    OTHER = 2


def token_class(ch: str) -> TokenClass:
    """
    Classify a single character.

    Args:
        ch: The character to classify

    Returns:
        The token class for the character
    """
    if ch.isspace():
        return TokenClass.WHITESPACE

    if ch.isalpha() or ch.isdecimal() or ch == '_':
        return TokenClass.WORD

    return TokenClass.OTHER


def tokenize(line: str) -> List[str]:
    """
    Split a line into same-class character runs.

    Args:
        line: The text to split

    Returns:
        Tokens in left-to-right order, or an empty list for empty input
    """
    if not line:
        return []

    tokens: List[str] = []
    start = 0
    current = token_class(line[0])

    for position in range(1, len(line)):
        next_class = token_class(line[position])
        if next_class != current:
            tokens.append(line[start:position])
            start = position
            current = next_class

    tokens.append(line[start:])
    return tokens
