"""
Tokenizer for transliteration input

Splits text into word, number, symbol and whitespace runs. Concatenating
the token texts always gives back the (NFC-normalized) input.
"""

import unicodedata
from typing import List, NamedTuple

import regex as re

WORD = 'word'
NUMBER = 'number'
SYMBOL = 'symbol'
WHITESPACE = 'whitespace'

# Alternatives are tried left to right at every position
TOKEN_PATTERN = re.compile(
    r'(?P<word>\p{L}[\p{L}\p{M}.]*)'
    r'|(?P<number>\d+)'
    r'|(?P<symbol>[^\s\p{L}\d]+)'
    r'|(?P<whitespace>\s+)'
)

TRANSLITERABLE_PATTERN = re.compile(r'[\p{L}\p{M}]+')
NON_LETTER_PATTERN = re.compile(r'[^\p{L}\p{M}]')


class Token(NamedTuple):
    kind: str
    text: str


def normalize(text: str) -> str:
    """Canonical composition (NFC)"""
    return unicodedata.normalize('NFC', text)


def tokenize(text: str) -> List[Token]:
    """
    Split text into classified tokens

    Args:
        text: Raw input text

    Returns:
        Ordered list of tokens covering every character of the input
    """
    return [Token(m.lastgroup, m.group()) for m in TOKEN_PATTERN.finditer(normalize(text))]


def is_transliterable(token) -> bool:
    """
    Check whether a token should go through a transliterator

    Only pure letter/mark words qualify; words with an embedded period
    (abbreviations) are passed through as they are.
    """
    text = token.text if isinstance(token, Token) else token
    return bool(text) and TRANSLITERABLE_PATTERN.fullmatch(text) is not None


def last_word(text: str) -> str:
    """Last token of the trimmed text with everything but letters and marks removed"""
    tokens = tokenize(text.strip())
    if not tokens:
        return ''
    return NON_LETTER_PATTERN.sub('', tokens[-1].text)
