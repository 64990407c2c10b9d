"""
Script detection for transliteration input

Binary classification: any code point in the Devanagari block makes the
whole input Devanagari, otherwise it is treated as Roman.
"""

DEVANAGARI = 'Devanagari'
ROMAN = 'Roman'

DEVANAGARI_START = '\u0900'
DEVANAGARI_END = '\u097F'


def contains_devanagari(text: str) -> bool:
    """Check whether any character falls in U+0900-U+097F"""
    return any(DEVANAGARI_START <= c <= DEVANAGARI_END for c in text)


def detect_script(text: str) -> str:
    """Detect if input is Devanagari or Roman"""
    if contains_devanagari(text):
        return DEVANAGARI
    return ROMAN
