"""
Dictionary-coverage confidence score for a transliteration
"""

import math

from dictionary_lookup import Lexicon
from text_tokenizer import is_transliterable, tokenize


def confidence_score(text: str, lexicon: Lexicon) -> int:
    """
    Score text by the share of its words found in the lexicon

    Any text with at least one word scores 10 or more, full coverage
    scores 100.

    Args:
        text: Source text (Roman or Devanagari)
        lexicon: Lexicon snapshot to check words against

    Returns:
        Integer in [0, 100]; 0 when the text has no words
    """
    words = [token.text for token in tokenize(text) if is_transliterable(token)]
    if not words:
        return 0

    hits = sum(1 for word in words if lexicon.has_word(word))
    raw = hits / len(words) * 90 + 10
    return min(100, int(math.floor(raw + 0.5)))
