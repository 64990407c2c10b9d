"""
Roman (IAST) to Brahmi transliterator

Greedy longest-match scanner over vowel and consonant keys with
word-final schwa elision, a final-m anusvara convention and whole-word
overrides.
"""

from typing import Mapping, Optional

from brahmi_tables import (
    ANUSVARA, CONSONANT_KEYS, CONSONANTS, INDEPENDENT_VOWELS, ROMAN_MARKS,
    VIRAMA, VOWEL_KEYS, VOWEL_SIGNS, match_longest,
)
from text_tokenizer import is_transliterable, normalize, tokenize

# Alternate spellings folded onto the keys used by ROMAN_MARKS
MARK_VARIANTS = {
    'ṁ': 'ṃ',
    'Ṁ': 'Ṃ',
}


def fold_case(word: str) -> str:
    """Lowercase character by character, keeping positions aligned with word"""
    folded = []
    for c in word:
        lower = c.lower()
        folded.append(lower if len(lower) == 1 else c)
    return ''.join(folded)


def canonicalize_marks(word: str) -> str:
    """Map both anusvara spellings (ṁ, ṃ) to ṃ"""
    for variant, canonical in MARK_VARIANTS.items():
        word = word.replace(variant, canonical)
    return word


def apply_schwa_elision(word: str) -> str:
    """
    Drop a silent word-final 'a' after a consonant

    Words of two characters or fewer are left alone, so 'ma' keeps its vowel.
    """
    folded = fold_case(word)
    if len(folded) > 2 and folded[-1] == 'a' and folded[-2] in CONSONANTS:
        return word[:-1]
    return word


def _scan(word: str) -> str:
    folded = fold_case(word)
    result = []
    i = 0

    while i < len(folded):
        char = folded[i]

        # Anusvara and visarga
        if char in ROMAN_MARKS:
            result.append(ROMAN_MARKS[char])
            i += 1
            continue

        # Standalone vowels
        vowel = match_longest(folded, i, VOWEL_KEYS)
        if vowel:
            result.append(INDEPENDENT_VOWELS[vowel])
            i += len(vowel)
            continue

        # Consonant, then its vowel sign or a virama
        consonant = match_longest(folded, i, CONSONANT_KEYS)
        if consonant:
            result.append(CONSONANTS[consonant])
            i += len(consonant)

            sign = match_longest(folded, i, VOWEL_KEYS)
            if sign:
                result.append(VOWEL_SIGNS[sign])
                i += len(sign)
            else:
                result.append(VIRAMA)
            continue

        # Unknown character - keep as is
        result.append(word[i])
        i += 1

    output = ''.join(result)
    if output.endswith(VIRAMA):
        output = output[:-len(VIRAMA)]
    return output


def word_to_brahmi(word: str, overrides: Optional[Mapping[str, str]] = None) -> str:
    """
    Convert a single Roman word to Brahmi

    Args:
        word: Word in IAST-style romanization
        overrides: Lowercase word -> full Brahmi output, checked first

    Returns:
        Brahmi text (unmapped characters are kept)
    """
    if not word:
        return ''

    word = normalize(word)
    if overrides:
        override = overrides.get(word.lower())
        if override is not None:
            return override

    word = canonicalize_marks(word)

    # Each final m is written as anusvara on the rest of the word
    anusvaras = 0
    while len(word) > 1 and fold_case(word[-1]) == 'm':
        word = word[:-1]
        anusvaras += 1
        if overrides:
            override = overrides.get(word.lower())
            if override is not None:
                return override + ANUSVARA * anusvaras

    return _scan(apply_schwa_elision(word)) + ANUSVARA * anusvaras


def roman_to_brahmi(text: str, overrides: Optional[Mapping[str, str]] = None) -> str:
    """Transliterate running Roman text, keeping digits, punctuation and spacing"""
    return ''.join(
        word_to_brahmi(token.text, overrides) if is_transliterable(token) else token.text
        for token in tokenize(text)
    )
