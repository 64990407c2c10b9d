"""
Brahmi symbol tables

Static mappings from IAST-style Roman keys and Devanagari code points to
Brahmi glyphs. Built once at import and never mutated.
"""

from types import MappingProxyType
from typing import Iterable, Tuple

# Special marks
ANUSVARA = '\N{BRAHMI SIGN ANUSVARA}'
VISARGA = '\N{BRAHMI SIGN VISARGA}'
VIRAMA = '\N{BRAHMI VIRAMA}'

# Roman vowels to Brahmi independent vowels
_INDEPENDENT_VOWELS = {
    'a': '\N{BRAHMI LETTER A}', 'ā': '\N{BRAHMI LETTER AA}',
    'i': '\N{BRAHMI LETTER I}', 'ī': '\N{BRAHMI LETTER II}',
    'u': '\N{BRAHMI LETTER U}', 'ū': '\N{BRAHMI LETTER UU}',
    'ṛ': '\N{BRAHMI LETTER VOCALIC R}', 'ṝ': '\N{BRAHMI LETTER VOCALIC RR}',
    'ḷ': '\N{BRAHMI LETTER VOCALIC L}',
    'e': '\N{BRAHMI LETTER E}', 'ai': '\N{BRAHMI LETTER AI}',
    'o': '\N{BRAHMI LETTER O}', 'au': '\N{BRAHMI LETTER AU}',
}

# Roman vowels to Brahmi vowel signs (mātrā); inherent 'a' has no mark
_VOWEL_SIGNS = {
    'a': '', 'ā': '\N{BRAHMI VOWEL SIGN AA}',
    'i': '\N{BRAHMI VOWEL SIGN I}', 'ī': '\N{BRAHMI VOWEL SIGN II}',
    'u': '\N{BRAHMI VOWEL SIGN U}', 'ū': '\N{BRAHMI VOWEL SIGN UU}',
    'ṛ': '\N{BRAHMI VOWEL SIGN VOCALIC R}', 'ṝ': '\N{BRAHMI VOWEL SIGN VOCALIC RR}',
    'ḷ': '\N{BRAHMI VOWEL SIGN VOCALIC L}',
    'e': '\N{BRAHMI VOWEL SIGN E}', 'ai': '\N{BRAHMI VOWEL SIGN AI}',
    'o': '\N{BRAHMI VOWEL SIGN O}', 'au': '\N{BRAHMI VOWEL SIGN AU}',
}

# Roman consonants to Brahmi consonants
_CONSONANTS = {
    # Velars
    'k': '\N{BRAHMI LETTER KA}', 'kh': '\N{BRAHMI LETTER KHA}',
    'g': '\N{BRAHMI LETTER GA}', 'gh': '\N{BRAHMI LETTER GHA}',
    'ṅ': '\N{BRAHMI LETTER NGA}',
    # Palatals
    'c': '\N{BRAHMI LETTER CA}', 'ch': '\N{BRAHMI LETTER CHA}',
    'j': '\N{BRAHMI LETTER JA}', 'jh': '\N{BRAHMI LETTER JHA}',
    'ñ': '\N{BRAHMI LETTER NYA}',
    # Retroflexes
    'ṭ': '\N{BRAHMI LETTER TTA}', 'ṭh': '\N{BRAHMI LETTER TTHA}',
    'ḍ': '\N{BRAHMI LETTER DDA}', 'ḍh': '\N{BRAHMI LETTER DDHA}',
    'ṇ': '\N{BRAHMI LETTER NNA}',
    # Dentals
    't': '\N{BRAHMI LETTER TA}', 'th': '\N{BRAHMI LETTER THA}',
    'd': '\N{BRAHMI LETTER DA}', 'dh': '\N{BRAHMI LETTER DHA}',
    'n': '\N{BRAHMI LETTER NA}',
    # Labials
    'p': '\N{BRAHMI LETTER PA}', 'ph': '\N{BRAHMI LETTER PHA}',
    'b': '\N{BRAHMI LETTER BA}', 'bh': '\N{BRAHMI LETTER BHA}',
    'm': '\N{BRAHMI LETTER MA}',
    # Semivowels
    'y': '\N{BRAHMI LETTER YA}', 'r': '\N{BRAHMI LETTER RA}',
    'l': '\N{BRAHMI LETTER LA}', 'v': '\N{BRAHMI LETTER VA}',
    # Sibilants
    'ś': '\N{BRAHMI LETTER SHA}', 'ṣ': '\N{BRAHMI LETTER SSA}',
    's': '\N{BRAHMI LETTER SA}',
    # Aspirate
    'h': '\N{BRAHMI LETTER HA}',
}

# Roman anusvara / visarga letters (canonical spellings only)
_ROMAN_MARKS = {
    'ṃ': ANUSVARA,
    'ḥ': VISARGA,
}

# Devanagari code points to Brahmi
_DEVANAGARI_DIRECT = {
    # Independent vowels
    'अ': '\N{BRAHMI LETTER A}', 'आ': '\N{BRAHMI LETTER AA}',
    'इ': '\N{BRAHMI LETTER I}', 'ई': '\N{BRAHMI LETTER II}',
    'उ': '\N{BRAHMI LETTER U}', 'ऊ': '\N{BRAHMI LETTER UU}',
    'ऋ': '\N{BRAHMI LETTER VOCALIC R}', 'ॠ': '\N{BRAHMI LETTER VOCALIC RR}',
    'ऌ': '\N{BRAHMI LETTER VOCALIC L}',
    'ए': '\N{BRAHMI LETTER E}', 'ऐ': '\N{BRAHMI LETTER AI}',
    'ओ': '\N{BRAHMI LETTER O}', 'औ': '\N{BRAHMI LETTER AU}',
    # Vowel signs (mātrā)
    'ा': '\N{BRAHMI VOWEL SIGN AA}', 'ि': '\N{BRAHMI VOWEL SIGN I}',
    'ी': '\N{BRAHMI VOWEL SIGN II}', 'ु': '\N{BRAHMI VOWEL SIGN U}',
    'ू': '\N{BRAHMI VOWEL SIGN UU}', 'ृ': '\N{BRAHMI VOWEL SIGN VOCALIC R}',
    'ॄ': '\N{BRAHMI VOWEL SIGN VOCALIC RR}', 'ॢ': '\N{BRAHMI VOWEL SIGN VOCALIC L}',
    'े': '\N{BRAHMI VOWEL SIGN E}', 'ै': '\N{BRAHMI VOWEL SIGN AI}',
    'ो': '\N{BRAHMI VOWEL SIGN O}', 'ौ': '\N{BRAHMI VOWEL SIGN AU}',
    # Consonants
    'क': '\N{BRAHMI LETTER KA}', 'ख': '\N{BRAHMI LETTER KHA}',
    'ग': '\N{BRAHMI LETTER GA}', 'घ': '\N{BRAHMI LETTER GHA}',
    'ङ': '\N{BRAHMI LETTER NGA}',
    'च': '\N{BRAHMI LETTER CA}', 'छ': '\N{BRAHMI LETTER CHA}',
    'ज': '\N{BRAHMI LETTER JA}', 'झ': '\N{BRAHMI LETTER JHA}',
    'ञ': '\N{BRAHMI LETTER NYA}',
    'ट': '\N{BRAHMI LETTER TTA}', 'ठ': '\N{BRAHMI LETTER TTHA}',
    'ड': '\N{BRAHMI LETTER DDA}', 'ढ': '\N{BRAHMI LETTER DDHA}',
    'ण': '\N{BRAHMI LETTER NNA}',
    'त': '\N{BRAHMI LETTER TA}', 'थ': '\N{BRAHMI LETTER THA}',
    'द': '\N{BRAHMI LETTER DA}', 'ध': '\N{BRAHMI LETTER DHA}',
    'न': '\N{BRAHMI LETTER NA}',
    'प': '\N{BRAHMI LETTER PA}', 'फ': '\N{BRAHMI LETTER PHA}',
    'ब': '\N{BRAHMI LETTER BA}', 'भ': '\N{BRAHMI LETTER BHA}',
    'म': '\N{BRAHMI LETTER MA}',
    'य': '\N{BRAHMI LETTER YA}', 'र': '\N{BRAHMI LETTER RA}',
    'ल': '\N{BRAHMI LETTER LA}', 'व': '\N{BRAHMI LETTER VA}',
    'श': '\N{BRAHMI LETTER SHA}', 'ष': '\N{BRAHMI LETTER SSA}',
    'स': '\N{BRAHMI LETTER SA}', 'ह': '\N{BRAHMI LETTER HA}',
    # Anusvara, visarga, virama
    'ं': ANUSVARA, 'ः': VISARGA, '्': VIRAMA,
}

INDEPENDENT_VOWELS = MappingProxyType(_INDEPENDENT_VOWELS)
VOWEL_SIGNS = MappingProxyType(_VOWEL_SIGNS)
CONSONANTS = MappingProxyType(_CONSONANTS)
ROMAN_MARKS = MappingProxyType(_ROMAN_MARKS)
DEVANAGARI_DIRECT = MappingProxyType(_DEVANAGARI_DIRECT)


def longest_first(keys: Iterable[str]) -> Tuple[str, ...]:
    """Order keys so that longer keys are always tried before their prefixes"""
    return tuple(sorted(keys, key=len, reverse=True))


# Greedy longest-match relies on this ordering ('th' before 't', 'ai' before 'a')
VOWEL_KEYS = longest_first(INDEPENDENT_VOWELS)
CONSONANT_KEYS = longest_first(CONSONANTS)


def match_longest(text: str, pos: int, keys: Tuple[str, ...]) -> str:
    """
    Return the longest key that occurs in text at pos

    Args:
        text: Text being scanned
        pos: Scan position
        keys: Candidate keys, longest first

    Returns:
        Matching key, or '' when nothing matches
    """
    for key in keys:
        if text.startswith(key, pos):
            return key
    return ''
