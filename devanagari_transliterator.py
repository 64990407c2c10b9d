"""
Simple Devanagari to Brahmi transliterator
"""

from brahmi_tables import DEVANAGARI_DIRECT
from text_tokenizer import normalize


def devanagari_to_brahmi(text: str) -> str:
    """
    Convert Devanagari text to Brahmi

    Every code point maps on its own (virama and vowel signs included),
    so no syllable grouping is needed.

    Args:
        text: Devanagari text

    Returns:
        Brahmi text; characters without a mapping are kept unchanged
    """
    return ''.join(DEVANAGARI_DIRECT.get(char, char) for char in normalize(text))


def demo_transliteration():
    """Print a few sample conversions"""
    samples = ['धर्म', 'क्षेत्र', 'संस्कृतम्', 'दुःख', 'ॐ १२३']

    print("Devanagari to Brahmi:")
    print("=" * 40)
    for dev in samples:
        print(f"{dev:12s} → {devanagari_to_brahmi(dev)}")


if __name__ == '__main__':
    demo_transliteration()
