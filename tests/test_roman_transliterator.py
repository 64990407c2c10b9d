import pytest

from brahmi_tables import (
    ANUSVARA, CONSONANTS as C, INDEPENDENT_VOWELS as IV, VIRAMA, VISARGA, VOWEL_SIGNS as MV,
)
from devanagari_transliterator import devanagari_to_brahmi
from roman_transliterator import (
    apply_schwa_elision, canonicalize_marks, fold_case, roman_to_brahmi, word_to_brahmi,
)


def test_empty_word():
    assert word_to_brahmi('') == ''


def test_aspirate_consonant_is_one_letter():
    assert word_to_brahmi('khid') == C['kh'] + MV['i'] + C['d']


def test_unaspirated_k_before_s():
    result = word_to_brahmi('ksha')
    assert result.startswith(C['k'] + VIRAMA)
    assert C['kh'] not in result


def test_diphthong_vowels():
    assert word_to_brahmi('ai') == IV['ai']
    assert word_to_brahmi('kau') == C['k'] + MV['au']


def test_independent_vowel_after_vowel():
    assert word_to_brahmi('maa') == C['m'] + IV['a']


@pytest.mark.parametrize('word, expected', [
    ('rama', 'ram'),
    ('dharma', 'dharm'),
    ('kha', 'kh'),
    ('maa', 'maa'),
    ('ma', 'ma'),
    ('rāmā', 'rāmā'),
])
def test_schwa_elision(word, expected):
    assert apply_schwa_elision(word) == expected


def test_rama():
    assert word_to_brahmi('rama') == C['r'] + C['m']


def test_no_trailing_virama():
    assert word_to_brahmi('vāk') == C['v'] + MV['ā'] + C['k']
    assert not word_to_brahmi('m').endswith(VIRAMA)


def test_final_m_becomes_anusvara():
    assert word_to_brahmi('satyam') == word_to_brahmi('satya') + ANUSVARA


def test_single_m_is_consonant():
    assert word_to_brahmi('m') == C['m']


def test_long_run_of_final_m():
    assert word_to_brahmi('ka' + 'm' * 1200) == C['k'] + ANUSVARA * 1200
    text = 'hmm' + 'm' * 1500 + '!'
    assert roman_to_brahmi(text) == C['h'] + ANUSVARA * 1502 + '!'


def test_override_after_several_final_m():
    assert word_to_brahmi('satyamm', {'satya': '<S>'}) == '<S>' + ANUSVARA * 2


def test_anusvara_and_visarga_letters():
    assert word_to_brahmi('saṃskṛta') == (
        C['s'] + ANUSVARA + C['s'] + VIRAMA + C['k'] + MV['ṛ'] + C['t']
    )
    assert word_to_brahmi('duḥkha') == C['d'] + MV['u'] + VISARGA + C['kh']


def test_both_anusvara_spellings_agree():
    assert canonicalize_marks('saṁskṛta') == 'saṃskṛta'
    assert word_to_brahmi('saṁskṛta') == word_to_brahmi('saṃskṛta')


def test_case_insensitive_keys():
    assert fold_case('RĀMA') == 'rāma'
    assert word_to_brahmi('Rāma') == word_to_brahmi('rāma')


def test_unknown_characters_pass_through():
    assert word_to_brahmi('qa') == 'q' + IV['a']
    assert word_to_brahmi('Xo') == 'X' + IV['o']


def test_decomposed_diacritics():
    assert word_to_brahmi('ra\u0304ma') == word_to_brahmi('rāma')


def test_override_short_circuit():
    overrides = {'dharma': '<X>'}
    assert word_to_brahmi('Dharma', overrides) == '<X>'
    assert word_to_brahmi('DHARMA', overrides) == '<X>'


def test_override_used_under_final_m():
    overrides = {'satya': '<S>'}
    assert word_to_brahmi('satyam', overrides) == '<S>' + ANUSVARA


def test_matches_devanagari_spelling():
    assert word_to_brahmi('dharma') == devanagari_to_brahmi('धर्म')
    assert word_to_brahmi('kṣetra') == devanagari_to_brahmi('क्षेत्र')


def test_text_keeps_non_words():
    assert roman_to_brahmi('rāma, 108!\n') == word_to_brahmi('rāma') + ', 108!\n'


def test_abbreviations_pass_through():
    assert roman_to_brahmi('e.g. dharma') == 'e.g. ' + word_to_brahmi('dharma')


@pytest.mark.parametrize('text', ['', '2024 - 12 / 31', '!!  ?? ...', ' \t\n'])
def test_non_letters_unchanged(text):
    assert roman_to_brahmi(text) == text


def test_text_with_overrides():
    overrides = {'om': '<OM>'}
    assert roman_to_brahmi('Om śānti', overrides) == '<OM> ' + word_to_brahmi('śānti')
