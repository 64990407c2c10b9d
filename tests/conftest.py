import pytest

from dictionary_lookup import Lexicon


@pytest.fixture
def lexicon():
    return Lexicon.from_mappings(
        glosses={
            'dharma': 'duty, righteousness',
            'Karma': 'action',
            'dhanus': 'bow',
            'dhātu': 'root, element',
            'satya': 'truth',
        },
        overrides={'OM': '\N{BRAHMI LETTER O}\N{BRAHMI SIGN ANUSVARA}'},
    )
