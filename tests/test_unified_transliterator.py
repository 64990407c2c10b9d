import pytest

import unified_transliterator
from brahmi_tables import ANUSVARA
from devanagari_transliterator import devanagari_to_brahmi
from roman_transliterator import roman_to_brahmi, word_to_brahmi
from script_detector import DEVANAGARI, ROMAN
from unified_transliterator import NOT_FOUND, BrahmiTransliterator, resolve_mode


@pytest.fixture
def engine(lexicon):
    return BrahmiTransliterator(lexicon=lexicon)


@pytest.fixture
def client(engine, monkeypatch):
    monkeypatch.setattr(unified_transliterator, 'transliterator', engine)
    unified_transliterator.app.config['TESTING'] = True
    return unified_transliterator.app.test_client()


def test_resolve_mode():
    assert resolve_mode(None) is None
    assert resolve_mode('auto') is None
    assert resolve_mode('Roman') == ROMAN
    assert resolve_mode('sanskrit') == DEVANAGARI
    with pytest.raises(ValueError):
        resolve_mode('klingon')


def test_detection_picks_transliterator(engine):
    assert engine.transliterate('à¤§à¤°à¥à¤®') == devanagari_to_brahmi('à¤§à¤°à¥à¤®')
    assert engine.transliterate('dharma') == roman_to_brahmi('dharma')


def test_forced_mode_overrides_detection(engine):
    assert engine.transliterate('dharma', 'devanagari') == 'dharma'
    assert engine.transliterate('à¤§à¤°à¥à¤®', 'roman') == 'à¤§à¤°à¥à¤®'


def test_overrides_applied(engine):
    assert engine.transliterate('om') == '\N{BRAHMI LETTER O}' + ANUSVARA


def test_meaning_and_suggestions(engine):
    assert engine.lookup_meaning('Dharma') == 'duty, righteousness'
    assert engine.lookup_meaning('nothing') is None
    assert engine.suggest('dh', limit=1) == ['dharma']


def test_reload_swaps_whole_lexicon(engine, tmp_path):
    engine.config = unified_transliterator.LexiconConfig(
        dictionary_path=str(tmp_path / 'none.json'),
        overrides_path=str(tmp_path / 'none.json'),
        use_turso=False,
    )
    old = engine.lexicon
    new = engine.reload_lexicon()
    assert engine.lexicon is new
    assert new is not old
    assert engine.lookup_meaning('dharma') is None
    assert len(old.glosses) == 5


def test_background_reload(engine, tmp_path):
    engine.config = unified_transliterator.LexiconConfig(
        dictionary_path=str(tmp_path / 'none.json'),
        overrides_path=str(tmp_path / 'none.json'),
        use_turso=False,
    )
    t = engine.reload_lexicon_in_background()
    t.join(timeout=5)
    assert engine.lexicon.get_stats()['glosses'] == 0


def test_analyze(engine):
    result = engine.analyze('satyam eva dharma')
    assert result['success']
    assert result['script'] == ROMAN
    assert result['mode'] == ROMAN
    assert result['brahmi'] == ' '.join(word_to_brahmi(w) for w in ('satyam', 'eva', 'dharma'))
    assert result['char_count'] == len(result['brahmi'])
    assert result['last_word'] == 'dharma'
    assert result['meaning'] == 'duty, righteousness'
    assert result['suggestions'] == ['dharma']
    assert result['confidence'] == 40
    assert result['ipa'] == 'satyam eva dharma'


def test_romanization_helper_only_for_roman_input(engine):
    assert engine.analyze('धर्म')['ipa'] == NOT_FOUND
    assert engine.analyze('')['ipa'] == NOT_FOUND


def test_analyze_without_last_word(engine):
    result = engine.analyze('dharma!')
    assert result['last_word'] == ''
    assert result['meaning'] == NOT_FOUND
    assert result['suggestions'] == []


def test_api_transliterate(client):
    resp = client.post('/api/transliterate', json={'text': 'à¤§à¤°à¥à¤®'})
    data = resp.get_json()
    assert resp.status_code == 200
    assert data == {'success': True, 'script': DEVANAGARI, 'brahmi': devanagari_to_brahmi('à¤§à¤°à¥à¤®')}
    assert resp.headers['Access-Control-Allow-Origin'] == '*'


def test_api_transliterate_forced_mode(client):
    resp = client.post('/api/transliterate', json={'text': 'dharma', 'mode': 'devanagari'})
    assert resp.get_json()['brahmi'] == 'dharma'


def test_api_transliterate_raw_body(client):
    resp = client.post('/api/transliterate', data='rÄma'.encode('utf-8'),
                       content_type='text/plain')
    assert resp.get_json()['brahmi'] == word_to_brahmi('rÄma')


def test_api_transliterate_errors(client):
    assert client.post('/api/transliterate', json={}).status_code == 400
    resp = client.post('/api/transliterate', json={'text': 'a', 'mode': 'klingon'})
    assert resp.status_code == 400
    assert resp.get_json()['success'] is False


def test_api_preflight(client):
    resp = client.options('/api/analyze')
    assert resp.status_code == 200
    assert resp.headers['Access-Control-Allow-Methods'] == 'POST'


def test_api_analyze(client):
    resp = client.post('/api/analyze', json={'text': 'satya'})
    data = resp.get_json()
    assert data['meaning'] == 'truth'
    assert data['confidence'] == 100


def test_api_meaning(client):
    assert client.get('/api/meaning?word=DHARMA').get_json()['meaning'] == 'duty, righteousness'
    assert client.get('/api/meaning?word=xyz').get_json()['meaning'] == NOT_FOUND
    assert client.get('/api/meaning').status_code == 400


def test_api_suggest(client):
    data = client.get('/api/suggest?prefix=dh&limit=2').get_json()
    assert data['suggestions'] == ['dharma', 'dhanus']
    assert client.get('/api/suggest').get_json()['suggestions'] == []


def test_api_confidence(client):
    assert client.post('/api/confidence', json={'text': 'xyzxyz'}).get_json()['confidence'] == 10


def test_api_detect(client):
    assert client.get('/api/detect', query_string={'text': 'à¥'}).get_json()['script'] == DEVANAGARI


def test_api_lexicon_stats(client):
    assert client.get('/api/lexicon/stats').get_json() == {
        'glosses': 5, 'overrides': 1, 'source': 'memory',
    }


def test_cli(capsys, monkeypatch, lexicon):
    monkeypatch.setattr(unified_transliterator, 'BrahmiTransliterator',
                        lambda: BrahmiTransliterator(lexicon=lexicon))
    assert unified_transliterator.run_cli(['satya']) == 0
    out = capsys.readouterr().out
    assert 'Script: Roman' in out
    assert "Meaning of 'satya': truth" in out
