"""
Unified Brahmi Transliterator
Detects the input script, routes words through the Roman or Devanagari
transliterator and adds dictionary meaning, suggestions and confidence
"""

import argparse
import logging
import os
import sys
import threading
from typing import Dict, List, Optional

from flask import Flask, jsonify, request

# Load .env file for local development (ignored on Vercel where env vars are set in dashboard)
try:
    from dotenv import load_dotenv
    load_dotenv()
except ImportError:
    pass

from confidence import confidence_score
from devanagari_transliterator import devanagari_to_brahmi
from dictionary_lookup import DEFAULT_SUGGESTION_LIMIT, Lexicon, LexiconConfig, build_lexicon
from roman_transliterator import roman_to_brahmi
from script_detector import DEVANAGARI, ROMAN, detect_script
from text_tokenizer import last_word

logger = logging.getLogger("BrahmiTransliterator")

NOT_FOUND = '—'

# UI tab names and script names accepted as a forced mode
MODE_ALIASES = {
    'roman': ROMAN,
    'devanagari': DEVANAGARI,
    'sanskrit': DEVANAGARI,
}


def resolve_mode(forced_mode: Optional[str]) -> Optional[str]:
    """Map a forced mode name to a script, None meaning auto-detect"""
    if forced_mode is None or forced_mode == '' or forced_mode == 'auto':
        return None
    script = MODE_ALIASES.get(str(forced_mode).lower())
    if script is None:
        raise ValueError(f"Unknown mode: {forced_mode!r} (expected 'roman' or 'devanagari')")
    return script


class BrahmiTransliterator:
    """
    Roman/Devanagari to Brahmi transliterator with lexicon support
    """

    def __init__(self, lexicon: Optional[Lexicon] = None,
                 config: Optional[LexiconConfig] = None, load: bool = True):
        """
        Initialize transliterator

        Args:
            lexicon: Ready-made lexicon snapshot (skips loading)
            config: Lexicon source locations, defaults to environment
            load: If True and no lexicon is given, load one now
        """
        self.config = config
        self.lexicon = lexicon if lexicon is not None else Lexicon()
        if lexicon is None and load:
            self.reload_lexicon()

    def reload_lexicon(self) -> Lexicon:
        """Build a fresh lexicon from the configured sources and swap it in"""
        lexicon = build_lexicon(self.config)
        self.lexicon = lexicon
        return lexicon

    def reload_lexicon_in_background(self) -> threading.Thread:
        """Start a daemon thread that reloads the lexicon"""
        t = threading.Thread(target=self.reload_lexicon, name='lexicon-loader', daemon=True)
        t.start()
        return t

    def detect_script(self, text: str) -> str:
        return detect_script(text)

    def transliterate(self, text: str, forced_mode: Optional[str] = None) -> str:
        """
        Convert text to Brahmi

        Args:
            text: Roman or Devanagari text
            forced_mode: 'roman' or 'devanagari' to skip detection

        Returns:
            Brahmi text
        """
        lexicon = self.lexicon
        script = resolve_mode(forced_mode) or detect_script(text)
        if script == DEVANAGARI:
            return devanagari_to_brahmi(text)
        return roman_to_brahmi(text, lexicon.overrides)

    def lookup_meaning(self, word: str) -> Optional[str]:
        return self.lexicon.lookup_gloss(word)

    def suggest(self, prefix: str, limit: int = DEFAULT_SUGGESTION_LIMIT) -> List[str]:
        return self.lexicon.suggest_prefix(prefix, limit)

    def confidence_score(self, text: str) -> int:
        return confidence_score(text, self.lexicon)

    def analyze(self, text: str, forced_mode: Optional[str] = None) -> Dict:
        """
        Full result for one input: output, meaning of the last word,
        completions for it and confidence
        """
        lexicon = self.lexicon
        detected = detect_script(text)
        script = resolve_mode(forced_mode) or detected

        if script == DEVANAGARI:
            brahmi = devanagari_to_brahmi(text)
        else:
            brahmi = roman_to_brahmi(text, lexicon.overrides)

        word = last_word(text)
        meaning = lexicon.lookup_gloss(word) if word else None

        return {
            'success': True,
            'input': text,
            'script': detected,
            'mode': script,
            'brahmi': brahmi,
            'char_count': len(brahmi),
            'last_word': word,
            'meaning': meaning if meaning is not None else NOT_FOUND,
            'suggestions': lexicon.suggest_prefix(word) if word else [],
            'confidence': confidence_score(text, lexicon),
            'ipa': text if detected == ROMAN and text else NOT_FOUND,
        }


# Initialize transliterator; the lexicon arrives in the background
transliterator = BrahmiTransliterator(load=False)
transliterator.reload_lexicon_in_background()

app = Flask(__name__)


def _cors(response):
    response.headers.add('Access-Control-Allow-Origin', '*')
    return response


def _preflight():
    response = jsonify({'status': 'ok'})
    response.headers.add('Access-Control-Allow-Headers', 'Content-Type')
    response.headers.add('Access-Control-Allow-Methods', 'POST')
    return _cors(response)


def _error(message: str, status: int):
    return _cors(jsonify({'success': False, 'error': message})), status


def _read_payload() -> Dict:
    """Get request data from JSON, form fields or a raw UTF-8 body"""
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data

    data = request.form.to_dict()
    if data:
        return data

    try:
        raw = request.get_data().decode('utf-8')
    except UnicodeDecodeError:
        raw = ''
    return {'text': raw} if raw else {}


@app.route('/api/transliterate', methods=['POST', 'OPTIONS'])
def api_transliterate():
    """API endpoint for transliteration"""
    if request.method == 'OPTIONS':
        return _preflight()

    data = _read_payload()
    text = data.get('text')
    if not isinstance(text, str):
        return _error('Please provide text to transliterate', 400)

    try:
        script = resolve_mode(data.get('mode')) or detect_script(text)
        brahmi = transliterator.transliterate(text, script)
    except ValueError as e:
        return _error(str(e), 400)
    except Exception as e:
        logger.exception("Transliteration failed")
        return _error(f'Transliteration error: {str(e)}', 500)

    return _cors(jsonify({'success': True, 'script': script, 'brahmi': brahmi}))


@app.route('/api/analyze', methods=['POST', 'OPTIONS'])
def api_analyze():
    """Transliteration plus meaning, suggestions and confidence"""
    if request.method == 'OPTIONS':
        return _preflight()

    data = _read_payload()
    text = data.get('text')
    if not isinstance(text, str):
        return _error('Please provide text to analyze', 400)

    try:
        result = transliterator.analyze(text, data.get('mode'))
    except ValueError as e:
        return _error(str(e), 400)
    except Exception as e:
        logger.exception("Analysis failed")
        return _error(f'Analysis error: {str(e)}', 500)

    return _cors(jsonify(result))


@app.route('/api/meaning', methods=['GET'])
def api_meaning():
    word = request.args.get('word', '')
    if not word.strip():
        return _error('Please provide a word', 400)

    meaning = transliterator.lookup_meaning(word.strip())
    return _cors(jsonify({
        'success': True,
        'word': word.strip(),
        'meaning': meaning if meaning is not None else NOT_FOUND,
    }))


@app.route('/api/suggest', methods=['GET'])
def api_suggest():
    prefix = request.args.get('prefix', '')
    limit = request.args.get('limit', DEFAULT_SUGGESTION_LIMIT, type=int)
    return _cors(jsonify({
        'success': True,
        'prefix': prefix,
        'suggestions': transliterator.suggest(prefix, limit),
    }))


@app.route('/api/confidence', methods=['POST', 'OPTIONS'])
def api_confidence():
    if request.method == 'OPTIONS':
        return _preflight()

    data = _read_payload()
    text = data.get('text', '')
    if not isinstance(text, str):
        return _error('text must be a string', 400)

    return _cors(jsonify({'success': True, 'confidence': transliterator.confidence_score(text)}))


@app.route('/api/detect', methods=['GET'])
def api_detect():
    text = request.args.get('text', '')
    return _cors(jsonify({'success': True, 'script': transliterator.detect_script(text)}))


@app.route('/api/lexicon/stats', methods=['GET'])
def api_lexicon_stats():
    """Get lexicon statistics"""
    return _cors(jsonify(transliterator.lexicon.get_stats()))


def run_cli(argv: List[str]) -> int:
    """Transliterate the given text and print the analysis"""
    cli = argparse.ArgumentParser(description='Transliterate Roman or Devanagari text to Brahmi')
    cli.add_argument('text', nargs='+', help='Text to transliterate')
    cli.add_argument('--mode', choices=['roman', 'devanagari'], help='Force the input script')
    args = cli.parse_args(argv)

    text = ' '.join(args.text)
    engine = BrahmiTransliterator()
    result = engine.analyze(text, args.mode)

    print(f"\n=== {result['input']} ===")
    print(f"Script: {result['script']} (mode: {result['mode']})")
    print(f"Brahmi: {result['brahmi']}")
    print(f"Characters: {result['char_count']}")
    if result['last_word']:
        print(f"Meaning of '{result['last_word']}': {result['meaning']}")
    if result['suggestions']:
        print(f"Suggestions: {', '.join(result['suggestions'])}")
    print(f"Confidence: {result['confidence']}%")
    return 0


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(name)s: %(message)s')

    if len(sys.argv) > 1:
        # CLI mode
        sys.exit(run_cli(sys.argv[1:]))
    else:
        # Server mode
        port = int(os.environ.get("PORT", 5000))
        app.run(host='0.0.0.0', port=port, debug=True)
