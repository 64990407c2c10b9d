"""
Brahmi Lexicon Module

Word glosses and whole-word Brahmi overrides, held as an immutable
snapshot. Sources are Turso, a JSON document over HTTP, or a local JSON
file; any missing or broken source just gives an empty mapping.

Usage:
    from dictionary_lookup import Lexicon, build_lexicon

    lexicon = build_lexicon()
    meaning = lexicon.lookup_gloss('dharma')
    words = lexicon.suggest_prefix('dha')
"""

import json
import logging
import os
import unicodedata
from dataclasses import dataclass, field
from itertools import islice
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

import requests

logger = logging.getLogger("LexiconLoader")

MODULE_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_SUGGESTION_LIMIT = 15
HTTP_TIMEOUT = 8


def _empty_mapping() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True)
class Lexicon:
    """Read-only gloss and override tables; replace the whole object to update"""
    glosses: Mapping[str, str] = field(default_factory=_empty_mapping)
    overrides: Mapping[str, str] = field(default_factory=_empty_mapping)
    source: str = 'none'

    @classmethod
    def from_mappings(cls, glosses: Optional[Mapping] = None,
                      overrides: Optional[Mapping] = None,
                      source: str = 'memory') -> 'Lexicon':
        """
        Build a snapshot from plain mappings

        Gloss keys keep their case; override keys are lowercased.
        """
        gloss_table = coerce_mapping(glosses or {}, 'glosses')
        override_table = {
            key.lower(): value
            for key, value in coerce_mapping(overrides or {}, 'overrides').items()
        }
        return cls(
            glosses=MappingProxyType(gloss_table),
            overrides=MappingProxyType(override_table),
            source=source,
        )

    def lookup_gloss(self, word: str) -> Optional[str]:
        """
        Look up the meaning of a word

        Args:
            word: Word as typed (exact key tried first, then lowercase)

        Returns:
            Meaning string, or None when the word is unknown
        """
        if not word:
            return None
        word = unicodedata.normalize('NFC', word)
        meaning = self.glosses.get(word)
        if meaning is None:
            meaning = self.glosses.get(word.lower())
        return meaning

    def suggest_prefix(self, prefix: str, limit: int = DEFAULT_SUGGESTION_LIMIT) -> List[str]:
        """
        Complete a prefix against the gloss keys

        Args:
            prefix: Typed prefix (case-insensitive)
            limit: Maximum number of suggestions

        Returns:
            Matching words in source order
        """
        if not prefix or limit <= 0:
            return []
        low = unicodedata.normalize('NFC', prefix).lower()
        matches = (key for key in self.glosses if key.lower().startswith(low))
        return list(islice(matches, limit))

    def has_word(self, word: str) -> bool:
        """Check whether the lowercased word is a gloss key"""
        return word.lower() in self.glosses

    def get_stats(self) -> Dict:
        """Get lexicon statistics"""
        return {
            'glosses': len(self.glosses),
            'overrides': len(self.overrides),
            'source': self.source,
        }


def coerce_mapping(data, name: str) -> Dict[str, str]:
    """
    Turn parsed JSON into a str -> str table

    A non-object document gives an empty table. List values are joined
    with '; ', other non-string values are dropped.
    """
    if not isinstance(data, Mapping):
        logger.warning("%s: expected a JSON object, got %s", name, type(data).__name__)
        return {}

    table = {}
    skipped = 0
    for key, value in data.items():
        if not isinstance(key, str):
            skipped += 1
            continue
        if isinstance(value, list) and all(isinstance(v, str) for v in value):
            value = '; '.join(value)
        if not isinstance(value, str):
            skipped += 1
            continue
        table[unicodedata.normalize('NFC', key)] = value

    if skipped:
        logger.warning("%s: skipped %d malformed entries", name, skipped)
    return table


def load_json_file(path: str, name: str) -> Dict[str, str]:
    """Load a flat JSON object from disk, or {} if missing/invalid"""
    if not path or not os.path.exists(path):
        logger.info("%s: no file at %s", name, path)
        return {}

    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("%s: could not read %s: %s", name, path, e)
        return {}

    return coerce_mapping(data, name)


def fetch_json_url(url: str, name: str, timeout: int = HTTP_TIMEOUT) -> Dict[str, str]:
    """Fetch a flat JSON object over HTTP, or {} on any failure"""
    try:
        resp = requests.get(url, timeout=timeout, headers={'Cache-Control': 'no-store'})
        resp.raise_for_status()
        data = resp.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning("%s: could not fetch %s: %s", name, url, e)
        return {}

    return coerce_mapping(data, name)


@dataclass
class LexiconConfig:
    """Where to load glosses and overrides from"""
    dictionary_path: str = os.path.join(MODULE_DIR, 'dictionary.json')
    overrides_path: str = os.path.join(MODULE_DIR, 'overrides.json')
    dictionary_url: str = ''
    overrides_url: str = ''
    use_turso: bool = True

    @classmethod
    def from_env(cls) -> 'LexiconConfig':
        defaults = cls()
        return cls(
            dictionary_path=os.getenv('BRAHMI_DICTIONARY_PATH', defaults.dictionary_path),
            overrides_path=os.getenv('BRAHMI_OVERRIDES_PATH', defaults.overrides_path),
            dictionary_url=os.getenv('BRAHMI_DICTIONARY_URL', ''),
            overrides_url=os.getenv('BRAHMI_OVERRIDES_URL', ''),
        )


def _resolve(name: str, turso_table: Dict[str, str], url: str, path: str):
    if turso_table:
        return turso_table, 'turso'
    if url:
        table = fetch_json_url(url, name)
        if table:
            return table, 'url'
    table = load_json_file(path, name)
    if table:
        return table, 'local_json'
    return {}, 'none'


def build_lexicon(config: Optional[LexiconConfig] = None) -> Lexicon:
    """
    Load glosses and overrides from the configured sources

    Priority for each table: Turso, then URL, then local JSON file.

    Args:
        config: Source locations (defaults to environment variables)

    Returns:
        New Lexicon snapshot (possibly empty)
    """
    if config is None:
        config = LexiconConfig.from_env()

    turso_glosses: Dict[str, str] = {}
    turso_overrides: Dict[str, str] = {}
    if config.use_turso:
        try:
            from turso_db import TursoDatabase
            turso_db = TursoDatabase()
            if turso_db.connect():
                turso_glosses = coerce_mapping(turso_db.load_glosses(), 'glosses')
                turso_overrides = coerce_mapping(turso_db.load_overrides(), 'overrides')
                turso_db.close()
        except Exception as e:
            logger.warning("Turso not available, using fallback sources: %s", e)

    glosses, gloss_source = _resolve('glosses', turso_glosses, config.dictionary_url, config.dictionary_path)
    overrides, override_source = _resolve('overrides', turso_overrides, config.overrides_url, config.overrides_path)

    logger.info("Lexicon loaded: %d glosses (%s), %d overrides (%s)",
                len(glosses), gloss_source, len(overrides), override_source)

    return Lexicon.from_mappings(glosses, overrides, source=f'{gloss_source}+{override_source}')
