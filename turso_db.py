"""
Turso database connection and query utilities for the Brahmi lexicon
Uses Turso HTTP API (compatible with Vercel serverless)
"""

import logging
import os
from typing import Dict, List, Optional

import requests

logger = logging.getLogger("TursoDatabase")

# Turso database configuration from environment variables
TURSO_DATABASE_URL = os.getenv('TURSO_DATABASE_URL', '')
TURSO_AUTH_TOKEN = os.getenv('TURSO_AUTH_TOKEN', '')


def _to_https_url(url: str) -> str:
    """Convert libsql:// or other URL schemes to https://"""
    if url.startswith('libsql://'):
        return url.replace('libsql://', 'https://', 1)
    if url.startswith('http://'):
        return url.replace('http://', 'https://', 1)
    if not url.startswith('https://'):
        return 'https://' + url
    return url


def to_statement(sql: str, args: Optional[List] = None) -> Dict:
    """Build a pipeline statement with text arguments"""
    stmt = {'sql': sql}
    if args:
        stmt['args'] = [{'type': 'text', 'value': str(a)} for a in args]
    return stmt


def extract_rows(result: Dict) -> List[List]:
    """Unwrap typed column values ({'type': ..., 'value': ...}) from a result"""
    rows = []
    for raw_row in result.get('rows', []):
        row = []
        for col in raw_row:
            if isinstance(col, dict):
                row.append(col.get('value'))
            else:
                row.append(col)
        rows.append(row)
    return rows


class TursoDatabase:
    """Turso database connection wrapper using HTTP API"""

    def __init__(self, database_url: str = None, auth_token: str = None):
        """Initialize Turso database connection"""
        database_url = TURSO_DATABASE_URL if database_url is None else database_url
        auth_token = TURSO_AUTH_TOKEN if auth_token is None else auth_token

        self.connected = False
        self.base_url = _to_https_url(database_url) if database_url else ''
        self.pipeline_url = f'{self.base_url}/v2/pipeline' if self.base_url else ''
        self.headers = {
            'Authorization': f'Bearer {auth_token}',
            'Content-Type': 'application/json'
        } if auth_token else {}

    def _execute(self, sql: str, args: Optional[List] = None) -> Optional[List[List]]:
        """
        Execute a SQL query via Turso HTTP pipeline API

        Args:
            sql: SQL query string
            args: Optional list of query arguments

        Returns:
            List of rows (each row is a list of values), or None on error
        """
        if not self.pipeline_url or not self.headers:
            return None

        payload = {
            'requests': [
                {'type': 'execute', 'stmt': to_statement(sql, args)},
                {'type': 'close'}
            ]
        }

        try:
            resp = requests.post(
                self.pipeline_url,
                headers=self.headers,
                json=payload,
                timeout=8
            )
            if resp.status_code != 200:
                logger.warning("Turso: HTTP %s", resp.status_code)
                return None

            results = resp.json().get('results', [])
            if not results or results[0].get('type') != 'ok':
                return None

            return extract_rows(results[0].get('response', {}).get('result', {}))

        except (requests.RequestException, ValueError) as e:
            logger.warning("Turso: query failed: %s", e)
            return None

    def connect(self) -> bool:
        """Establish connection to Turso database"""
        if not self.pipeline_url or not self.headers:
            logger.info("Turso: URL or auth token not configured")
            self.connected = False
            return False

        rows = self._execute("SELECT 1")
        self.connected = rows is not None
        if self.connected:
            logger.info("Turso: Connected successfully")
        else:
            logger.warning("Turso: Connection test failed")
        return self.connected

    def _load_pairs(self, sql: str, label: str) -> Dict[str, str]:
        if not self.connected:
            if not self.connect():
                return {}

        rows = self._execute(sql)
        if rows is None:
            return {}

        table = {row[0]: row[1] for row in rows if len(row) >= 2 and row[0] and row[1] is not None}
        logger.info("Turso: Loaded %d %s", len(table), label)
        return table

    def load_glosses(self) -> Dict[str, str]:
        """
        Load word meanings in insertion order

        Returns:
            Dict of word -> meaning
        """
        return self._load_pairs("SELECT word, meaning FROM glosses ORDER BY rowid", 'glosses')

    def load_overrides(self) -> Dict[str, str]:
        """
        Load hand-written Brahmi spellings

        Returns:
            Dict of lowercase word -> Brahmi text
        """
        return self._load_pairs("SELECT word, brahmi FROM overrides ORDER BY rowid", 'overrides')

    def close(self):
        """Close database connection"""
        self.connected = False
