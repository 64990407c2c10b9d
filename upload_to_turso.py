"""
One-time script to upload dictionary.json / overrides.json to Turso.
Creates the glosses and overrides tables if they do not exist.

Usage:
    python upload_to_turso.py <read-write-token> [dictionary.json] [overrides.json]
"""

import json
import os
import sys
import time
from typing import Dict, List, Tuple

import requests

from dictionary_lookup import coerce_mapping
from turso_db import TURSO_DATABASE_URL, _to_https_url, to_statement

SCHEMA = [
    "CREATE TABLE IF NOT EXISTS glosses (word TEXT PRIMARY KEY, meaning TEXT NOT NULL)",
    "CREATE TABLE IF NOT EXISTS overrides (word TEXT PRIMARY KEY, brahmi TEXT NOT NULL)",
]

# table -> (key column, value column)
COLUMNS = {
    'glosses': ('word', 'meaning'),
    'overrides': ('word', 'brahmi'),
}

BATCH_SIZE = 200


def pipeline_url(database_url: str) -> str:
    return f"{_to_https_url(database_url)}/v2/pipeline"


def execute_batch(url: str, token: str, statements: List[Dict]) -> Tuple[bool, List[str]]:
    """Execute a batch of SQL statements via Turso pipeline API"""
    requests_list = [{"type": "execute", "stmt": s} for s in statements]
    requests_list.append({"type": "close"})
    payload = {"requests": requests_list}
    headers = {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json"
    }

    for attempt in range(3):
        try:
            resp = requests.post(url, headers=headers, json=payload, timeout=30)
            if resp.status_code == 200:
                errors = []
                for i, r in enumerate(resp.json().get("results", [])):
                    if r.get("type") == "error":
                        errors.append(f"Statement {i}: {r.get('error', {}).get('message', 'unknown')}")
                return True, errors
            if attempt < 2:
                time.sleep(2)
                continue
            return False, [f"HTTP {resp.status_code}: {resp.text[:200]}"]
        except (requests.RequestException, ValueError) as e:
            if attempt < 2:
                time.sleep(2)
                continue
            return False, [str(e)]
    return False, ["Max retries exceeded"]


def build_insert_statements(table: str, entries: Dict[str, str]) -> List[Dict]:
    """INSERT OR REPLACE statements for one table, in source order"""
    key_col, value_col = COLUMNS[table]
    sql = f"INSERT OR REPLACE INTO {table} ({key_col}, {value_col}) VALUES (?, ?)"
    if table == 'overrides':
        entries = {k.lower(): v for k, v in entries.items()}
    return [to_statement(sql, [key, value]) for key, value in entries.items()]


def read_entries(path: str) -> Dict[str, str]:
    """Read a flat JSON object; missing file gives {}"""
    if not os.path.exists(path):
        print(f"  {path} not found, skipping")
        return {}
    with open(path, encoding="utf-8") as f:
        return coerce_mapping(json.load(f), os.path.basename(path))


def upload_table(url: str, token: str, table: str, entries: Dict[str, str]) -> Tuple[int, int]:
    """Upload entries in batches; returns (inserted, errors)"""
    statements = build_insert_statements(table, entries)
    inserted = 0
    errors_total = 0

    for i in range(0, len(statements), BATCH_SIZE):
        batch = statements[i:i + BATCH_SIZE]
        ok, errors = execute_batch(url, token, batch)
        if ok:
            inserted += len(batch) - len(errors)
            errors_total += len(errors)
        else:
            errors_total += len(batch)
            print(f"\n  ERROR in {table} batch {i}: {errors}")

        sys.stdout.write(f"\r  {table}: {min(i + BATCH_SIZE, len(statements))}/{len(statements)}")
        sys.stdout.flush()

    print()
    return inserted, errors_total


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("Usage: python upload_to_turso.py <read-write-token> [dictionary.json] [overrides.json]")
        return 1
    if not TURSO_DATABASE_URL:
        print("ERROR: TURSO_DATABASE_URL is not set")
        return 1

    token = argv[0]
    dictionary_path = argv[1] if len(argv) > 1 else "dictionary.json"
    overrides_path = argv[2] if len(argv) > 2 else "overrides.json"
    url = pipeline_url(TURSO_DATABASE_URL)

    print("=== Turso Upload Script ===\n")

    ok, errors = execute_batch(url, token, [{"sql": sql} for sql in SCHEMA])
    if not ok or errors:
        print(f"ERROR: Cannot prepare schema: {errors}")
        return 1
    print("Schema ready.\n")

    for table, path in (('glosses', dictionary_path), ('overrides', overrides_path)):
        entries = read_entries(path)
        if not entries:
            continue
        inserted, errors_total = upload_table(url, token, table, entries)
        print(f"  Inserted: {inserted}, Errors: {errors_total}")

    print("\nDone!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
