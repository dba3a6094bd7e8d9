"""
database.py — SQLite schema creation, seed data, and seed-calendar operations.

The seed calendar holds one row per vegetable with four activity columns
(sow_indoors, sow_outdoors, transplant_outdoors, harvest_period). Each
column is a JSON array of month-range tokens ("Mar-Jun", "Nov-Feb"), the
format produced by month_ranges.encode_ranges().
Uses WAL mode for concurrent read performance.
"""

import sqlite3
import os
import json
import logging

from month_ranges import encode_ranges, decode_ranges, clean_tokens, MONTHS


logger = logging.getLogger(__name__)

ACTIVITIES = ('sow_indoors', 'sow_outdoors', 'transplant_outdoors', 'harvest_period')

ACTIVITY_LABELS = {
    'sow_indoors': 'Sow indoors',
    'sow_outdoors': 'Sow outdoors',
    'transplant_outdoors': 'Transplant outdoors',
    'harvest_period': 'Harvest',
}


def get_db_path():
    """Get the garden database path from environment or default."""
    default_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data', 'garden_planner.db')
    return os.environ.get('GARDEN_DB_PATH', default_path)


def get_db():
    """Get a database connection with WAL mode and foreign keys enabled."""
    db_path = get_db_path()
    os.makedirs(os.path.dirname(db_path) or '.', exist_ok=True)
    conn = sqlite3.connect(db_path)
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")
    conn.row_factory = sqlite3.Row
    return conn


def init_db():
    """Create all tables and indexes if they don't exist."""
    conn = get_db()
    cursor = conn.cursor()

    # Table: settings
    cursor.execute("""
        CREATE TABLE IF NOT EXISTS settings (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL
        )
    """)

    # Table: seed_calendar
    cursor.execute("""
        CREATE TABLE IF NOT EXISTS seed_calendar (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            vegetable TEXT UNIQUE NOT NULL,
            sow_indoors TEXT NOT NULL DEFAULT '[]',
            sow_outdoors TEXT NOT NULL DEFAULT '[]',
            transplant_outdoors TEXT NOT NULL DEFAULT '[]',
            harvest_period TEXT NOT NULL DEFAULT '[]',
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """)

    conn.commit()
    conn.close()


def seed_defaults():
    """Populate default data if tables are empty. Idempotent — skips if data exists."""
    from seed_data import DEFAULT_SEED_CALENDAR

    conn = get_db()
    cursor = conn.cursor()

    # --- Settings ---
    existing = cursor.execute("SELECT COUNT(*) FROM settings").fetchone()[0]
    if existing == 0:
        cursor.execute("INSERT INTO settings (key, value) VALUES ('calendar_region', 'UK')")

    # --- Seed calendar ---
    existing = cursor.execute("SELECT COUNT(*) FROM seed_calendar").fetchone()[0]
    if existing == 0:
        cursor.executemany(
            """INSERT INTO seed_calendar
               (vegetable, sow_indoors, sow_outdoors, transplant_outdoors, harvest_period)
               VALUES (?, ?, ?, ?, ?)""",
            [
                (entry['vegetable'],) + tuple(json.dumps(entry[a]) for a in ACTIVITIES)
                for entry in DEFAULT_SEED_CALENDAR
            ]
        )

    conn.commit()
    conn.close()


def get_setting(key, default=None):
    """Get a setting value by key."""
    conn = get_db()
    row = conn.execute("SELECT value FROM settings WHERE key = ?", (key,)).fetchone()
    conn.close()
    if row:
        return row['value']
    return default


# ========================================
# Seed calendar
# ========================================

def _load_tokens(value):
    try:
        tokens = json.loads(value) if value else []
    except ValueError:
        logger.warning("Ignoring unreadable month tokens: %r", value)
        return []
    return clean_tokens(tokens) if isinstance(tokens, list) else []


def _entry_to_dict(row):
    entry = {
        'id': row['id'],
        'vegetable': row['vegetable'],
        'created_at': row['created_at'],
        'updated_at': row['updated_at'],
    }
    for activity in ACTIVITIES:
        entry[activity] = _load_tokens(row[activity])
    return entry


def get_seed_calendar(search=None):
    """
    Retrieve seed-calendar entries ordered by vegetable.

    Args:
        search: Optional case-insensitive substring filter on the vegetable name.
    """
    conn = get_db()
    rows = conn.execute("SELECT * FROM seed_calendar ORDER BY vegetable").fetchall()
    conn.close()

    entries = [_entry_to_dict(row) for row in rows]
    if search and search.strip():
        term = search.strip().lower()
        entries = [e for e in entries if term in e['vegetable'].lower()]
    return entries


def get_seed_entry(entry_id):
    """Retrieve a single seed-calendar entry by ID."""
    conn = get_db()
    row = conn.execute("SELECT * FROM seed_calendar WHERE id = ?", (entry_id,)).fetchone()
    conn.close()
    return _entry_to_dict(row) if row else None


def decode_entry(entry):
    """Month index sets for every activity of an entry."""
    return {activity: decode_ranges(entry.get(activity)) for activity in ACTIVITIES}


def _encode_selections(selections):
    """Turn {activity: months} into {activity: JSON token list}."""
    selections = selections or {}
    return {
        activity: json.dumps(encode_ranges(selections.get(activity) or []))
        for activity in ACTIVITIES
    }


def create_seed_entry(vegetable, selections=None):
    """
    Create a seed-calendar entry from month selections.

    Args:
        vegetable: Vegetable name (required, unique).
        selections: Dict mapping activity name → iterable of month indices (0-11).

    Returns:
        (entry_id, None) on success, or (None, error_message) on failure.
    """
    if not vegetable or not vegetable.strip():
        return None, "Please enter a vegetable name."

    encoded = _encode_selections(selections)
    conn = get_db()
    try:
        cursor = conn.execute(
            """INSERT INTO seed_calendar
               (vegetable, sow_indoors, sow_outdoors, transplant_outdoors, harvest_period)
               VALUES (?, ?, ?, ?, ?)""",
            (vegetable.strip(),) + tuple(encoded[a] for a in ACTIVITIES)
        )
        conn.commit()
        return cursor.lastrowid, None
    except sqlite3.IntegrityError:
        return None, f"{vegetable.strip()} is already in the seed calendar."
    finally:
        conn.close()


def update_seed_entry(entry_id, vegetable, selections=None):
    """
    Replace the name and all four activity periods of an entry.

    Returns:
        (True, None) on success, or (False, error_message) on failure.
    """
    if not vegetable or not vegetable.strip():
        return False, "Please enter a vegetable name."

    encoded = _encode_selections(selections)
    conn = get_db()
    try:
        cursor = conn.execute(
            """UPDATE seed_calendar
               SET vegetable = ?, sow_indoors = ?, sow_outdoors = ?,
                   transplant_outdoors = ?, harvest_period = ?,
                   updated_at = CURRENT_TIMESTAMP
               WHERE id = ?""",
            (vegetable.strip(),) + tuple(encoded[a] for a in ACTIVITIES) + (entry_id,)
        )
        if cursor.rowcount == 0:
            return False, "Seed calendar entry not found."
        conn.commit()
        return True, None
    except sqlite3.IntegrityError:
        return False, f"{vegetable.strip()} is already in the seed calendar."
    finally:
        conn.close()


def delete_seed_entry(entry_id):
    """Delete a seed-calendar entry. Returns True if a row was removed."""
    conn = get_db()
    cursor = conn.execute("DELETE FROM seed_calendar WHERE id = ?", (entry_id,))
    deleted = cursor.rowcount > 0
    conn.commit()
    conn.close()
    return deleted


def get_month_activities(month):
    """
    Vegetables grouped by activity for one month.

    Args:
        month: Month index, 0 (January) to 11 (December).

    Returns:
        Dict with 'month' (abbreviation) and one list of vegetable names
        per activity.
    """
    if month not in range(12):
        raise ValueError(f"Month index out of range: {month}")

    result = {'month': MONTHS[month]}
    for activity in ACTIVITIES:
        result[activity] = []

    for entry in get_seed_calendar():
        for activity, months in decode_entry(entry).items():
            if month in months:
                result[activity].append(entry['vegetable'])
    return result


def get_seed_calendar_count():
    conn = get_db()
    count = conn.execute("SELECT COUNT(*) FROM seed_calendar").fetchone()[0]
    conn.close()
    return count
