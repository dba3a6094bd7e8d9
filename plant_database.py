"""
plant_database.py — Separate Plant Database for companion planting records.

This module manages a SEPARATE SQLite database for plant data:
- Display names with normalized versions for duplicate detection
- Scientific names and descriptions
- Companion and antagonist relationships (lists of plant ids)
- Free-text benefits shown as reasons for good pairings

It is the plant-record provider for companion_engine: get_plants_by_ids()
returns records shaped {id, name, companions, antagonists, benefits}.
Relationships are stored one-way, as entered; the engine checks both
directions.
"""

import sqlite3
import os
import json
import logging
import unicodedata
import re
from typing import Optional, List, Dict, Any, Tuple, Iterable


logger = logging.getLogger(__name__)


# Default path for plant database (can be overridden via env var)
def get_plant_db_path() -> str:
    """Get the plant database path from environment or default."""
    default_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data', 'plant_database.db')
    return os.environ.get('PLANT_DB_PATH', default_path)


# ========================================
# Normalization Helper
# ========================================

def normalize_name(name: str) -> str:
    """
    Normalize a plant name for duplicate detection and searching.

    Rules:
    - lowercase
    - trim whitespace
    - remove diacritics (accents)
    - replace hyphens and punctuation with spaces
    - collapse multiple whitespace to single space

    Examples:
        "Bell-Pepper" -> "bell pepper"
        "Jalapeño" -> "jalapeno"
        "  Sweet   Alyssum  " -> "sweet alyssum"
    """
    if not name:
        return ""

    result = name.lower().strip()

    # NFD decomposition separates base characters from combining marks
    result = unicodedata.normalize('NFD', result)
    result = ''.join(c for c in result if unicodedata.category(c) != 'Mn')

    result = re.sub(r'[-_.,;:\'\"()]+', ' ', result)
    result = re.sub(r'\s+', ' ', result)

    return result.strip()


# ========================================
# Database Connection Management
# ========================================

def get_plant_db() -> sqlite3.Connection:
    """
    Get a connection to the plant database.

    Creates the database directory and file if they don't exist.
    Uses WAL mode for concurrent read performance.
    """
    db_path = get_plant_db_path()
    os.makedirs(os.path.dirname(db_path) or '.', exist_ok=True)

    conn = sqlite3.connect(db_path)
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")
    conn.row_factory = sqlite3.Row
    return conn


def init_plant_db():
    """
    Initialize the plant database schema.

    Creates all tables and indexes if they don't exist.
    This function is idempotent - safe to call multiple times.
    """
    conn = get_plant_db()
    cursor = conn.cursor()

    # Table: plants
    # - companions / antagonists: JSON arrays of plant ids (as strings)
    # - benefits: JSON array of free-text benefit descriptions
    cursor.execute("""
        CREATE TABLE IF NOT EXISTS plants (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            name_norm TEXT NOT NULL UNIQUE,
            scientific_name TEXT DEFAULT '',
            companions TEXT NOT NULL DEFAULT '[]',
            antagonists TEXT NOT NULL DEFAULT '[]',
            benefits TEXT NOT NULL DEFAULT '[]',
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """)

    cursor.execute("""
        CREATE INDEX IF NOT EXISTS idx_plants_name_norm
        ON plants(name_norm)
    """)

    conn.commit()
    conn.close()

    _migrate_plant_db_schema()


def _migrate_plant_db_schema():
    """
    Migrate an existing plant database to the current schema.

    Adds:
    - description to plants table

    This function is idempotent - safe to call multiple times.
    """
    conn = get_plant_db()
    cursor = conn.cursor()

    try:
        plant_columns = [i[1] for i in cursor.execute("PRAGMA table_info(plants)").fetchall()]

        if 'description' not in plant_columns:
            cursor.execute("ALTER TABLE plants ADD COLUMN description TEXT DEFAULT ''")

        conn.commit()

    except sqlite3.DatabaseError as e:
        logger.warning("Plant database migration failed: %s", e)
        conn.rollback()
    finally:
        conn.close()


def check_plant_db_health() -> Tuple[bool, str]:
    """
    Check if the plant database is healthy and accessible.

    Returns:
        Tuple of (is_healthy, message)
    """
    try:
        conn = get_plant_db()
        count = conn.execute("SELECT COUNT(*) FROM plants").fetchone()[0]
        conn.close()
        return True, f"Plant database OK ({count} plants)"
    except sqlite3.DatabaseError as e:
        return False, f"Database error: {str(e)}"


# ========================================
# Row Helpers
# ========================================

def _load_list(value: Optional[str]) -> List[str]:
    if not value:
        return []
    try:
        data = json.loads(value)
    except ValueError:
        return []
    return [str(v) for v in data] if isinstance(data, list) else []


def _as_list(values) -> List[Any]:
    """List or tuple values as a list; a bare string or any other value is empty."""
    return list(values) if isinstance(values, (list, tuple)) else []


def _text(value) -> str:
    return value.strip() if isinstance(value, str) else ''


def _dump_ids(ids: Optional[Iterable[Any]]) -> str:
    """Serialize an id list: strings, no blanks, no repeats, order kept."""
    cleaned = [str(i).strip() for i in _as_list(ids) if str(i).strip()]
    return json.dumps(list(dict.fromkeys(cleaned)))


def _dump_benefits(benefits: Optional[Iterable[str]]) -> str:
    cleaned = [b.strip() for b in _as_list(benefits) if isinstance(b, str) and b.strip()]
    return json.dumps(list(dict.fromkeys(cleaned)))


def _row_to_dict(row: sqlite3.Row) -> Dict[str, Any]:
    """Provider record for one plant row."""
    return {
        'id': str(row['id']),
        'name': row['name'],
        'scientific_name': row['scientific_name'] or '',
        'description': row['description'] if 'description' in row.keys() else '',
        'companions': _load_list(row['companions']),
        'antagonists': _load_list(row['antagonists']),
        'benefits': _load_list(row['benefits']),
        'created_at': row['created_at'],
        'updated_at': row['updated_at'],
    }


# ========================================
# Plant CRUD Operations
# ========================================

def create_plant(
    name: str,
    scientific_name: str = '',
    description: str = '',
    companions: Optional[List[str]] = None,
    antagonists: Optional[List[str]] = None,
    benefits: Optional[List[str]] = None
) -> Tuple[Optional[str], Optional[str]]:
    """
    Create a new plant in the database.

    Args:
        name: Display name (required), e.g., "Tomato"
        scientific_name: e.g., "Solanum lycopersicum"
        description: Free text
        companions: Ids of plants this plant grows well with
        antagonists: Ids of plants this plant should be kept away from
        benefits: Benefit descriptions, e.g., ["Repels aphids"]

    Returns:
        Tuple of (plant_id, error_message)
        If successful, plant_id is set and error_message is None
        If failed, plant_id is None and error_message describes the error
    """
    if not isinstance(name, str) or not name.strip():
        return None, "Plant name is required."

    name = name.strip()
    name_norm = normalize_name(name)

    conn = get_plant_db()
    cursor = conn.cursor()

    try:
        existing = cursor.execute(
            "SELECT id, name FROM plants WHERE name_norm = ?",
            (name_norm,)
        ).fetchone()

        if existing:
            return None, f"This plant already exists: {existing['name']}"

        cursor.execute(
            """INSERT INTO plants (name, name_norm, scientific_name, description,
               companions, antagonists, benefits)
               VALUES (?, ?, ?, ?, ?, ?, ?)""",
            (name, name_norm, _text(scientific_name), _text(description),
             _dump_ids(companions), _dump_ids(antagonists), _dump_benefits(benefits))
        )
        plant_id = cursor.lastrowid

        conn.commit()
        return str(plant_id), None

    except sqlite3.IntegrityError as e:
        conn.rollback()
        return None, f"Integrity error: {str(e)}"
    except sqlite3.DatabaseError as e:
        conn.rollback()
        return None, f"Error: {str(e)}"
    finally:
        conn.close()


def get_plant(plant_id) -> Optional[Dict[str, Any]]:
    """
    Get a plant by ID.

    Returns:
        Dict with plant data or None if not found
    """
    conn = get_plant_db()
    try:
        row = conn.execute("SELECT * FROM plants WHERE id = ?", (plant_id,)).fetchone()
        return _row_to_dict(row) if row else None
    finally:
        conn.close()


def get_all_plants() -> List[Dict[str, Any]]:
    """
    Get all plants ordered by name, each with a search_text field for
    client-side filtering.
    """
    conn = get_plant_db()
    try:
        rows = conn.execute("SELECT * FROM plants ORDER BY name").fetchall()
        result = []
        for row in rows:
            plant = _row_to_dict(row)
            plant['search_text'] = ' '.join([
                plant['name'],
                plant['scientific_name'],
                ' '.join(plant['benefits']),
            ]).lower()
            result.append(plant)
        return result
    finally:
        conn.close()


def get_plants_by_ids(plant_ids: Iterable[Any]) -> List[Dict[str, Any]]:
    """
    Fetch full plant records for a set of ids.

    Returns records in the order of plant_ids; unknown ids are left out.
    """
    ids = [str(i) for i in plant_ids]
    if not ids:
        return []

    conn = get_plant_db()
    try:
        placeholders = ', '.join('?' for _ in ids)
        rows = conn.execute(
            f"SELECT * FROM plants WHERE CAST(id AS TEXT) IN ({placeholders})",
            ids
        ).fetchall()
        by_id = {str(row['id']): _row_to_dict(row) for row in rows}
        return [by_id[i] for i in dict.fromkeys(ids) if i in by_id]
    finally:
        conn.close()


def update_plant(
    plant_id,
    name: Optional[str] = None,
    scientific_name: Optional[str] = None,
    description: Optional[str] = None,
    companions: Optional[List[str]] = None,
    antagonists: Optional[List[str]] = None,
    benefits: Optional[List[str]] = None
) -> Tuple[bool, Optional[str]]:
    """
    Update a plant. Only the arguments that are not None are changed.

    Returns:
        Tuple of (success, error_message)
    """
    conn = get_plant_db()
    cursor = conn.cursor()

    try:
        existing = cursor.execute(
            "SELECT * FROM plants WHERE id = ?", (plant_id,)
        ).fetchone()

        if not existing:
            return False, "Plant not found."

        updates = []
        params = []

        if name is not None:
            name = _text(name)
            if not name:
                return False, "Plant name cannot be empty."

            name_norm = normalize_name(name)

            dup = cursor.execute(
                "SELECT id FROM plants WHERE name_norm = ? AND id != ?",
                (name_norm, plant_id)
            ).fetchone()

            if dup:
                return False, "Another plant with this name already exists."

            updates.append("name = ?")
            params.append(name)
            updates.append("name_norm = ?")
            params.append(name_norm)

        if scientific_name is not None:
            updates.append("scientific_name = ?")
            params.append(_text(scientific_name))

        if description is not None:
            updates.append("description = ?")
            params.append(_text(description))

        if companions is not None:
            updates.append("companions = ?")
            params.append(_dump_ids(companions))

        if antagonists is not None:
            updates.append("antagonists = ?")
            params.append(_dump_ids(antagonists))

        if benefits is not None:
            updates.append("benefits = ?")
            params.append(_dump_benefits(benefits))

        if updates:
            updates.append("updated_at = CURRENT_TIMESTAMP")
            params.append(plant_id)

            cursor.execute(
                f"UPDATE plants SET {', '.join(updates)} WHERE id = ?",
                params
            )
            conn.commit()

        return True, None

    except sqlite3.DatabaseError as e:
        conn.rollback()
        return False, f"Error: {str(e)}"
    finally:
        conn.close()


def delete_plant(plant_id) -> Tuple[bool, Optional[str]]:
    """
    Delete a plant and remove its id from every other plant's
    companion and antagonist lists.

    Returns:
        Tuple of (success, error_message)
    """
    conn = get_plant_db()
    cursor = conn.cursor()

    try:
        existing = cursor.execute(
            "SELECT * FROM plants WHERE id = ?", (plant_id,)
        ).fetchone()

        if not existing:
            return False, "Plant not found."

        cursor.execute("DELETE FROM plants WHERE id = ?", (plant_id,))

        removed = str(existing['id'])
        for row in cursor.execute("SELECT id, companions, antagonists FROM plants").fetchall():
            companions = _load_list(row['companions'])
            antagonists = _load_list(row['antagonists'])
            if removed in companions or removed in antagonists:
                cursor.execute(
                    "UPDATE plants SET companions = ?, antagonists = ?, updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                    (_dump_ids([c for c in companions if c != removed]),
                     _dump_ids([a for a in antagonists if a != removed]),
                     row['id'])
                )

        conn.commit()
        return True, None

    except sqlite3.DatabaseError as e:
        conn.rollback()
        return False, f"Error: {str(e)}"
    finally:
        conn.close()


# ========================================
# Search
# ========================================

def search_plants(query: str, limit: int = 20) -> List[Dict[str, Any]]:
    """
    Search plants by name and scientific name.

    Ranking:
    1) Exact match (normalized)
    2) Prefix match
    3) Substring match

    Returns:
        List of plant records, each with a 'ranking' key
    """
    if not query or not query.strip():
        return []

    query_norm = normalize_name(query)
    if not query_norm:
        return []

    results = []
    seen = set()
    for plant in get_all_plants():
        name_norm = normalize_name(plant['name'])
        sci_norm = normalize_name(plant['scientific_name'])

        if query_norm in (name_norm, sci_norm):
            ranking = 0
        elif name_norm.startswith(query_norm) or sci_norm.startswith(query_norm):
            ranking = 1
        elif query_norm in name_norm or query_norm in sci_norm:
            ranking = 2
        else:
            continue

        if plant['id'] not in seen:
            seen.add(plant['id'])
            results.append((ranking, plant))

    results.sort(key=lambda r: (r[0], r[1]['name']))
    labels = ('exact', 'prefix', 'substring')
    return [dict(plant, ranking=labels[rank]) for rank, plant in results[:limit]]


def find_plant_by_name(name: str) -> Optional[Dict[str, Any]]:
    """Find a plant by exact normalized name."""
    name_norm = normalize_name(name)
    if not name_norm:
        return None

    conn = get_plant_db()
    try:
        row = conn.execute("SELECT * FROM plants WHERE name_norm = ?", (name_norm,)).fetchone()
        return _row_to_dict(row) if row else None
    finally:
        conn.close()


def get_plant_count() -> int:
    """Get total number of plants in the database."""
    conn = get_plant_db()
    try:
        return conn.execute("SELECT COUNT(*) FROM plants").fetchone()[0]
    finally:
        conn.close()


# ========================================
# Import / Export
# ========================================

def resolve_plant_names(names: Iterable[str], name_to_id: Dict[str, str], exclude: Optional[str] = None) -> List[str]:
    """
    Map relationship names to plant ids.

    Exact (normalized) name match first, then the first plant whose name
    contains the wanted name or is contained in it. Names matching no
    plant are dropped.
    """
    ids = []
    for wanted in _as_list(names):
        if not isinstance(wanted, str):
            continue
        wanted_norm = normalize_name(wanted)
        if not wanted_norm:
            continue

        plant_id = name_to_id.get(wanted_norm)
        if plant_id is None:
            for known, known_id in name_to_id.items():
                if wanted_norm in known or known in wanted_norm:
                    plant_id = known_id
                    break

        if plant_id is not None and plant_id != exclude:
            ids.append(plant_id)
    return list(dict.fromkeys(ids))


def export_plants_json() -> Dict[str, Any]:
    """
    Export the entire plant database as JSON.

    Relationships are exported by plant NAME so the file can be imported
    into another database where ids differ.

    Returns:
        Dict with 'plants' key containing list of plant objects
    """
    plants = get_all_plants()
    id_to_name = {p['id']: p['name'] for p in plants}

    return {
        'plants': [
            {
                'name': p['name'],
                'scientific_name': p['scientific_name'],
                'description': p['description'],
                'companions': [id_to_name[i] for i in p['companions'] if i in id_to_name],
                'antagonists': [id_to_name[i] for i in p['antagonists'] if i in id_to_name],
                'benefits': p['benefits'],
            }
            for p in plants
        ]
    }


def import_plants_json(
    data: Dict[str, Any],
    mode: str = 'merge'
) -> Tuple[bool, str, Dict[str, int]]:
    """
    Import plants from JSON data.

    Two passes: plants are created/updated first, then companion and
    antagonist NAMES are resolved to ids across the whole database.

    Args:
        data: JSON data with 'plants' key
        mode: 'merge' to add/update, 'replace' to clear and replace all

    Returns:
        Tuple of (success, message, stats)
        stats contains: added, updated, errors
    """
    if not isinstance(data, dict) or 'plants' not in data:
        return False, "Invalid JSON format: missing 'plants' key.", {}

    plants_data = data['plants']
    if not isinstance(plants_data, list):
        return False, "Invalid JSON format: 'plants' must be a list.", {}

    stats = {'added': 0, 'updated': 0, 'errors': 0}
    imported = []

    conn = get_plant_db()
    cursor = conn.cursor()

    try:
        if mode == 'replace':
            cursor.execute("DELETE FROM plants")

        for plant_data in plants_data:
            if not isinstance(plant_data, dict):
                stats['errors'] += 1
                continue

            name = _text(plant_data.get('name'))
            if not name:
                stats['errors'] += 1
                continue

            name_norm = normalize_name(name)
            scientific_name = _text(plant_data.get('scientific_name'))
            description = _text(plant_data.get('description'))
            benefits = _dump_benefits(plant_data.get('benefits'))

            existing = cursor.execute(
                "SELECT id FROM plants WHERE name_norm = ?", (name_norm,)
            ).fetchone()

            if existing:
                plant_id = existing['id']
                cursor.execute("""
                    UPDATE plants
                    SET scientific_name = COALESCE(NULLIF(?, ''), scientific_name),
                        description = COALESCE(NULLIF(?, ''), description),
                        benefits = CASE WHEN ? = '[]' THEN benefits ELSE ? END,
                        updated_at = CURRENT_TIMESTAMP
                    WHERE id = ?
                """, (scientific_name, description, benefits, benefits, plant_id))
                stats['updated'] += 1
            else:
                cursor.execute(
                    """INSERT INTO plants (name, name_norm, scientific_name, description, benefits)
                       VALUES (?, ?, ?, ?, ?)""",
                    (name, name_norm, scientific_name, description, benefits)
                )
                plant_id = cursor.lastrowid
                stats['added'] += 1

            imported.append((str(plant_id), plant_data))

        name_to_id = {
            row['name_norm']: str(row['id'])
            for row in cursor.execute("SELECT id, name_norm FROM plants ORDER BY id").fetchall()
        }
        for plant_id, plant_data in imported:
            companions = resolve_plant_names(plant_data.get('companions'), name_to_id, exclude=plant_id)
            antagonists = resolve_plant_names(plant_data.get('antagonists'), name_to_id, exclude=plant_id)
            if companions or antagonists or mode == 'replace':
                cursor.execute(
                    "UPDATE plants SET companions = ?, antagonists = ? WHERE id = ?",
                    (_dump_ids(companions), _dump_ids(antagonists), plant_id)
                )

        conn.commit()

        message = f"Import finished: {stats['added']} added, {stats['updated']} updated"
        if stats['errors']:
            message += f", {stats['errors']} invalid entries skipped"
        return True, message, stats

    except sqlite3.DatabaseError as e:
        conn.rollback()
        return False, f"Import error: {str(e)}", stats
    finally:
        conn.close()


def seed_default_plants():
    """Load the default companion-plant set if the database is empty. Idempotent."""
    if get_plant_count() > 0:
        return

    from seed_data import DEFAULT_PLANTS

    success, message, _ = import_plants_json({'plants': DEFAULT_PLANTS})
    if not success:
        logger.warning("Could not seed default plants: %s", message)
