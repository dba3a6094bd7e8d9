"""
utils/validators.py — Input validation helpers.

Validates:
- Month checkbox values from seed-calendar forms (integers 0-11)
- Plant id lists posted to the companion analysis API
- Field types of plant objects posted as JSON
"""

from database import ACTIVITIES


def parse_month_values(values):
    """
    Convert submitted month values to a set of month indices.

    Values that are not integers in 0-11 are ignored, matching the
    tolerant handling of month tokens elsewhere.
    """
    months = set()
    for value in values or []:
        try:
            month = int(value)
        except (TypeError, ValueError):
            continue
        if 0 <= month <= 11:
            months.add(month)
    return months


def month_selections_from_form(form):
    """Read the four activity checkbox groups from a submitted form."""
    return {activity: parse_month_values(form.getlist(activity)) for activity in ACTIVITIES}


def validate_plant_ids(value):
    """
    Check a posted plant id list.

    Returns:
        (ids, None) with ids as strings, or (None, error_message).
    """
    if value is None:
        return [], None
    if not isinstance(value, list):
        return None, "'plant_ids' must be a list."

    ids = []
    for item in value:
        if isinstance(item, bool) or not isinstance(item, (str, int)):
            return None, "Plant ids must be strings or integers."
        item = str(item).strip()
        if item:
            ids.append(item)
    return list(dict.fromkeys(ids)), None


PLANT_TEXT_FIELDS = ('name', 'scientific_name', 'description')
PLANT_ID_FIELDS = ('companions', 'antagonists')


def validate_plant_fields(data):
    """
    Check the types of a posted plant object. Missing or null fields pass.

    Text fields must be strings. companions / antagonists must be lists of
    ids (strings or integers), benefits a list of strings.

    Returns:
        error_message, or None when the object is usable.
    """
    if not isinstance(data, dict):
        return "Plant data must be a JSON object."

    for key in PLANT_TEXT_FIELDS:
        if data.get(key) is not None and not isinstance(data[key], str):
            return f"'{key}' must be a string."

    for key in PLANT_ID_FIELDS:
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, list) or not all(
            isinstance(v, (str, int)) and not isinstance(v, bool) for v in value
        ):
            return f"'{key}' must be a list of plant ids."

    benefits = data.get('benefits')
    if benefits is not None and (
        not isinstance(benefits, list) or not all(isinstance(b, str) for b in benefits)
    ):
        return "'benefits' must be a list of strings."

    return None
