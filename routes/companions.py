"""
routes/companions.py — Companion planting analysis.

Provides:
- GET /companions/ — Plant picker and compatibility report (?ids=1&ids=4)
- POST /companions/analyze — JSON compatibility report for {"plant_ids": [...]}
"""

from flask import Blueprint, render_template, request, jsonify, current_app

from companion_engine import analyze
from models import Plant
from plant_database import get_all_plants, get_plants_by_ids
from utils.validators import validate_plant_ids, validate_plant_fields

companions_bp = Blueprint('companions', __name__, url_prefix='/companions')


def _selected_plants(plant_ids):
    """Selected plants, in the order the ids were given."""
    return [Plant.from_record(record) for record in get_plants_by_ids(plant_ids)]


@companions_bp.route('/')
def index():
    """Companion planting page — pick plants, see which pairs get along."""
    plant_ids, _ = validate_plant_ids(request.args.getlist('ids'))
    plants = get_all_plants()
    selected = _selected_plants(plant_ids)
    report = analyze(selected, provider=get_plants_by_ids)

    return render_template(
        'companions.html',
        plants=plants,
        selected=selected,
        selected_ids=[p.id for p in selected],
        report=report,
    )


@companions_bp.route('/analyze', methods=['POST'])
def analyze_selection():
    """Compatibility report for a list of plant ids (JSON API)."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'success': False, 'error': 'Expected a JSON object'}), 400

    inline = None
    if 'plants' in data:
        # Inline plants, possibly without relationship data; analyze() loads it
        inline = data['plants']
        if not isinstance(inline, list) or not all(isinstance(p, dict) and p.get('id') is not None for p in inline):
            return jsonify({'success': False, 'error': "'plants' must be a list of objects with an 'id'"}), 400
        for plant in inline:
            error = validate_plant_fields(plant)
            if error:
                return jsonify({'success': False, 'error': error}), 400
        plant_ids = [str(p['id']) for p in inline]
    else:
        plant_ids, error = validate_plant_ids(data.get('plant_ids'))
        if error:
            return jsonify({'success': False, 'error': error}), 400

    try:
        if inline is not None:
            selected = [Plant.from_record(p) for p in inline]
        else:
            selected = _selected_plants(plant_ids)
        report = analyze(selected, provider=get_plants_by_ids)
    except Exception as e:
        current_app.logger.exception("Compatibility analysis failed for %s", plant_ids)
        return jsonify({'success': False, 'error': str(e)}), 500

    missing = [i for i in plant_ids if i not in {p.id for p in selected}]
    return jsonify({
        'success': True,
        'plants': [{'id': p.id, 'name': p.name} for p in selected],
        'missing': missing,
        'report': report.to_dict(),
    })
