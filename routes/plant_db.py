"""
routes/plant_db.py — Plant Database API routes.

Provides:
- GET /plants/ — List all plants
- GET /plants/search — Search plants
- GET /plants/<id> — Get plant details
- GET /plants/health — Plant database health
- POST /plants/add — Add a new plant
- POST /plants/<id>/edit — Edit a plant
- POST /plants/<id>/delete — Delete a plant
- GET /plants/export — Export plant database as JSON
- POST /plants/import — Import plants from JSON

Write routes accept JSON bodies or form posts. Form posts redirect to the
companion planting page with a flash message.
"""

from flask import Blueprint, request, jsonify, flash, redirect, url_for, Response, current_app
import json

from plant_database import (
    check_plant_db_health,
    get_all_plants,
    get_plant,
    create_plant,
    update_plant,
    delete_plant,
    search_plants,
    export_plants_json,
    import_plants_json,
    get_plant_count,
)
from utils.validators import validate_plant_fields

plant_db_bp = Blueprint('plant_db', __name__, url_prefix='/plants')


def _wants_json():
    return request.is_json or request.headers.get('X-Requested-With') == 'XMLHttpRequest'


def _split_list(raw):
    """Comma-separated form field → list of stripped, non-empty strings."""
    return [part.strip() for part in (raw or '').split(',') if part.strip()]


def _plant_fields():
    """Read plant fields from a JSON body or a form post.

    Missing fields come back as None so update_plant() leaves them alone.

    Returns:
        (fields, None), or (None, error_message) when a JSON field has the wrong type.
    """
    if request.is_json:
        data = request.get_json(silent=True)
        error = validate_plant_fields(data)
        if error:
            return None, error
        return {
            'name': data.get('name'),
            'scientific_name': data.get('scientific_name'),
            'description': data.get('description'),
            'companions': data.get('companions'),
            'antagonists': data.get('antagonists'),
            'benefits': data.get('benefits'),
        }, None

    fields = {}
    for key in ('name', 'scientific_name', 'description'):
        fields[key] = request.form.get(key)
    for key in ('companions', 'antagonists'):
        values = request.form.getlist(key)
        if len(values) == 1 and ',' in values[0]:
            values = _split_list(values[0])
        fields[key] = values if key in request.form else None
    fields['benefits'] = _split_list(request.form['benefits']) if 'benefits' in request.form else None
    return fields, None


# ========================================
# Plant List and Details
# ========================================

@plant_db_bp.route('/')
def list_plants():
    """Get all plants (JSON API)."""
    try:
        plants = get_all_plants()
        return jsonify({'success': True, 'plants': plants})
    except Exception as e:
        current_app.logger.exception("Could not list plants")
        return jsonify({'success': False, 'error': str(e)}), 500


@plant_db_bp.route('/<int:plant_id>')
def get_plant_detail(plant_id):
    """Get a single plant with its relationships (JSON API)."""
    try:
        plant = get_plant(plant_id)
        if not plant:
            return jsonify({'success': False, 'error': 'Plant not found'}), 404
        return jsonify({'success': True, 'plant': plant})
    except Exception as e:
        current_app.logger.exception("Could not load plant %s", plant_id)
        return jsonify({'success': False, 'error': str(e)}), 500


@plant_db_bp.route('/count')
def plant_count():
    """Get plant count (JSON API)."""
    try:
        return jsonify({'success': True, 'count': get_plant_count()})
    except Exception as e:
        current_app.logger.exception("Could not count plants")
        return jsonify({'success': False, 'error': str(e)}), 500


@plant_db_bp.route('/health')
def plant_db_health():
    """Check plant database health (JSON API)."""
    healthy, message = check_plant_db_health()
    return jsonify({'success': healthy, 'message': message})


@plant_db_bp.route('/search')
def search():
    """Search plants (JSON API)."""
    query = request.args.get('q', '')
    limit = request.args.get('limit', 20, type=int)

    try:
        results = search_plants(query, limit=limit)
        return jsonify({'success': True, 'results': results})
    except Exception as e:
        current_app.logger.exception("Plant search failed for %r", query)
        return jsonify({'success': False, 'error': str(e)}), 500


# ========================================
# Plant CRUD
# ========================================

@plant_db_bp.route('/add', methods=['POST'])
def add_plant():
    """Add a new plant."""
    fields, error = _plant_fields()
    if error:
        return jsonify({'success': False, 'error': error}), 400

    try:
        plant_id, error = create_plant(
            name=fields['name'] or '',
            scientific_name=fields['scientific_name'] or '',
            description=fields['description'] or '',
            companions=fields['companions'],
            antagonists=fields['antagonists'],
            benefits=fields['benefits'],
        )
    except Exception as e:
        current_app.logger.exception("Could not add plant %r", fields['name'])
        if _wants_json():
            return jsonify({'success': False, 'error': str(e)}), 500
        flash(f"Could not add the plant: {str(e)}", 'error')
        return redirect(url_for('companions.index'))

    if _wants_json():
        if plant_id:
            return jsonify({'success': True, 'plant_id': plant_id, 'plant': get_plant(plant_id)})
        return jsonify({'success': False, 'error': error}), 400

    if plant_id:
        flash(f"Plant “{fields['name'].strip()}” added.", 'success')
    else:
        flash(error or "Could not add the plant.", 'error')
    return redirect(url_for('companions.index'))


@plant_db_bp.route('/<int:plant_id>/edit', methods=['POST'])
def edit_plant(plant_id):
    """Edit a plant."""
    fields, error = _plant_fields()
    if error:
        return jsonify({'success': False, 'error': error}), 400

    try:
        success, error = update_plant(plant_id, **fields)
    except Exception as e:
        current_app.logger.exception("Could not update plant %s", plant_id)
        if _wants_json():
            return jsonify({'success': False, 'error': str(e)}), 500
        flash(f"Could not update the plant: {str(e)}", 'error')
        return redirect(url_for('companions.index'))

    if _wants_json():
        if success:
            return jsonify({'success': True, 'plant': get_plant(plant_id)})
        status = 404 if error == "Plant not found." else 400
        return jsonify({'success': False, 'error': error}), status

    if success:
        flash("Plant updated.", 'success')
    else:
        flash(error or "Could not update the plant.", 'error')
    return redirect(url_for('companions.index'))


@plant_db_bp.route('/<int:plant_id>/delete', methods=['POST'])
def remove_plant(plant_id):
    """Delete a plant."""
    success, error = delete_plant(plant_id)

    if _wants_json():
        if success:
            return jsonify({'success': True})
        return jsonify({'success': False, 'error': error}), 404

    if success:
        flash("Plant deleted.", 'success')
    else:
        flash(error or "Could not delete the plant.", 'error')
    return redirect(url_for('companions.index'))


# ========================================
# JSON Export / Import
# ========================================

@plant_db_bp.route('/export')
def export_json():
    """Export plant database as JSON file download."""
    try:
        data = export_plants_json()
    except Exception as e:
        current_app.logger.exception("Plant export failed")
        if _wants_json():
            return jsonify({'success': False, 'error': str(e)}), 500
        flash(f"Export failed: {str(e)}", 'error')
        return redirect(url_for('companions.index'))

    return Response(
        json.dumps(data, indent=2, ensure_ascii=False),
        mimetype='application/json',
        headers={
            'Content-Disposition': 'attachment; filename=plant_database.json'
        }
    )


@plant_db_bp.route('/import', methods=['POST'])
def import_json():
    """Import plants from a JSON body or an uploaded JSON file."""
    if request.is_json:
        data = request.get_json(silent=True)
        mode = request.args.get('mode', 'merge')
    else:
        mode = request.form.get('mode', 'merge')
        file = request.files.get('file')
        if file is None or file.filename == '':
            if _wants_json():
                return jsonify({'success': False, 'error': 'No file selected'}), 400
            flash("No file selected.", 'error')
            return redirect(url_for('companions.index'))

        try:
            data = json.load(file)
        except json.JSONDecodeError as e:
            if _wants_json():
                return jsonify({'success': False, 'error': f'Invalid JSON: {str(e)}'}), 400
            flash(f"Invalid JSON file: {str(e)}", 'error')
            return redirect(url_for('companions.index'))

    if mode not in ('merge', 'replace'):
        mode = 'merge'

    success, message, stats = import_plants_json(data, mode=mode)

    if _wants_json():
        return jsonify({
            'success': success,
            'message': message,
            'stats': stats
        }), (200 if success else 400)

    flash(message, 'success' if success else 'error')
    return redirect(url_for('companions.index'))
