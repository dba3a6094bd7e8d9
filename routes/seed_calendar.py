"""
routes/seed_calendar.py — Seed sowing calendar.

Provides:
- GET /seed-calendar/ — Calendar grid (vegetables × months), ?q= filters by name
- GET /seed-calendar/api — JSON entries with decoded month sets
- GET /seed-calendar/month/<month> — JSON: what to sow, plant and harvest in a month
- POST /seed-calendar/add — Add a vegetable from month checkboxes
- POST /seed-calendar/<id>/edit — Replace a vegetable's periods
- POST /seed-calendar/<id>/delete — Remove a vegetable

Form posts carry one checkbox group per activity (sow_indoors=2&sow_indoors=3);
the selected months are stored as range tokens ("Mar-Apr").
"""

from flask import Blueprint, render_template, request, redirect, url_for, flash, jsonify

from database import (
    get_seed_calendar, get_seed_entry, create_seed_entry, update_seed_entry,
    delete_seed_entry, get_month_activities, decode_entry,
    ACTIVITIES, ACTIVITY_LABELS
)
from month_ranges import MONTHS
from utils.validators import month_selections_from_form

seed_calendar_bp = Blueprint('seed_calendar', __name__, url_prefix='/seed-calendar')


@seed_calendar_bp.route('/')
def index():
    """Calendar grid with add/edit forms."""
    query = request.args.get('q', '')
    entries = get_seed_calendar(search=query)
    rows = [{'entry': e, 'months': decode_entry(e)} for e in entries]

    return render_template(
        'seed_calendar.html',
        rows=rows,
        query=query,
        months=MONTHS,
        activities=ACTIVITIES,
        activity_labels=ACTIVITY_LABELS,
    )


@seed_calendar_bp.route('/api')
def api_entries():
    """All entries with their tokens and decoded month indices (JSON API)."""
    entries = get_seed_calendar(search=request.args.get('q'))
    for entry in entries:
        entry['months'] = {a: sorted(m) for a, m in decode_entry(entry).items()}
    return jsonify({'success': True, 'entries': entries})


@seed_calendar_bp.route('/month/<int:month>')
def month_activities(month):
    """Vegetables to sow, transplant and harvest in a month (JSON API)."""
    if not 0 <= month <= 11:
        return jsonify({'success': False, 'error': 'Month must be between 0 and 11'}), 404
    return jsonify({'success': True, 'activities': get_month_activities(month)})


@seed_calendar_bp.route('/add', methods=['POST'])
def add_entry():
    """Add a vegetable to the seed calendar."""
    vegetable = request.form.get('vegetable', '')
    entry_id, error = create_seed_entry(vegetable, month_selections_from_form(request.form))

    if entry_id:
        flash(f"{vegetable.strip()} has been added to the seed calendar.", 'success')
    else:
        flash(error, 'error')
    return redirect(url_for('seed_calendar.index'))


@seed_calendar_bp.route('/<int:entry_id>/edit', methods=['POST'])
def edit_entry(entry_id):
    """Replace a vegetable's name and periods."""
    if not get_seed_entry(entry_id):
        flash("Seed calendar entry not found.", 'error')
        return redirect(url_for('seed_calendar.index'))

    vegetable = request.form.get('vegetable', '')
    success, error = update_seed_entry(entry_id, vegetable, month_selections_from_form(request.form))

    if success:
        flash(f"{vegetable.strip()} has been updated in the seed calendar.", 'success')
    else:
        flash(error, 'error')
    return redirect(url_for('seed_calendar.index'))


@seed_calendar_bp.route('/<int:entry_id>/delete', methods=['POST'])
def delete_entry(entry_id):
    """Remove a vegetable from the seed calendar."""
    if delete_seed_entry(entry_id):
        flash("Vegetable removed from the seed calendar.", 'success')
    else:
        flash("Seed calendar entry not found.", 'error')
    return redirect(url_for('seed_calendar.index'))
