"""
routes/main.py — Homepage.

Provides:
- GET / — Dashboard: plant and calendar counts, what to do this month (?month=0..11)
"""

from datetime import date

from flask import Blueprint, render_template, request

from database import get_month_activities, get_seed_calendar_count, get_setting, ACTIVITY_LABELS
from month_ranges import MONTHS
from plant_database import get_plant_count

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Homepage — this month's sowing, planting and harvest list."""
    month = request.args.get('month', type=int)
    if month is None or not 0 <= month <= 11:
        month = date.today().month - 1

    return render_template(
        'index.html',
        month=month,
        months=MONTHS,
        activities=get_month_activities(month),
        activity_labels=ACTIVITY_LABELS,
        plant_count=get_plant_count(),
        calendar_count=get_seed_calendar_count(),
        region=get_setting('calendar_region', 'UK'),
    )
