"""
routes/export.py — Excel export routes.

Provides:
- GET /export/ — Export page
- GET /export/seed-calendar.xlsx — Download the seed calendar as Excel
"""

from flask import Blueprint, flash, redirect, url_for, send_file, render_template

from database import get_seed_calendar_count
from utils.export import generate_seed_calendar_excel

export_bp = Blueprint('export', __name__, url_prefix='/export')


@export_bp.route('/')
def index():
    """Export page with options."""
    return render_template('export.html', calendar_count=get_seed_calendar_count())


@export_bp.route('/seed-calendar.xlsx')
def export_seed_calendar():
    """Export the seed calendar as an Excel workbook."""
    buffer, filename = generate_seed_calendar_excel()
    if not buffer:
        flash("The seed calendar is empty, nothing to export.", "warning")
        return redirect(url_for('export.index'))

    return send_file(
        buffer,
        as_attachment=True,
        download_name=filename,
        mimetype='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
