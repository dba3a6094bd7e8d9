"""
utils/export.py — Excel export of the seed calendar using openpyxl.

One sheet, one row per vegetable, one column per month. Each month cell
lists the activities due that month and is filled with the colour of the
first of them (sowing before transplanting before harvest).
"""

from io import BytesIO
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

from database import get_seed_calendar, ACTIVITIES, ACTIVITY_LABELS
from month_ranges import MONTHS, is_month_in_periods


ACTIVITY_FILLS = {
    'sow_indoors': PatternFill(start_color='FFB300', end_color='FFB300', fill_type='solid'),
    'sow_outdoors': PatternFill(start_color='4CAF50', end_color='4CAF50', fill_type='solid'),
    'transplant_outdoors': PatternFill(start_color='00897B', end_color='00897B', fill_type='solid'),
    'harvest_period': PatternFill(start_color='D32F2F', end_color='D32F2F', fill_type='solid'),
}

HEADER_FONT = Font(name='Calibri', bold=True, color='FFFFFF', size=11)
HEADER_FILL = PatternFill(start_color='1565C0', end_color='1565C0', fill_type='solid')
HEADER_ALIGNMENT = Alignment(horizontal='center', vertical='center', wrap_text=True)
HEADER_BORDER = Border(
    bottom=Side(style='thin', color='0D47A1'),
    right=Side(style='thin', color='E2E8F0'),
)
CELL_BORDER = Border(
    bottom=Side(style='thin', color='E2E8F0'),
    right=Side(style='thin', color='E2E8F0'),
)
CELL_ALIGNMENT = Alignment(vertical='top', wrap_text=True)


def _build_sheet(ws, entries):
    """Populate a worksheet with one row per seed-calendar entry."""
    columns = ['Vegetable'] + list(MONTHS)
    for col_idx, col_name in enumerate(columns, 1):
        cell = ws.cell(row=1, column=col_idx, value=col_name)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = HEADER_ALIGNMENT
        cell.border = HEADER_BORDER

    for row_idx, entry in enumerate(entries, 2):
        ws.cell(row=row_idx, column=1, value=entry['vegetable']).border = CELL_BORDER
        for month in range(12):
            active = [a for a in ACTIVITIES if is_month_in_periods(entry[a], month)]
            cell = ws.cell(
                row=row_idx,
                column=month + 2,
                value='\n'.join(ACTIVITY_LABELS[a] for a in active) or None,
            )
            cell.border = CELL_BORDER
            cell.alignment = CELL_ALIGNMENT
            if active:
                cell.fill = ACTIVITY_FILLS[active[0]]
                cell.font = Font(color='FFFFFF', bold=True)

    ws.column_dimensions['A'].width = 20
    for col_idx in range(2, 14):
        ws.column_dimensions[ws.cell(row=1, column=col_idx).column_letter].width = 14

    ws.freeze_panes = 'B2'


def generate_seed_calendar_excel():
    """Generate an Excel workbook of the whole seed calendar.

    Returns:
        (BytesIO buffer, filename) on success, (None, None) when the
        calendar is empty.
    """
    import openpyxl

    entries = get_seed_calendar()
    if not entries:
        return None, None

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = 'Seed calendar'

    _build_sheet(ws, entries)

    buffer = BytesIO()
    wb.save(buffer)
    buffer.seek(0)

    return buffer, "seed_calendar.xlsx"
