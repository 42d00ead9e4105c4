#!/usr/bin/env python3
"""
Run a scripted company session and write the session report:
an Excel workbook with the history window and a Word summary with the news feed.
"""

import logging
import os
import sys

from docx import Document
from docx.shared import Pt, RGBColor
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml.ns import qn
from docx.oxml import OxmlElement
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Border, Side
from openpyxl.utils import get_column_letter

from ai_company_sim import Simulation, Category
from ai_company_sim.core import SessionMetrics, format_currency, format_number

OUTPUT_DIR = os.environ.get("REPORT_OUTPUT_DIR", os.path.join(os.path.dirname(os.path.abspath(__file__)), "reports"))

logger = logging.getLogger(__name__)


def play_session(seconds: float = 600.0) -> Simulation:
    """Greedy scripted player: raise money, buy what it can, keep a model training."""
    sim = Simulation()
    catalog = sim.catalog
    elapsed = 0.0

    while elapsed < seconds:
        for funding_round in catalog.funding_rounds:
            if funding_round.id not in sim.state.funding_claimed:
                sim.raise_funding(funding_round.id)
                break

        for upgrade in sorted(catalog.upgrades, key=lambda u: u.cost):
            if upgrade.id not in sim.state.purchased_upgrades and upgrade.cost <= sim.state.cash * 0.25:
                sim.purchase_upgrade(upgrade.id)

        if sim.state.active_research is None:
            for category in Category:
                frontier = sim.state.unlocked_models[category.value]
                if catalog.get_model(category, frontier) and sim.start_research(category, frontier):
                    break

        sim.run(10.0)
        elapsed += 10.0

    return sim


HEADER_FILL = "1F4E79"


def shade(cell, fill: str = HEADER_FILL):
    properties = cell._tc.get_or_add_tcPr()
    background = OxmlElement('w:shd')
    background.set(qn('w:val'), 'clear')
    background.set(qn('w:fill'), fill)
    properties.append(background)


def add_report_table(doc, headers, rows, numeric_columns=()):
    """
    Add a grid table with a shaded header row.

    Columns listed in numeric_columns are right-aligned. An empty table
    gets a single placeholder row so the section never renders blank.
    """
    table = doc.add_table(rows=1, cols=len(headers))
    table.style = 'Table Grid'

    for cell, header in zip(table.rows[0].cells, headers):
        run = cell.paragraphs[0].add_run(header)
        run.bold = True
        run.font.color.rgb = RGBColor(0xFF, 0xFF, 0xFF)
        shade(cell)

    if not rows:
        rows = [("None yet",) + ("",) * (len(headers) - 1)]
    for values in rows:
        cells = table.add_row().cells
        for column, value in enumerate(values):
            cells[column].text = str(value)
            if column in numeric_columns:
                cells[column].paragraphs[0].alignment = WD_ALIGN_PARAGRAPH.RIGHT

    return table


def create_history_workbook(sim: Simulation) -> str:
    wb = Workbook()

    header_fill = PatternFill(start_color=HEADER_FILL, end_color=HEADER_FILL, fill_type="solid")
    header_font = Font(bold=True, color="FFFFFF")
    thin_border = Border(
        left=Side(style='thin'), right=Side(style='thin'),
        top=Side(style='thin'), bottom=Side(style='thin')
    )

    # ===== SHEET 1: History window =====
    ws1 = wb.active
    ws1.title = "History"
    headers = ['Time (s)', 'Compute Capacity', 'Net Revenue / s', 'AI Power']
    for col, header in enumerate(headers, 1):
        cell = ws1.cell(row=1, column=col, value=header)
        cell.fill = header_fill
        cell.font = header_font
        cell.border = thin_border
        ws1.column_dimensions[get_column_letter(col)].width = 20

    history = sim.state.history
    points = zip(history.timestamps, history.compute, history.revenue, history.ai_power)
    for row_idx, row_data in enumerate(points, 2):
        for col_idx, value in enumerate(row_data, 1):
            ws1.cell(row=row_idx, column=col_idx, value=round(value, 2)).border = thin_border

    # ===== SHEET 2: Summary =====
    ws2 = wb.create_sheet("Summary")
    ws2['A1'] = "AI COMPANY SESSION SUMMARY"
    ws2['A1'].font = Font(bold=True, size=14)
    metrics = SessionMetrics.from_state(sim.state).to_dict()
    for row_idx, (name, value) in enumerate(metrics.items(), 3):
        ws2.cell(row=row_idx, column=1, value=name.replace("_", " ").title()).font = Font(bold=True)
        ws2.cell(row=row_idx, column=2, value=value)
    ws2.column_dimensions['A'].width = 28
    ws2.column_dimensions['B'].width = 20

    output_path = os.path.join(OUTPUT_DIR, 'AI_Company_Session_History.xlsx')
    wb.save(output_path)
    logger.info(f"Created: {output_path}")
    return output_path


def create_summary_document(sim: Simulation) -> str:
    doc = Document()

    style = doc.styles['Normal']
    style.font.name = 'Calibri'
    style.font.size = Pt(11)

    title = doc.add_heading('AI COMPANY SESSION REPORT', 0)
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER

    report = sim.get_final_report()
    summary = report["session_summary"]
    info = doc.add_paragraph()
    info.alignment = WD_ALIGN_PARAGRAPH.CENTER
    info.add_run('Simulated time: ').bold = True
    info.add_run(f"{summary['elapsed_seconds']:.0f} s (through {summary['final_year']})\n")
    info.add_run('Ticks: ').bold = True
    info.add_run(str(summary['total_ticks']))

    doc.add_heading('Company Position', level=1)
    state = sim.state
    add_report_table(doc, ["Measure", "Value"], [
        ('Cash', format_currency(state.cash)),
        ('Total funding raised', format_currency(state.funding)),
        ('Revenue / s', format_currency(state.revenue_per_second)),
        ('Expenses / s', format_currency(state.expenses_per_second)),
        ('Compute capacity', format_number(state.compute_capacity)),
        ('Research speed', f"{state.research_speed:.2f}x"),
        ('AI power', format_number(state.ai_power)),
    ], numeric_columns=(1,))

    doc.add_heading('Models Deployed', level=1)
    rows = []
    for model_id in state.completed_models:
        model = sim.catalog.get_model_by_id(model_id)
        if model:
            rows.append((model.name, model.category.value, model.year, format_currency(model.cost)))
    add_report_table(doc, ["Model", "Category", "Year", "Cost"], rows, numeric_columns=(2, 3))

    doc.add_heading('News Feed', level=1)
    for entry in report["news"]:
        doc.add_paragraph(entry, style='List Bullet')

    output_path = os.path.join(OUTPUT_DIR, 'AI_Company_Session_Report.docx')
    doc.save(output_path)
    logger.info(f"Created: {output_path}")
    return output_path


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    seconds = float(sys.argv[1]) if len(sys.argv) > 1 else 600.0
    os.makedirs(OUTPUT_DIR, exist_ok=True)

    session = play_session(seconds)
    create_history_workbook(session)
    create_summary_document(session)
    print(f"\nOutput directory: {OUTPUT_DIR}")
