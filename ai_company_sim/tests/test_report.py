"""
Test: Session Report Output
Verifies the scripted session and the generated workbook and document.
"""

import os

import pytest
from docx import Document
from openpyxl import load_workbook

from ai_company_sim import Simulation
import create_company_report
from create_company_report import create_history_workbook, create_summary_document, play_session


@pytest.fixture
def session():
    return play_session(120.0)


class TestScriptedSession:
    """Tests for the greedy scripted player."""

    def test_session_advances_and_spends(self, session):
        assert session.time == pytest.approx(120.0)
        assert session.state.funding_claimed
        assert session.state.purchased_upgrades
        assert session.state.completed_models or session.state.active_research
        assert session.state.cash >= 0


class TestReportFiles:
    """Tests for the Excel and Word outputs."""

    def test_history_workbook(self, session, tmp_path, monkeypatch):
        monkeypatch.setattr(create_company_report, "OUTPUT_DIR", str(tmp_path))
        path = create_history_workbook(session)

        assert os.path.exists(path)
        wb = load_workbook(path)
        assert wb.sheetnames == ["History", "Summary"]
        ws = wb["History"]
        assert ws.max_row == len(session.state.history) + 1
        assert ws.cell(row=1, column=4).value == "AI Power"

    def test_summary_document(self, session, tmp_path, monkeypatch):
        monkeypatch.setattr(create_company_report, "OUTPUT_DIR", str(tmp_path))
        path = create_summary_document(session)

        assert os.path.exists(path)
        doc = Document(path)
        text = "\n".join(p.text for p in doc.paragraphs)
        assert "AI COMPANY SESSION REPORT" in text
        assert session.state.news[-1] in text

    def test_summary_tables(self, session, tmp_path, monkeypatch):
        """Test the position and deployed-model tables carry shaded headers."""
        monkeypatch.setattr(create_company_report, "OUTPUT_DIR", str(tmp_path))
        doc = Document(create_summary_document(session))

        position, deployed = doc.tables
        assert [cell.text for cell in position.rows[0].cells] == ["Measure", "Value"]
        assert position.rows[1].cells[0].text == "Cash"
        assert [cell.text for cell in deployed.rows[0].cells] == ["Model", "Category", "Year", "Cost"]
        assert "w:shd" in position.rows[0].cells[0]._tc.xml

    def test_fresh_company_gets_placeholder_row(self, tmp_path, monkeypatch):
        monkeypatch.setattr(create_company_report, "OUTPUT_DIR", str(tmp_path))
        doc = Document(create_summary_document(Simulation()))

        deployed = doc.tables[1]
        assert len(deployed.rows) == 2
        assert deployed.rows[1].cells[0].text == "None yet"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
