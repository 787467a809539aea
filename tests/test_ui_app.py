from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

UI_PATH = str(Path(__file__).resolve().parents[1] / "ui.py")

FAKE_RESULT = {
    "score": 66,
    "issues": [
        {"id": "a", "kind": "error", "line": 4, "column": 5, "message": "Bare except", "rule_id": "exception-handling", "severity": "high"},
        {"id": "b", "kind": "warning", "line": 1, "column": 1, "message": "Wildcard", "rule_id": "import-style", "severity": "medium"},
    ],
    "metrics": {
        "lines_of_code": 6,
        "cyclomatic_complexity": 1,
        "maintainability_index": 80,
        "duplicate_lines": 0,
        "test_coverage": 88,
    },
    "suggestions": ["one", "two"],
}


@pytest.fixture()
def app(monkeypatch):
    # Nothing listens here; the sidebar health check just reports "Not reachable".
    monkeypatch.setenv("CODEMATE_API_URL", "http://127.0.0.1:9")
    return AppTest.from_file(UI_PATH, default_timeout=30)


def _button(at, label):
    return next(b for b in at.button if b.label == label)


def test_results_view_renders_counts_and_charts(app):
    app.session_state["result"] = FAKE_RESULT
    app.session_state["result_language"] = "python"
    app.run()

    assert not app.exception
    labels = {m.label: m.value for m in app.metric}
    assert labels["Errors"] == "1"
    assert labels["Warnings"] == "1"
    assert labels["Suggestions"] == "0"


def test_clear_button_empties_editor_and_results(app):
    app.session_state["code"] = "except:\n"
    app.session_state["result"] = FAKE_RESULT
    app.run()

    _button(app, "Clear").click().run()

    assert app.text_area(key="code").value == ""
    assert "result" not in app.session_state
    assert not app.exception
