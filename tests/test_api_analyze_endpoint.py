import pytest
from fastapi.testclient import TestClient

from codemate import deps
from codemate.main import app
from codemate.settings import Settings


@pytest.fixture()
def client():
    def fake_get_settings_dep() -> Settings:
        return Settings(ANALYSIS_DELAY_SECONDS=0, ANALYSIS_SEED=1, REPORT_PAGE_LINES=60)

    app.dependency_overrides[deps.get_settings_dep] = fake_get_settings_dep
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_healthz(client):
    resp = client.get("/healthz")
    assert resp.status_code == 200
    body = resp.json()
    assert body["service"] == "codemate"
    assert body["languages"] == ["java", "python", "cpp"]


def test_analyze_python_snippet(client):
    resp = client.post(
        "/v1/analyze",
        json={"code": "import *\ntry:\n    pass\nexcept:\n    pass\n", "language": "python"},
    )
    assert resp.status_code == 200, resp.text

    data = resp.json()
    assert set(data.keys()) == {"score", "issues", "metrics", "suggestions"}
    rule_ids = [i["rule_id"] for i in data["issues"]]
    assert rule_ids[:2] == ["import-style", "exception-handling"]
    assert rule_ids[-2:] == ["documentation", "naming-clarity"]
    assert data["score"] < 100
    assert data["metrics"]["maintainability_index"] >= 10


def test_analyze_accepts_empty_code_and_unknown_language(client):
    resp = client.post("/v1/analyze", json={"code": "", "language": "brainfuck"})
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["metrics"]["lines_of_code"] == 0
    assert data["metrics"]["cyclomatic_complexity"] == 1
    assert len(data["issues"]) == 2


def test_analyze_file_detects_language_from_extension(client):
    resp = client.post(
        "/v1/analyze/file",
        files={"file": ("Main.java", b"import a.b;\nimport c.d;\n", "text/plain")},
    )
    assert resp.status_code == 200, resp.text
    rule_ids = [i["rule_id"] for i in resp.json()["issues"]]
    assert rule_ids.count("unused-imports") == 2


def test_analyze_file_language_query_overrides_extension(client):
    resp = client.post(
        "/v1/analyze/file?language=python",
        files={"file": ("snippet.txt", b"except:\n", "text/plain")},
    )
    assert resp.status_code == 200, resp.text
    assert resp.json()["issues"][0]["rule_id"] == "exception-handling"


def test_analyze_file_rejects_non_utf8(client):
    resp = client.post(
        "/v1/analyze/file",
        files={"file": ("a.cpp", b"\xff\xfe\xfa", "application/octet-stream")},
    )
    assert resp.status_code == 400
    assert "UTF-8" in resp.json()["detail"]


def test_report_renders_previous_result(client):
    analyzed = client.post("/v1/analyze", json={"code": "#include <vector>\n", "language": "cpp"})
    assert analyzed.status_code == 200

    resp = client.post("/v1/report", json={"result": analyzed.json(), "language": "cpp"})
    assert resp.status_code == 200, resp.text
    assert resp.headers["content-type"].startswith("text/plain")
    assert "CodeMate Analysis Report" in resp.text
    assert "Language: CPP" in resp.text
    assert "include-optimization" in resp.text


def test_report_failure_is_reported_and_does_not_block_next_analysis(client, monkeypatch):
    from codemate.routers import analyze as analyze_router

    def boom(*args, **kwargs):
        raise RuntimeError("renderer exploded")

    analyzed = client.post("/v1/analyze", json={"code": "x", "language": "java"}).json()
    monkeypatch.setattr(analyze_router, "format_report", boom)

    resp = client.post("/v1/report", json={"result": analyzed, "language": "java"})
    assert resp.status_code == 502
    assert resp.json()["detail"] == "Report failed: RuntimeError"

    again = client.post("/v1/analyze", json={"code": "x", "language": "java"})
    assert again.status_code == 200


def test_languages(client):
    resp = client.get("/v1/languages")
    assert resp.status_code == 200
    assert resp.json() == {"languages": ["java", "python", "cpp"]}
