import os
import time
from typing import Any, Dict, Optional, Tuple

import requests
import streamlit as st

st.set_page_config(page_title="CodeMate", layout="wide")

# Streamlit doesn't provide full theming via Python, so we use minimal CSS
# overrides that are stable across versions.
st.markdown(
    """
    <style>
      .stApp { background: #111827; }

      .cm-title {
        font-size: 2.0rem;
        font-weight: 800;
        color: #F9FAFB;
        margin: 0;
        line-height: 1.1;
      }
      .cm-subtitle {
        color: rgba(249, 250, 251, 0.7);
        margin-top: 0.35rem;
        margin-bottom: 0.25rem;
      }

      div.stButton > button {
        background: #6366F1;
        color: #FFFFFF;
        border: 0;
        font-weight: 700;
      }
      div.stButton > button:hover { filter: brightness(1.05); }
    </style>
    """,
    unsafe_allow_html=True,
)

st.markdown('<div class="cm-title">CodeMate</div>', unsafe_allow_html=True)
st.markdown('<div class="cm-subtitle">Rule-based code quality analysis</div>', unsafe_allow_html=True)

API_BASE_URL = os.environ.get("CODEMATE_API_URL", "http://127.0.0.1:8000").rstrip("/")

LANGUAGES = {"java": "Java", "python": "Python", "cpp": "C++"}
EXTENSIONS = {"java": "java", "py": "python", "cpp": "cpp", "cc": "cpp", "cxx": "cpp"}

METRIC_LABELS = {
    "lines_of_code": "Lines of Code",
    "cyclomatic_complexity": "Complexity",
    "maintainability_index": "Maintainability",
    "duplicate_lines": "Duplicate Lines",
    "test_coverage": "Test Coverage",
}

SAMPLE_CODES = {
    "java": """public class Calculator {
    public static void main(String[] args) {
        int a = 5;
        int b = 3;
        System.out.println("Sum: " + (a + b));

        // Nested loop example
        for (int i = 0; i < 5; i++) {
            for (int j = 0; j < 3; j++) {
                System.out.println(i + ", " + j);
            }
        }
    }
}""",
    "python": """import *
from math import sqrt

def calculateAverage(numbers):
    try:
        total = sum(numbers)
        return total / len(numbers)
    except:
        return 0

def ProcessData(data):
    result = []
    for item in data:
        if item > 0:
            result.append(sqrt(item))
    return result""",
    "cpp": """#include <iostream>
#include <vector>
#include <memory>

using namespace std;

class DataProcessor {
public:
    void processData() {
        int* data = new int[100];

        for (int i = 0; i < 100; i++) {
            data[i] = i * 2;
        }

        // Memory leak - forgot to delete[]
        cout << "Processing complete" << endl;
    }
};""",
}

# Analysis waits on a simulated delay server-side; give it room.
_REQUEST_TIMEOUT = 30


def _healthcheck(base_url: str) -> Tuple[bool, str, Optional[Dict[str, Any]]]:
    """Returns (ok, message, json_payload_if_any). Never raises."""
    try:
        resp = requests.get(f"{base_url}/healthz", timeout=2)
        if resp.status_code != 200:
            return False, f"HTTP {resp.status_code}", None
        try:
            payload = resp.json()
        except ValueError:
            payload = None
        return True, "Healthy", payload
    except requests.exceptions.RequestException as e:
        return False, f"Not reachable: {e.__class__.__name__}", None


def _post_json(base_url: str, path: str, body: Dict[str, Any]) -> Tuple[Optional[requests.Response], Optional[str]]:
    """Returns (response, error_string). Never raises."""
    try:
        resp = requests.post(f"{base_url}{path}", json=body, timeout=_REQUEST_TIMEOUT)
    except requests.exceptions.RequestException as e:
        return None, f"Request failed: {e!r}"

    if resp.status_code != 200:
        # Show server-provided error message if available.
        return None, f"HTTP {resp.status_code}: {resp.text}"
    return resp, None


def _post_analyze(base_url: str, *, code: str, language: str) -> Tuple[Optional[Dict[str, Any]], Optional[str]]:
    resp, err = _post_json(base_url, "/v1/analyze", {"code": code, "language": language})
    if err or resp is None:
        return None, err
    try:
        return resp.json(), None
    except ValueError as e:
        return None, f"Invalid JSON from server: {e}"


def _post_report(base_url: str, *, result: Dict[str, Any], language: str) -> Tuple[Optional[str], Optional[str]]:
    resp, err = _post_json(base_url, "/v1/report", {"result": result, "language": language})
    if err or resp is None:
        return None, err
    return resp.text, None


def _clear_editor() -> None:
    st.session_state["code"] = ""
    st.session_state.pop("result", None)
    st.session_state.pop("uploaded_name", None)


# --- Sidebar: backend status ---
with st.sidebar:
    st.subheader("Backend")
    st.write("API:", API_BASE_URL)

    # Small cache so we don't spam /healthz on every widget interaction.
    now = time.time()
    last_ts = st.session_state.get("health_ts", 0.0)
    if st.button("Refresh status") or (now - last_ts) > 3:
        ok, msg, payload = _healthcheck(API_BASE_URL)
        st.session_state["health_ok"] = ok
        st.session_state["health_msg"] = msg
        st.session_state["health_payload"] = payload
        st.session_state["health_ts"] = now

    ok = st.session_state.get("health_ok", False)
    msg = st.session_state.get("health_msg", "Unknown")
    payload = st.session_state.get("health_payload")

    if ok:
        st.success(f"Status: {msg}")
        if isinstance(payload, dict):
            st.caption(f"CodeMate v{payload.get('version', 'unknown')}")
            langs = payload.get("languages") or []
            if langs:
                st.caption("Languages: " + ", ".join(LANGUAGES.get(v, v) for v in langs))
    else:
        st.error(f"Status: {msg}")
        st.caption("Start the API with: uvicorn codemate.main:app --reload")

# --- Main UI ---
editor_col, results_col = st.columns(2)

with editor_col:
    uploaded = st.file_uploader("Upload a source file", type=sorted(EXTENSIONS))
    if uploaded is not None and st.session_state.get("uploaded_name") != uploaded.name:
        st.session_state["uploaded_name"] = uploaded.name
        try:
            st.session_state["code"] = uploaded.getvalue().decode("utf-8")
        except UnicodeDecodeError:
            st.error("Uploaded file must be UTF-8 encoded")
        ext = uploaded.name.rsplit(".", 1)[-1].lower()
        if ext in EXTENSIONS:
            st.session_state["language"] = EXTENSIONS[ext]

    language = st.radio(
        "Language",
        list(LANGUAGES),
        format_func=lambda v: LANGUAGES[v],
        horizontal=True,
        key="language",
    )

    if st.button(f"Load Sample {LANGUAGES[language]} Code"):
        st.session_state["code"] = SAMPLE_CODES[language]

    code = st.text_area(
        "Paste your code here",
        height=400,
        placeholder="Enter your source code...",
        key="code",
    )
    analyze_col, clear_col = st.columns(2)
    analyze_clicked = analyze_col.button("Analyze Code")
    clear_col.button("Clear", on_click=_clear_editor)

with results_col:
    if analyze_clicked:
        if not code.strip():
            st.warning("Please paste some code first.")
        else:
            # Streamlit reruns are sequential, so only one analysis is in flight at a time.
            with st.spinner("Analyzing your code..."):
                data, err = _post_analyze(API_BASE_URL, code=code, language=language)
            if err:
                st.error("Analysis request failed")
                st.code(err)
            else:
                st.session_state["result"] = data
                st.session_state["result_language"] = language

    data = st.session_state.get("result")
    if data:
        score = int(data.get("score", 0))
        st.subheader("Code Quality Score")
        st.progress(score / 100)
        st.metric("Score", f"{score}/100")

        issues = data.get("issues") or []
        kinds = [i.get("kind") for i in issues]
        c1, c2, c3 = st.columns(3)
        c1.metric("Errors", kinds.count("error"))
        c2.metric("Warnings", kinds.count("warning"))
        c3.metric("Suggestions", kinds.count("suggestion"))
        st.bar_chart(
            {"count": {"Errors": kinds.count("error"), "Warnings": kinds.count("warning"), "Suggestions": kinds.count("suggestion")}}
        )

        metrics = data.get("metrics") or {}
        st.subheader("Metrics")
        st.write("**Lines of Code:**", metrics.get("lines_of_code"))
        st.write("**Cyclomatic Complexity:**", metrics.get("cyclomatic_complexity"))
        st.write("**Maintainability Index:**", metrics.get("maintainability_index"))
        st.write("**Duplicate Lines:**", metrics.get("duplicate_lines"))
        st.write("**Test Coverage:**", f"{metrics.get('test_coverage')}%")
        st.bar_chart({"value": {METRIC_LABELS[k]: metrics.get(k, 0) for k in METRIC_LABELS}})

        if issues:
            st.subheader("Issues")
            for issue in issues:
                st.markdown(f"**{issue.get('kind', '').title()}** — {issue.get('message')}")
                st.caption(
                    f"Line {issue.get('line')}, Column {issue.get('column')} | "
                    f"{issue.get('rule_id')} | severity={issue.get('severity')}"
                )

        suggestions = data.get("suggestions") or []
        if suggestions:
            st.subheader("Suggestions")
            for s in suggestions:
                st.write("-", s)

        if st.button("Prepare Report"):
            with st.spinner("Rendering report..."):
                text, err = _post_report(
                    API_BASE_URL,
                    result=data,
                    language=st.session_state.get("result_language", language),
                )
            if err:
                st.error("Report request failed")
                st.code(err)
            else:
                st.download_button("Download report", data=text or "", file_name="codemate-report.txt")

        with st.expander("Raw response"):
            st.json(data)
