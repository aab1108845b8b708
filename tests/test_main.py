import io
import json

from cover_extract import main
from cover_extract.errors import UpstreamFailure


def test_run_posting_prints_record(monkeypatch, capsys):
    html = "<html><body><h1>SRE</h1><p>Requirements: Linux, Terraform and on-call.</p></body></html>"
    monkeypatch.setattr(main, "fetch_posting", lambda url, timeout, user_agent: (200, html))

    code = main.run_posting("https://example.com/jobs/7", show_preview=True)

    out = json.loads(capsys.readouterr().out)
    assert code == 0
    assert out["data"] == {"position": "SRE", "requirements": "Linux, Terraform and on-call."}
    assert out["rawText"] == "SRE Requirements: Linux, Terraform and on-call."


def test_run_posting_reports_fetch_failure(monkeypatch, capsys):
    def fail(url, timeout, user_agent):
        raise UpstreamFailure("Failed to fetch URL content (HTTP 500)", status_code=500)

    monkeypatch.setattr(main, "fetch_posting", fail)

    assert main.run_posting("https://example.com/jobs/7") == 2
    assert "Could not fetch job posting" in capsys.readouterr().out


def test_run_resume(tmp_path, capsys):
    from docx import Document

    doc = Document()
    for line in ["Jane Doe", "jane.doe@example.com", "Skills: Python, Go"]:
        doc.add_paragraph(line)
    buf = io.BytesIO()
    doc.save(buf)
    path = tmp_path / "jane.docx"
    path.write_bytes(buf.getvalue())

    code = main.run_resume(str(path))

    out = json.loads(capsys.readouterr().out)
    assert code == 0
    assert out == {"name": "Jane Doe", "email": "jane.doe@example.com", "skills": "Python, Go"}


def test_run_resume_unsupported_file(tmp_path, capsys):
    path = tmp_path / "notes.txt"
    path.write_text("hello", encoding="utf-8")

    assert main.run_resume(str(path)) == 2
    assert "Could not read resume" in capsys.readouterr().out
