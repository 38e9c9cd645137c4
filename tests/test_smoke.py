from fastapi.testclient import TestClient
from delimap.main import app

client = TestClient(app)

def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}

def test_parse_semicolon_csv():
    raw = "a;b;c\n1;2;3\n4;5;6\n".encode("utf-8")

    files = {"file": ("test.csv", raw, "text/csv")}
    r = client.post("/parse", files=files)
    assert r.status_code == 200

    data = r.json()
    assert data["filename"] == "test.csv"
    assert data["separator"] == ";"
    assert data["header"] == ["a", "b", "c"]
    assert data["records"] == [{"a": "1", "b": "2", "c": "3"}, {"a": "4", "b": "5", "c": "6"}]
    assert data["status"] == {"failed": False, "message": ""}

def test_parse_strips_utf8_bom():
    raw = "name,city\nPaul,Montréal\n".encode("utf-8-sig")

    files = {"file": ("test.csv", raw, "text/csv")}
    data = client.post("/parse", files=files).json()
    assert data["header"] == ["name", "city"]
    assert data["records"] == [{"name": "Paul", "city": "Montréal"}]

def test_parse_reports_soft_failure():
    raw = b"only one line\n"

    files = {"file": ("test.csv", raw, "text/csv")}
    r = client.post("/parse", files=files)
    assert r.status_code == 200

    data = r.json()
    assert data["status"]["failed"] is True
    assert data["status"]["message"] == "document has fewer than two lines"
    assert data["header"] == []
    assert data["records"] == []

def test_parse_with_extra_candidate_and_forced_separator():
    raw = b"a|b\n1|2\n"
    files = {"file": ("test.csv", raw, "text/csv")}

    r = client.post("/parse", files=files, params={"candidates": ["|"]})
    assert r.json()["separator"] == "|"

    r = client.post("/parse", files=files, params={"separator": "#"})
    data = r.json()
    assert data["separator"] == "#"
    assert data["header"] == ["a|b"]
    assert data["records"] == [{"a|b": "1|2"}]

def test_rejects_unsupported_extension():
    files = {"file": ("test.xlsx", b"a;b\n1;2\n", "application/octet-stream")}
    r = client.post("/parse", files=files)
    assert r.status_code == 422
    assert ".xlsx" in r.json()["detail"]

def test_rejects_non_utf8_upload():
    raw = "name,city\nPaul,Montréal\n".encode("latin-1")
    files = {"file": ("test.csv", raw, "text/csv")}
    r = client.post("/parse", files=files)
    assert r.status_code == 422

def test_rejects_zero_sample_size():
    files = {"file": ("test.csv", b"a;b\n1;2\n", "text/csv")}
    r = client.post("/parse", files=files, params={"sample_size": 0})
    assert r.status_code == 422
