# heelix/tests/test_static_server.py
import importlib

import pytest

from heelix.api import main as api_main
from heelix import config


def test_existing_file_is_served(client):
    r = client.get("/logo.bin")
    assert r.status_code == 200
    assert r.content == b"\x89PNG\x00\x01\x02"


def test_nested_file_is_served(client):
    r = client.get("/styles/widget.css")
    assert r.status_code == 200
    assert r.text == "body { color: red; }"
    assert r.headers["content-type"].startswith("text/css")


def test_unknown_path_falls_back_to_index(client):
    r = client.get("/nonexistent/path")
    assert r.status_code == 200
    assert r.text == "<html><body>heelix app</body></html>"
    assert r.headers["content-type"].startswith("text/html")


def test_root_falls_back_to_index(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "heelix app" in r.text


def test_traversal_outside_public_falls_back(client, web_root):
    (web_root / "secret.txt").write_text("top secret", encoding="utf-8")
    r = client.get("/..%2Fsecret.txt")
    assert r.status_code == 200
    assert "top secret" not in r.text


def test_null_byte_path_falls_back_to_index(client):
    r = client.get("/%00")
    assert r.status_code == 200
    assert "heelix app" in r.text


def test_directory_serves_its_index(client, web_root):
    docs = web_root / "public" / "docs"
    docs.mkdir()
    (docs / "index.html").write_text("docs home", encoding="utf-8")

    r = client.get("/docs/")
    assert r.status_code == 200
    assert r.text == "docs home"


def test_no_cache_validators(client):
    for path in ("/styles/widget.css", "/anything"):
        r = client.get(path)
        assert "etag" not in r.headers
        assert "last-modified" not in r.headers


def test_head_request(client):
    r = client.head("/styles/widget.css")
    assert r.status_code == 200
    assert "etag" not in r.headers


def test_post_is_not_routed(client):
    r = client.post("/styles/widget.css")
    assert r.status_code == 405


def _run_main(monkeypatch):
    calls = []
    monkeypatch.setattr(api_main.uvicorn, "run", lambda app, host, port: calls.append(port))
    monkeypatch.setattr(api_main, "configure_logging", lambda level: None)
    # ignora qualquer .env local
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    api_main.main()
    return calls


def test_main_binds_env_port(monkeypatch):
    monkeypatch.setenv("HEELIX_ADMIN_PORT", "4000")
    assert _run_main(monkeypatch) == [4000]


def test_main_default_port(monkeypatch):
    monkeypatch.delenv("HEELIX_ADMIN_PORT", raising=False)
    assert _run_main(monkeypatch) == [3000]


def test_import_fails_fast_on_invalid_env(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    monkeypatch.setenv("HEELIX_ADMIN_PORT", "abc")
    try:
        with pytest.raises(ValueError, match="HEELIX_ADMIN_PORT"):
            importlib.reload(api_main)
    finally:
        monkeypatch.delenv("HEELIX_ADMIN_PORT")
        importlib.reload(api_main)
