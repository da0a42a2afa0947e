import importlib.util
import os

import pytest

from ontowalk.infrastructure.di_container import DIContainer

SCRIPT = os.path.join(os.path.dirname(__file__), "..", "..", "scripts", "walk.py")


@pytest.fixture
def walk_script(monkeypatch):
    for name in ("ONTOWALK_FORMAT", "ONTOWALK_CONCURRENT", "ONTOWALK_MAX_WORKERS"):
        monkeypatch.delenv(name, raising=False)
    DIContainer._instance = None
    spec = importlib.util.spec_from_file_location("walk_script", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    yield module
    DIContainer._instance = None


def test_walk_local_files(walk_script, tmp_path, capsys):
    a = tmp_path / "a.ttl"
    b = tmp_path / "b.ttl"
    a.write_text(f"<{a.as_uri()}> <http://example.org/next> <{b.as_uri()}> .\n", encoding="utf-8")
    b.write_text(f"<{b.as_uri()}> <http://example.org/next> <{a.as_uri()}> .\n", encoding="utf-8")

    code = walk_script.main([a.as_uri(), "--local", "--print", "uris"])

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out == [a.as_uri(), b.as_uri(), "Visited 2 nodes."]


def test_walk_predicate_filter(walk_script, tmp_path, capsys):
    a = tmp_path / "a.ttl"
    b = tmp_path / "b.ttl"
    a.write_text(f"<{a.as_uri()}> <http://example.org/skip> <{b.as_uri()}> .\n", encoding="utf-8")
    b.write_text("", encoding="utf-8")

    code = walk_script.main([a.as_uri(), "--local", "--print", "none",
                             "--predicate", "http://example.org/next"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "Visited 1 nodes."
