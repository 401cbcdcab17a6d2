"""
Unit tests for backend/cli.py
"""

import json

import pytest

from backend import cli
from backend.settings import get_settings


@pytest.fixture
def file_env(tmp_path, monkeypatch):
    """Point settings at a temporary storage directory."""
    monkeypatch.setenv("STORAGE_BACKEND", "file")
    monkeypatch.setenv("STORAGE_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("STORAGE_KEY", "workoutDB_v1")
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


def _doc(users, current=None):
    return {"users": users, "sessions": {"currentUserId": current}}


def _user(user_id):
    return {"id": user_id, "email": f"{user_id}@x.com", "name": "Imported", "passwordHash": "h"}


@pytest.mark.unit
class TestCli:

    def test_export_to_stdout(self, file_env, capsys):
        cli.main(["export", "-o", "-"])
        out = capsys.readouterr().out
        assert json.loads(out) == _doc({})

    def test_import_then_export(self, file_env):
        source = file_env / "in.json"
        source.write_text(json.dumps(_doc({"u1": _user("u1")}, "u1")), encoding="utf-8")
        target = file_env / "out.json"

        cli.main(["import", str(source)])
        cli.main(["export", "-o", str(target)])

        exported = json.loads(target.read_text(encoding="utf-8"))
        assert list(exported["users"]) == ["u1"]
        assert exported["sessions"]["currentUserId"] == "u1"

    def test_merge_import(self, file_env):
        source = file_env / "in.json"
        source.write_text(json.dumps(_doc({"u1": _user("u1")})), encoding="utf-8")
        target = file_env / "out.json"

        cli.main(["import", str(source)])
        cli.main(["import", str(source), "--merge"])
        cli.main(["export", "-o", str(target)])

        assert len(json.loads(target.read_text(encoding="utf-8"))["users"]) == 2

    def test_reset(self, file_env, capsys):
        source = file_env / "in.json"
        source.write_text(json.dumps(_doc({"u1": _user("u1")})), encoding="utf-8")
        cli.main(["import", str(source)])

        cli.main(["reset"])
        capsys.readouterr()
        cli.main(["export", "-o", "-"])

        assert json.loads(capsys.readouterr().out) == _doc({})

    def test_invalid_import_exits_1(self, file_env, capsys):
        source = file_env / "bad.json"
        source.write_text("{nope", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            cli.main(["import", str(source)])

        assert exc_info.value.code == 1
        assert "Error: Import failed" in capsys.readouterr().err

    def test_missing_file_exits_1(self, file_env, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["import", str(file_env / "missing.json")])
        assert exc_info.value.code == 1
        assert "File not found" in capsys.readouterr().err
