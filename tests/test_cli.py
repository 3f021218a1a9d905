"""
Tests for whitelist_admin/cli.py
"""
import pytest

from whitelist_admin import cli
from whitelist_admin.core.security import verify_password


def test_hash_password_prints_verifiable_hash(capsys):
    cli.main(["hash-password", "s3cret-pass"])

    printed = capsys.readouterr().out.strip()
    assert printed != "s3cret-pass"
    assert verify_password("s3cret-pass", printed)


def test_hash_password_rejects_short_password():
    with pytest.raises(SystemExit):
        cli.main(["hash-password", "123"])


def test_hash_password_prompts_and_checks_confirmation(monkeypatch):
    answers = iter(["first-pass", "second-pass"])
    monkeypatch.setattr(cli.getpass, "getpass", lambda prompt: next(answers))

    with pytest.raises(SystemExit) as exc:
        cli.main(["hash-password"])
    assert "do not match" in str(exc.value)


def test_init_db_creates_tables(monkeypatch, capsys):
    calls = []
    monkeypatch.setattr(cli, "init_db", lambda: calls.append(True))

    cli.main(["init-db"])

    assert calls == [True]
    assert "Database ready." in capsys.readouterr().out
