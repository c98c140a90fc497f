"""Tests for writing generated sources."""

import logging
from pathlib import Path

from lox_astgen.grammar_codegen.writer import write_source


def test_write_creates_file(tmp_path: Path, caplog):
    target = tmp_path / "ast.rs"
    with caplog.at_level(logging.INFO, logger="lox_astgen.codegen"):
        assert write_source(target, "pub enum Expr {}\n") is True
    assert target.read_text(encoding="utf-8") == "pub enum Expr {}\n"
    assert "File written successfully" in caplog.text


def test_write_overwrites_existing_file(tmp_path: Path):
    target = tmp_path / "ast.rs"
    target.write_text("hand edits that will be lost\n" * 10, encoding="utf-8")
    assert write_source(target, "new\n")
    assert target.read_text(encoding="utf-8") == "new\n"


def test_write_failure_is_reported_not_raised(tmp_path: Path, caplog):
    target = tmp_path / "missing" / "ast.rs"
    with caplog.at_level(logging.INFO, logger="lox_astgen.codegen"):
        assert write_source(target, "pub enum Expr {}\n") is False
    assert not target.exists()
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "Error writing the file" in errors[0].getMessage()
    assert str(target) in errors[0].getMessage()


def test_write_to_directory_fails_cleanly(tmp_path: Path):
    assert write_source(tmp_path, "text") is False
