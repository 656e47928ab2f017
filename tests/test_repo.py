"""Tests for project root resolution and duplicate detection."""

from __future__ import annotations

from pathlib import Path

from casktoken.repo import cask_path, find_existing_cask, resolve_project_root


def test_cask_path_is_sharded_by_first_character(tmp_path: Path) -> None:
    assert cask_path(tmp_path, "lasso.rb") == tmp_path / "Casks" / "l" / "lasso.rb"
    assert cask_path(tmp_path, "1password.rb", "Formulae") == tmp_path / "Formulae" / "1" / "1password.rb"


def test_find_existing_cask(cask_repo: Path) -> None:
    existing = cask_repo / "Casks" / "l" / "lasso.rb"
    existing.parent.mkdir()
    existing.write_text('cask "lasso" do\nend\n', encoding="utf-8")

    assert find_existing_cask(cask_repo, "lasso.rb") == existing
    assert find_existing_cask(cask_repo, "lasso-app.rb") is None


def test_resolve_project_root_walks_up(cask_repo: Path) -> None:
    nested = cask_repo / "developer" / "bin"
    nested.mkdir(parents=True)

    assert resolve_project_root(nested) == cask_repo.resolve()


def test_resolve_project_root_falls_back_to_start(tmp_path: Path) -> None:
    start = tmp_path / "somewhere"
    start.mkdir()

    assert resolve_project_root(start, casks_dir="NoSuchCasksDir") == start.resolve()
