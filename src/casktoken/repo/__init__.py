"""Lookups against the cask repository tree."""

from __future__ import annotations

from casktoken.repo.duplicates import cask_path, find_existing_cask, resolve_project_root

__all__ = ["cask_path", "find_existing_cask", "resolve_project_root"]
