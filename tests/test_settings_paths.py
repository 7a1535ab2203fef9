"""Tests for environment settings and project layout resolution."""

from __future__ import annotations

import pytest

from src.config.paths import find_monorepo_root, resolve_app_paths
from src.config.settings import load_settings


def test_settings_read_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("APP_DIRECTORY", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.app_directory == tmp_path
    assert settings.log_level == "DEBUG"
    assert settings.sibling_packages_dir is None


def test_invalid_log_level_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(RuntimeError):
        load_settings()


def test_default_layout(tmp_path) -> None:
    app_dir = tmp_path / "packages" / "web"
    paths = resolve_app_paths(load_settings(APP_DIRECTORY=app_dir))

    app_path = app_dir.resolve()
    assert paths.app_path == app_path
    assert paths.app_package_json == app_path / "package.json"
    assert paths.tests_setup == app_path / "src" / "setupTests.js"
    assert paths.sibling_packages == app_path / "packages"
    assert paths.scripts_path == app_path / "node_modules" / "react-scripts"


def test_lerna_root_packages_are_the_default_siblings(tmp_path) -> None:
    (tmp_path / "lerna.json").write_text("{}", encoding="utf-8")
    app_dir = tmp_path / "packages" / "web"
    app_dir.mkdir(parents=True)

    paths = resolve_app_paths(load_settings(APP_DIRECTORY=app_dir))

    assert find_monorepo_root(paths.app_path) == tmp_path.resolve()
    assert paths.sibling_packages == tmp_path.resolve() / "packages"


def test_explicit_directories_win(tmp_path) -> None:
    paths = resolve_app_paths(
        load_settings(
            APP_DIRECTORY=tmp_path / "web",
            SIBLING_PACKAGES_DIR=tmp_path / "libs",
            SCRIPTS_DIRECTORY=tmp_path / "scripts",
        )
    )

    assert paths.sibling_packages == (tmp_path / "libs").resolve()
    assert paths.scripts_path == (tmp_path / "scripts").resolve()
