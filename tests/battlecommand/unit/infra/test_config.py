from __future__ import annotations

import os

from battlecommand.game.infra.config import (
    default_env_files,
    load_default_env_files,
    load_env_file,
    read_env_file,
)


def test_load_env_file_sets_values_with_overwrite_by_default(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "BC_A=1\nBC_B='two'\n#comment\nINVALID\nBC_C=three\n",
        encoding="utf-8",
    )
    monkeypatch.delenv("BC_A", raising=False)
    monkeypatch.delenv("BC_B", raising=False)
    monkeypatch.setenv("BC_C", "already")
    load_env_file(str(env_file))
    assert os.environ.get("BC_A") == "1"
    assert os.environ.get("BC_B") == "two"
    assert os.environ.get("BC_C") == "three"
    for key in ("BC_A", "BC_B"):
        monkeypatch.delenv(key)


def test_load_env_file_can_preserve_existing_values(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("BC_C=three\n", encoding="utf-8")
    monkeypatch.setenv("BC_C", "already")
    load_env_file(str(env_file), override_existing=False)
    assert os.environ.get("BC_C") == "already"


def test_load_env_file_missing_is_noop(tmp_path) -> None:
    before = dict(os.environ)
    load_env_file(str(tmp_path / ".env.missing"))
    assert dict(os.environ) == before


def test_load_default_env_files_honors_order(tmp_path, monkeypatch) -> None:
    app_env = tmp_path / ".env.app"
    app_local_env = tmp_path / ".env.app.local"
    app_env.write_text("BC_X=app\nBC_Y=app\n", encoding="utf-8")
    app_local_env.write_text("BC_Y=app_local\n", encoding="utf-8")
    monkeypatch.setenv("BC_X", "placeholder")
    monkeypatch.setenv("BC_Y", "placeholder")

    load_default_env_files(paths=(str(app_env), str(app_local_env)))

    assert os.environ.get("BC_X") == "app"
    assert os.environ.get("BC_Y") == "app_local"


def test_read_env_file_strips_quotes_and_skips_noise(tmp_path) -> None:
    env_file = tmp_path / ".env.app"
    env_file.write_text('\n# note\nBC_Q="quoted"\n=orphan\nBC_EQ=a=b\n', encoding="utf-8")
    assert read_env_file(env_file) == {"BC_Q": "quoted", "BC_EQ": "a=b"}


def test_default_env_files_read_app_data_config_dir(monkeypatch, tmp_path) -> None:
    app_data = tmp_path / "bc_data"
    config_dir = app_data / "config"
    config_dir.mkdir(parents=True)
    (config_dir / ".env.app").write_text("BC_FROM_CONFIG=app\nBC_LAYER=app\n", encoding="utf-8")
    (config_dir / ".env.app.local").write_text("BC_LAYER=app_local\n", encoding="utf-8")
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setenv("BATTLECOMMAND_APP_DATA_DIR", str(app_data))
    monkeypatch.setenv("BC_FROM_CONFIG", "placeholder")
    monkeypatch.setenv("BC_LAYER", "placeholder")

    load_default_env_files()

    assert os.environ.get("BC_FROM_CONFIG") == "app"
    assert os.environ.get("BC_LAYER") == "app_local"


def test_working_dir_env_files_override_app_data_config(monkeypatch, tmp_path) -> None:
    app_data = tmp_path / "bc_data"
    (app_data / "config").mkdir(parents=True)
    (app_data / "config" / ".env.app").write_text("BC_LAYER=config\n", encoding="utf-8")
    (tmp_path / ".env.app").write_text("BC_LAYER=checkout\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("BATTLECOMMAND_APP_DATA_DIR", str(app_data))
    monkeypatch.setenv("BC_LAYER", "placeholder")

    assert default_env_files()[0] == app_data / "config" / ".env.app"
    load_default_env_files()

    assert os.environ.get("BC_LAYER") == "checkout"
