"""Unit tests for layered configuration loading."""

import pytest

from lettersmith.utils.config import load_config


@pytest.fixture(autouse=True)
def no_env_config(monkeypatch):
    monkeypatch.delenv("LETTERSMITH_CONFIG_PATH", raising=False)


@pytest.mark.unit
def test_packaged_defaults():
    cfg = load_config()
    assert cfg.targeting.top_n == 20
    assert cfg.fields.count == 10
    assert cfg.fields.max_length == 20
    assert cfg.markers.open == "}}"
    assert cfg.markers.close == "{{"
    assert cfg.export.raw_filename == "with_markers.txt"


@pytest.mark.unit
def test_user_file_overrides_defaults(tmp_path):
    user = tmp_path / "lettersmith.yaml"
    user.write_text("targeting:\n  top_n: 5\n", encoding="utf-8")

    cfg = load_config(config_path=user)
    assert cfg.targeting.top_n == 5
    assert cfg.targeting.max_highlights == 8


@pytest.mark.unit
def test_env_variable_points_to_user_file(tmp_path, monkeypatch):
    user = tmp_path / "env.yaml"
    user.write_text("markers:\n  open: '<<'\n  close: '>>'\n", encoding="utf-8")
    monkeypatch.setenv("LETTERSMITH_CONFIG_PATH", str(user))

    cfg = load_config()
    assert (cfg.markers.open, cfg.markers.close) == ("<<", ">>")


@pytest.mark.unit
def test_dotlist_overrides_win(tmp_path):
    user = tmp_path / "lettersmith.yaml"
    user.write_text("fields:\n  count: 4\n", encoding="utf-8")

    cfg = load_config(config_path=user, overrides=["fields.count=6", "layout.columns=60"])
    assert cfg.fields.count == 6
    assert cfg.layout.columns == 60


@pytest.mark.unit
def test_missing_user_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        load_config(config_path=tmp_path / "missing.yaml")
