from pathlib import Path
from core.config import load_params

def test_load_params(tmp_path):
    cfg = tmp_path / "params.yaml"
    cfg.write_text("hurst:\n  min_window: 12\n  log_step: 0.2\ndata:\n  close_column: 3\n")

    params = load_params(cfg)

    assert params["hurst"] == {"min_window": 12, "log_step": 0.2}
    assert params["data"]["close_column"] == 3

def test_missing_file_gives_defaults(tmp_path):
    assert load_params(tmp_path / "absent.yaml") == {}

def test_empty_file_gives_defaults(tmp_path):
    cfg = tmp_path / "empty.yaml"
    cfg.write_text("")
    assert load_params(cfg) == {}

def test_repository_params_file():
    params = load_params(Path(__file__).resolve().parent.parent / "config" / "params.yaml")
    assert params["hurst"]["min_window"] == 10
    assert params["hurst"]["log_step"] == 0.25
    assert params["data"]["close_column"] == 4
