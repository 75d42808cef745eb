import json

from config_manager import ConfigManager
from models import DitherAlgorithm, DitherSettings


def test_missing_file_gives_defaults(tmp_path):
    assert ConfigManager(tmp_path / "none.json").load() == DitherSettings()


def test_partial_file_keeps_other_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"algorithm": "stucki", "threshold": 90, "scale": 3}))

    settings = ConfigManager(path).load()
    assert settings.algorithm is DitherAlgorithm.STUCKI
    assert settings.threshold == 90
    assert settings.scale == 3.0
    assert settings.foreground_color == DitherSettings().foreground_color
    assert settings.pattern == "default"


def test_unknown_algorithm_falls_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"algorithm": "halftone-2000", "threshold": 5}))
    assert ConfigManager(path).load() == DitherSettings()


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    assert ConfigManager(path).load() == DitherSettings()


def test_non_object_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2, 3]")
    assert ConfigManager(path).load() == DitherSettings()
