from config_manager import ConfigManager
from models import ArtConfig


def test_missing_file_gives_defaults(tmp_path):
    manager = ConfigManager(tmp_path / "config.json")

    assert manager.load() == ArtConfig()


def test_save_and_load(tmp_path):
    manager = ConfigManager(tmp_path / "config.json")
    config = ArtConfig(target_width=100, color_count=24, quantization_method="kmeans")

    success, error = manager.save(config)

    assert success and error is None
    assert manager.load() == config


def test_partial_file_keeps_other_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"color_count": 9, "unknown_key": 1}')

    config = ConfigManager(path).load()

    assert config.color_count == 9
    assert config.target_width == ArtConfig().target_width


def test_corrupt_file_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{oops")

    assert ConfigManager(path).load() == ArtConfig()


def test_save_reports_errors(tmp_path):
    manager = ConfigManager(tmp_path / "missing-dir" / "config.json")

    success, error = manager.save(ArtConfig())

    assert not success
    assert error
