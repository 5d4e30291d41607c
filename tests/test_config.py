# tests/test_config.py
import pytest

from sawview.exceptions import ConfigError
from sawview.utils.config import Config, RenderConfig, ViewerConfig
from sawview.utils.logger import setup_logging

class TestViewerConfig:
    def test_defaults_when_file_missing(self, tmp_path):
        config = ViewerConfig(str(tmp_path / "missing.yaml"))
        assert config.get("node.url") == Config.DEFAULT_NODE_URL
        assert config.get("display.scheme") == "cbor"
        assert config.render_config() == RenderConfig()

    def test_file_overrides_defaults(self, tmp_path):
        path = tmp_path / "sawview.yaml"
        path.write_text("display:\n  full_ids: true\n  scheme: json\nnode:\n  url: http://node:8008\n")
        config = ViewerConfig(str(path))
        assert config.get("node.url") == "http://node:8008"
        assert config.get("node.timeout") == Config.REQUEST_TIMEOUT
        assert config.render_config() == RenderConfig(
            full_identifiers=True,
            include_genesis_or_settings=False,
            payload_scheme="json"
        )

    def test_empty_file(self, tmp_path):
        path = tmp_path / "sawview.yaml"
        path.write_text("")
        assert ViewerConfig(str(path)).get("logging.level") == "WARNING"

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "sawview.yaml"
        path.write_text("- one\n- two\n")
        with pytest.raises(ConfigError, match="mapping"):
            ViewerConfig(str(path))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "sawview.yaml"
        path.write_text("display: [unclosed\n")
        with pytest.raises(ConfigError):
            ViewerConfig(str(path))

    def test_get_missing_key(self, tmp_path):
        config = ViewerConfig(str(tmp_path / "missing.yaml"))
        assert config.get("display.nope", "fallback") == "fallback"
        assert config.get("node.url.deeper") is None

    def test_update(self, tmp_path):
        config = ViewerConfig(str(tmp_path / "missing.yaml"))
        config.update("display.show_genesis", True)
        assert config.render_config().include_genesis_or_settings
        assert not (tmp_path / "missing.yaml").exists()

    def test_timeout_default(self, tmp_path):
        assert ViewerConfig(str(tmp_path / "missing.yaml")).timeout() == 10.0

    def test_null_timeout_falls_back(self, tmp_path):
        path = tmp_path / "sawview.yaml"
        path.write_text("node:\n  timeout: null\n")
        assert ViewerConfig(str(path)).timeout() == float(Config.REQUEST_TIMEOUT)

    def test_timeout_from_file(self, tmp_path):
        path = tmp_path / "sawview.yaml"
        path.write_text("node:\n  timeout: 2.5\n")
        assert ViewerConfig(str(path)).timeout() == 2.5

    @pytest.mark.parametrize("value", ["soon", "true", "-1", "[1]"])
    def test_invalid_timeout(self, tmp_path, value):
        path = tmp_path / "sawview.yaml"
        path.write_text(f"node:\n  timeout: {value}\n")
        with pytest.raises(ConfigError, match="node.timeout"):
            ViewerConfig(str(path)).timeout()

class TestLogging:
    def test_level_by_name(self):
        assert setup_logging("debug").level == 10

    def test_unknown_level_name(self):
        assert setup_logging("chatty").level == 30

    def test_single_handler(self):
        logger = setup_logging("INFO")
        setup_logging("INFO")
        assert len(logger.handlers) == 1
