import logging

from ditawiki.config import ConfigManager
from ditawiki.logging_config import setup_logging


class TestConfigManager:
    def test_singleton(self):
        assert ConfigManager() is ConfigManager()

    def test_packaged_sections(self):
        config = ConfigManager()
        assert config.get_html_rules()["translate"]["xref"] == "a"
        conversion = config.get_conversion_config()
        assert ".pdf" in conversion["download_extensions"]
        assert conversion["image_url_prefix"] == "/media"
        assert config.get_logging_config()["version"] == 1

    def test_user_override_merges_top_level_keys(self, isolated_config):
        (isolated_config / "conversion.yml").write_text("workers: 4\n", encoding="utf-8")
        ConfigManager.reset()
        conversion = ConfigManager().get_conversion_config()
        assert conversion["workers"] == 4
        assert conversion["image_url_prefix"] == "/media"

    def test_broken_override_is_ignored(self, isolated_config):
        (isolated_config / "conversion.yml").write_text("workers: [\n", encoding="utf-8")
        ConfigManager.reset()
        assert ConfigManager().get_conversion_config()["workers"] == 1


def test_setup_logging_writes_log_file(tmp_path, monkeypatch):
    log_dir = tmp_path / "logs"
    monkeypatch.setenv("DITAWIKI_LOG_DIR", str(log_dir))
    monkeypatch.setenv("DITAWIKI_DEBUG_MODULES", "ditawiki.core.xmlconv")
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    try:
        setup_logging(logging.WARNING)
        logging.getLogger("ditawiki.test").warning("hello")
        for handler in root.handlers:
            handler.flush()
        assert "hello" in (log_dir / "ditawiki.log").read_text(encoding="utf-8")
        assert logging.getLogger("ditawiki.core.xmlconv").level == logging.DEBUG
    finally:
        for handler in root.handlers:
            if handler not in saved[0]:
                handler.close()
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])
        logging.getLogger("ditawiki.core.xmlconv").setLevel(logging.NOTSET)
        for handler in logging.getLogger("ditawiki.core.xmlconv").handlers[:]:
            logging.getLogger("ditawiki.core.xmlconv").removeHandler(handler)
