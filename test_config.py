import logging

from xyzmonitor.config import Settings, calculate_max_chars, load_config
from xyzmonitor.logging_config import setup_logging


def test_calculate_max_chars():
	assert calculate_max_chars(500) == 500 * 1024 * 1024 // 8
	assert calculate_max_chars(0) == 10000
	assert calculate_max_chars(10 ** 6) == 100000000


def test_defaults_when_missing(tmp_path):
	settings = load_config(str(tmp_path / "config.ini"))
	assert settings == Settings()
	assert settings.char_limit == calculate_max_chars(500)
	assert settings.level == logging.INFO


def test_load_config(tmp_path):
	path = tmp_path / "config.ini"
	path.write_text(
		"hotkey=CTRL+SHIFT+V\n"
		"log_level=debug\n"
		"log_to_console=false\n"
		"log_file=logs/xyz_monitor.log\n"
		"# Memory limit in MB\n"
		"max_memory_mb=100\n"
		"max_clipboard_chars=0\n"
	)
	settings = load_config(str(path))
	assert settings.max_memory_mb == 100
	assert settings.log_to_console is False
	assert settings.log_file == "logs/xyz_monitor.log"
	assert settings.level == logging.DEBUG
	assert settings.char_limit == calculate_max_chars(100)


def test_explicit_char_limit(tmp_path):
	path = tmp_path / "config.ini"
	path.write_text("max_clipboard_chars=1234\n")
	assert load_config(str(path)).char_limit == 1234


def test_small_memory_is_raised(tmp_path, caplog):
	path = tmp_path / "config.ini"
	path.write_text("max_memory_mb=10\n")
	with caplog.at_level(logging.WARNING, logger="xyzmonitor"):
		settings = load_config(str(path))
	assert settings.max_memory_mb == 50
	assert "too small" in caplog.text


def test_bad_value_keeps_default(tmp_path, caplog):
	path = tmp_path / "config.ini"
	path.write_text("max_memory_mb=lots\nlog_level=WARN\n")
	with caplog.at_level(logging.ERROR, logger="xyzmonitor"):
		settings = load_config(str(path))
	assert settings.max_memory_mb == 500
	assert settings.level == logging.WARNING
	assert "max_memory_mb" in caplog.text


def test_unknown_log_level():
	assert Settings(log_level="chatty").level == logging.INFO


def test_setup_logging_file(tmp_path):
	log_file = tmp_path / "logs" / "xyz_monitor.log"
	logger = setup_logging(logging.INFO, str(log_file), console=False)
	logging.getLogger("xyzmonitor.parser").info("hello from the parser")
	for handler in logger.handlers:
		handler.flush()
	assert "[INFO] hello from the parser" in log_file.read_text()
	setup_logging(logging.WARNING, console=False)
	assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)
