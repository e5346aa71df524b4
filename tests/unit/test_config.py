"""Config tests: environment variables and the log threshold."""

from larklang.config import Config


def test_defaults():
	cfg = Config().load_from_env({})
	assert cfg.enable_debug_logs is False
	assert cfg.trace_parser is False
	assert cfg.log_level == "warning"
	assert not cfg.should_log("debug")
	assert cfg.should_log("error")


def test_debug_flag_enables_debug_logging():
	cfg = Config().load_from_env({"LARK_DEBUG": "yes"})
	assert cfg.enable_debug_logs
	assert cfg.log_level == "debug"
	assert cfg.should_log("debug")


def test_explicit_level_wins():
	cfg = Config().load_from_env({"LARK_DEBUG": "1", "LARK_LOG_LEVEL": "INFO"})
	assert cfg.log_level == "info"
	assert not cfg.should_log("debug")
	assert cfg.should_log("info")


def test_trace_flag():
	cfg = Config().load_from_env({"LARK_TRACE": "true"})
	assert cfg.trace_parser
	assert not cfg.enable_debug_logs
