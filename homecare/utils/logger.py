# utils/logger.py

import inspect
import logging
import sys

from homecare.config.settings import settings

_DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s%(tag)s] %(message)s"
_DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Drivers that log every heartbeat at DEBUG
_QUIET_LOGGERS = ("pymongo", "multipart")

class TaggedFormatter(logging.Formatter):
	"""Formats records from `logger()` and from third party libraries the same way."""

	def format(self, record: logging.LogRecord) -> str:
		if not hasattr(record, "tag"):
			record.tag = ""
		return super().format(record)

def setup_logging(
	level: int | str | None = None,
	stream=sys.stdout
) -> None:
	"""
	Attaches one StreamHandler with the TaggedFormatter to the root logger.

	Args:
		level: Minimum level to output. Defaults to `settings.log_level` (LOG_LEVEL).
		stream: Where log lines are written.

	Calling it again keeps the existing handler.
	"""
	root_logger = logging.getLogger()
	if root_logger.handlers:
		return

	handler = logging.StreamHandler(stream=stream)
	handler.setFormatter(TaggedFormatter(_DEFAULT_FORMAT, _DEFAULT_DATE_FORMAT))
	root_logger.addHandler(handler)
	root_logger.setLevel(level or settings.log_level.upper())
	for name in _QUIET_LOGGERS:
		logging.getLogger(name).setLevel(logging.WARNING)
	root_logger.info(f"Logging at {logging.getLevelName(root_logger.level)}")

def logger(
	tag: str | None = None,
	*,
	name: str | None = None
) -> logging.LoggerAdapter:
	"""
	Returns a LoggerAdapter that adds `tag` to every record.

	The logger name defaults to the caller's module, so `logger(tag="auth").info("Token issued")`
	from `homecare/core/security.py` prints `[homecare.core.security:auth] Token issued`.
	"""
	if name is None:
		module = inspect.getmodule(inspect.stack()[1][0])
		name = module.__name__ if module else "unknown_module"

	return logging.LoggerAdapter(
		logging.getLogger(name),
		{"tag": f":{tag}" if tag is not None else ""}
	)
