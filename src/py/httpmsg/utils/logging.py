import os
import sys
import time
from contextvars import ContextVar
from enum import Enum
from typing import Any, ClassVar, NamedTuple

from .. import config

ERR = sys.stderr

# SEE: https://no-color.org/
NO_COLOR: bool = "NO_COLOR" in os.environ
FORCE_COLOR: bool = "FORCE_COLOR" in os.environ
COLOR: bool = FORCE_COLOR or NO_COLOR is False

LogOrigin: ContextVar[str] = ContextVar("LogOrigin", default="httpmsg")


class Term:
	BOLD: ClassVar[str] = "" if NO_COLOR else "\033[1m"
	RESET: ClassVar[str] = "" if NO_COLOR else "\033[0m"

	@staticmethod
	def Color(color: int) -> str:
		return f"\033[0;38;5;{color}m" if COLOR else ""


class LogLevel(Enum):
	Debug = 0
	Info = 10
	Warning = 30
	Error = 40


LOG_LEVEL_COLOR = {
	LogLevel.Debug: 31,
	LogLevel.Info: 75,
	LogLevel.Warning: 202,
	LogLevel.Error: 160,
}

LOG_LEVEL_NAMES: dict[str, LogLevel] = {
	"debug": LogLevel.Debug,
	"info": LogLevel.Info,
	"warning": LogLevel.Warning,
	"error": LogLevel.Error,
}


class LogEntry(NamedTuple):
	origin: str
	time: float
	level: LogLevel = LogLevel.Info
	message: str | None = None
	value: Any = None
	context: dict[str, Any] | None = None


def formatData(value: Any) -> str:
	if value is None or value == () or value == [] or value == {}:
		return "◌"
	elif isinstance(value, dict):
		return " ".join(
			f"{Term.BOLD}{k}{Term.RESET}={formatData(v)}" for k, v in value.items()
		)
	elif isinstance(value, list) or isinstance(value, tuple):
		return ",".join(formatData(v) for v in value)
	elif isinstance(value, str):
		return repr(value) if " " in value else value
	elif isinstance(value, bool):
		return "✓" if value else "✗"
	elif isinstance(value, float):
		return f"{value:0.2f}"
	else:
		return str(value)


def logged(level: LogLevel) -> bool:
	"""Tells if entries of the given level are currently output. This is used
	to guard against building entries when not necessary."""
	threshold = LOG_LEVEL_NAMES.get(config.LOG_LEVEL, LogLevel.Info)
	return level.value >= threshold.value


def send(entry: LogEntry) -> LogEntry:
	if not logged(entry.level):
		return entry
	clr: str = Term.Color(LOG_LEVEL_COLOR[entry.level])
	code: str = f" [{entry.value}]" if entry.value is not None else ""
	ERR.write(
		f"{clr}{Term.BOLD}[{entry.origin}]{Term.RESET}{code} {entry.message} {formatData(entry.context)}{Term.RESET}\n"
	)
	ERR.flush()
	return entry


def entry(
	*,
	level: LogLevel,
	message: str,
	context: dict[str, Any],
	value: Any = None,
	origin: str | None = None,
) -> LogEntry:
	return LogEntry(
		origin=origin or LogOrigin.get(),
		time=time.time(),
		level=level,
		message=message,
		value=value,
		context=context,
	)


def debug(message: str, *, origin: str | None = None, **context: Any) -> LogEntry:
	return send(
		entry(level=LogLevel.Debug, message=message, origin=origin, context=context)
	)


def info(message: str, *, origin: str | None = None, **context: Any) -> LogEntry:
	return send(
		entry(level=LogLevel.Info, message=message, origin=origin, context=context)
	)


def warning(message: str, *, origin: str | None = None, **context: Any) -> LogEntry:
	return send(
		entry(level=LogLevel.Warning, message=message, origin=origin, context=context)
	)


def error(
	message: str,
	code: int | str | None,
	*,
	origin: str | None = None,
	**context: Any,
) -> LogEntry:
	return send(
		entry(
			level=LogLevel.Error,
			message=message,
			value=code,
			origin=origin,
			context=context,
		)
	)


def exception(exception: BaseException, message: str | None = None) -> BaseException:
	"""Outputs the given exception along with its traceback, returning it so
	that it can be re-raised."""
	if not logged(LogLevel.Error):
		return exception
	try:
		label: str = f"[{exception.__class__.__name__}] {exception}"
		ERR.write(f"!!! EXCP {f'{message}: {label}' if message else label}\n")
		tb = exception.__traceback__
		while tb:
			code = tb.tb_frame.f_code
			ERR.write(
				f"... in {code.co_name:15s} at {tb.tb_lineno:4d} in {code.co_filename}\n"
			)
			tb = tb.tb_next
		ERR.flush()
	except Exception:  # nosec: B110
		# Logging an exception must never raise, as it is called from handlers
		pass
	return exception


# EOF
