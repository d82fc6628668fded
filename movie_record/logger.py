from __future__ import annotations

"""
movie_record/logger.py

Fachada sobre `logging` para el paquete.

- info / warning / error: respetan SILENT_MODE (salvo always=True); error siempre sale.
- progress: línea por stdout, siempre visible (salida del CLI).
- debug_ctx: trazas con tag, solo con DEBUG_MODE.
- append_bounded_log: acumula diagnósticos en una lista con tope.

Los flags se leen de movie_record.config vía sys.modules, si ya está cargado;
este módulo no lo importa (config lo importa a él). Si LOGGER_FILE_ENABLED y hay
LOGGER_FILE_PATH, logging y progress se duplican a ese fichero.
"""

import logging
import os
import sys
from types import ModuleType
from typing import Final

LOGGER_NAME: Final[str] = "movie_record"

_CONFIG_MODULE: Final[str] = "movie_record.config"
_FILE_HANDLER_TAG: Final[str] = "_movie_record_file_handler"
_LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_LEVELS: Final[dict[str, int]] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_DEFAULT_LOGS_MAX: Final[int] = 50
_DEFAULT_LOG_LINE_MAX_CHARS: Final[int] = 500
_LOGS_TRUNCATED_SENTINEL: Final[str] = "[LOGS_TRUNCATED]"

_LOGGER: logging.Logger | None = None


# ----------------------------------------------------------------------------
# Lectura de config
# ----------------------------------------------------------------------------


def _cfg(name: str, default: object) -> object:
    mod = sys.modules.get(_CONFIG_MODULE)
    if not isinstance(mod, ModuleType):
        return default
    return getattr(mod, name, default)


def is_silent_mode() -> bool:
    return bool(_cfg("SILENT_MODE", False))


def is_debug_mode() -> bool:
    return bool(_cfg("DEBUG_MODE", False))


def _resolve_level_from_config() -> int:
    """LOG_LEVEL explícito > DEBUG_MODE > INFO."""
    raw = _cfg("LOG_LEVEL", None)
    if raw:
        mapped = _LEVELS.get(str(raw).strip().upper())
        if mapped is not None:
            return mapped
    return logging.DEBUG if is_debug_mode() else logging.INFO


def _log_file_path() -> str | None:
    if not _cfg("LOGGER_FILE_ENABLED", False):
        return None
    path = (os.getenv("LOGGER_FILE_PATH") or "").strip() or _cfg("LOGGER_FILE_PATH", None)
    return str(path) if path else None


# ----------------------------------------------------------------------------
# Inicialización
# ----------------------------------------------------------------------------


def _ensure_file_handler(root: logging.Logger, *, level: int) -> None:
    path = _log_file_path()
    if not path:
        return

    ours = [h for h in root.handlers if getattr(h, _FILE_HANDLER_TAG, False)]
    if ours:
        for h in ours:
            h.setLevel(level)
        return

    try:
        dir_name = os.path.dirname(path)
        if dir_name:
            os.makedirs(dir_name, exist_ok=True)
        fh = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    except OSError:
        return
    fh.setLevel(level)
    fh.setFormatter(logging.Formatter(_LOG_FORMAT))
    setattr(fh, _FILE_HANDLER_TAG, True)
    root.addHandler(fh)


def _ensure_configured() -> logging.Logger:
    """Idempotente; reaplica nivel y fichero en cada llamada por si config cambió."""
    global _LOGGER

    level = _resolve_level_from_config()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_LOG_FORMAT)
    else:
        root.setLevel(level)
        for handler in root.handlers:
            handler.setLevel(level)
    _ensure_file_handler(root, level=level)

    if _LOGGER is None:
        _LOGGER = logging.getLogger(LOGGER_NAME)
    return _LOGGER


# ----------------------------------------------------------------------------
# API pública
# ----------------------------------------------------------------------------


def progress(message: str) -> None:
    sys.stdout.write(f"{message}\n")
    sys.stdout.flush()

    path = _log_file_path()
    if not path:
        return
    try:
        with open(path, "a", encoding="utf-8") as f:
            f.write(f"{message}\n")
    except OSError:
        return


def info(msg: str, *, always: bool = False) -> None:
    if always or not is_silent_mode():
        _ensure_configured().info(msg)


def warning(msg: str, *, always: bool = False) -> None:
    if always or not is_silent_mode():
        _ensure_configured().warning(msg)


def error(msg: str) -> None:
    _ensure_configured().error(msg)


def debug_ctx(tag: str, msg: object) -> None:
    """[TAG][DEBUG] msg: por progress en SILENT_MODE, por info si no. No-op sin DEBUG_MODE."""
    if not is_debug_mode():
        return
    line = f"[{(tag or 'DEBUG').strip().upper()}][DEBUG] {msg}"
    if is_silent_mode():
        progress(line)
    else:
        info(line)


# ----------------------------------------------------------------------------
# Buffer acotado
# ----------------------------------------------------------------------------


def logs_limit() -> int:
    return int(_cfg("LOGGER_LOGS_MAX", _DEFAULT_LOGS_MAX))  # type: ignore[call-overload]


def truncate_line(text: str) -> str:
    limit = int(_cfg("LOGGER_LOG_LINE_MAX_CHARS", _DEFAULT_LOG_LINE_MAX_CHARS))  # type: ignore[call-overload]
    if len(text) <= limit:
        return text
    return text[: max(0, limit - 12)] + " …(truncated)"


def append_bounded_log(logs: list[str], line: object) -> None:
    """Añade `line` truncada; al llegar a logs_limit() deja una única marca [LOGS_TRUNCATED]."""
    limit = logs_limit()
    if limit <= 0:
        return
    if len(logs) >= limit:
        if logs[-1] != _LOGS_TRUNCATED_SENTINEL:
            logs.append(_LOGS_TRUNCATED_SENTINEL)
        return
    logs.append(truncate_line(str(line)))
