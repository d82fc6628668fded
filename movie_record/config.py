"""
movie_record/config.py

- Carga .env UNA vez (python-dotenv, sin pisar variables ya definidas)
- Helpers defensivos (_get_env_*, _cap_int)
- Flags globales (DEBUG_MODE/SILENT_MODE/LOG_LEVEL)
- LOGGER_FILE_* (consumidos por movie_record/logger.py vía sys.modules)
- Knobs de record_utils (corte de "clásico", política falsy, demo)

Una env var mal formada nunca rompe: se usa el default y se emite warning always=True.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

load_dotenv(override=False)

from movie_record import logger as _logger  # noqa: E402


# ============================================================
# Helpers: parseo defensivo de env vars
# ============================================================

_TRUE_SET: Final[set[str]] = {"1", "true", "t", "yes", "y", "on"}
_FALSE_SET: Final[set[str]] = {"0", "false", "f", "no", "n", "off"}


def _clean_env_raw(v: object | None) -> str | None:
    if v is None:
        return None
    s = str(v).strip()
    if not s:
        return None
    # Toleramos '"valor"' o "'valor'"
    if len(s) >= 2 and (s[0] == s[-1]) and s[0] in ("'", '"'):
        s = s[1:-1].strip()
    return s or None


def _get_env_str(name: str, default: str | None = None) -> str | None:
    v = _clean_env_raw(os.getenv(name))
    return default if v is None else v


def _get_env_int(name: str, default: int) -> int:
    v = _clean_env_raw(os.getenv(name))
    if v is None:
        return default
    try:
        return int(v)
    except ValueError:
        _logger.warning(f"Invalid int for {name!r}: {v!r}, using default {default}", always=True)
        return default


def _get_env_bool(name: str, default: bool) -> bool:
    v = _clean_env_raw(os.getenv(name))
    if v is None:
        return default
    s = v.lower()
    if s in _TRUE_SET:
        return True
    if s in _FALSE_SET:
        return False
    _logger.warning(f"Invalid bool for {name!r}: {v!r}, using default {default}", always=True)
    return default


def _cap_int(name: str, value: int, *, min_v: int, max_v: int) -> int:
    if value < min_v:
        _logger.warning(f"{name} < {min_v}; forcing to {min_v}", always=True)
        return min_v
    if value > max_v:
        _logger.warning(f"{name} too high; capping to {max_v}", always=True)
        return max_v
    return value


# ============================================================
# MODO DE EJECUCIÓN
# ============================================================

DEBUG_MODE: bool = _get_env_bool("DEBUG_MODE", False)
SILENT_MODE: bool = _get_env_bool("SILENT_MODE", False)
LOG_LEVEL: str | None = _get_env_str("LOG_LEVEL", None)


# ============================================================
# LOGGER (fichero opcional + buffers acotados)
# ============================================================

LOGGER_FILE_ENABLED: bool = _get_env_bool("LOGGER_FILE_ENABLED", False)

_LOGGER_FILE_PATH_RAW: Final[str | None] = _get_env_str("LOGGER_FILE_PATH", None)
LOGGER_FILE_PATH: Path | None = (
    Path(_LOGGER_FILE_PATH_RAW).expanduser() if LOGGER_FILE_ENABLED and _LOGGER_FILE_PATH_RAW else None
)

LOGGER_LOGS_MAX: int = _cap_int(
    "LOGGER_LOGS_MAX",
    _get_env_int("LOGGER_LOGS_MAX", 50),
    min_v=0,
    max_v=10_000,
)
LOGGER_LOG_LINE_MAX_CHARS: int = _cap_int(
    "LOGGER_LOG_LINE_MAX_CHARS",
    _get_env_int("LOGGER_LOG_LINE_MAX_CHARS", 500),
    min_v=40,
    max_v=20_000,
)


# ============================================================
# RECORD UTILS (movie_record/record_utils.py)
# ============================================================

MOVIE_RECORD_CLASSIC_YEAR_CUTOFF: int = _cap_int(
    "MOVIE_RECORD_CLASSIC_YEAR_CUTOFF",
    _get_env_int("MOVIE_RECORD_CLASSIC_YEAR_CUTOFF", 2000),
    min_v=1800,
    max_v=3000,
)

# Política heredada: "" / 0 / False cuentan como ausentes.
MOVIE_RECORD_FALSY_AS_MISSING: bool = _get_env_bool("MOVIE_RECORD_FALSY_AS_MISSING", False)

# Demo del CLI sin argumentos.
MOVIE_RECORD_SHOW_EXAMPLES: bool = _get_env_bool("MOVIE_RECORD_SHOW_EXAMPLES", False)
