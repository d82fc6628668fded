from __future__ import annotations

"""
movie_record/record_utils.py

Acceso validado a un "movie record": un mapping str -> valor heterogéneo
(título, año, reparto, rating...). No hay esquema fijo; cada accessor comprueba
por su cuenta presencia y tipo antes de devolver nada.

Contrato
--------
- Nunca lanza por input malo. Devuelve un centinela ("" / 0 / False / [])
  y escribe UNA línea de diagnóstico en el sink.
- No muta el record ni guarda estado: misma entrada, mismo resultado.
- El sink es inyectable (callable que recibe un str). Por defecto va a
  movie_record.logger.warning, así que SILENT_MODE lo silencia.

Política de presencia
---------------------
Por defecto la presencia es explícita (`key in record`): un título "" o un año 0
existen. Con MOVIE_RECORD_FALSY_AS_MISSING=True (o RecordOptions(falsy_as_missing=True))
se recupera la política heredada: valores falsy cuentan como ausentes.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Callable, Final, TypeAlias, TypeGuard

from movie_record import config as _config
from movie_record import logger as _logger

# ============================================================================
# Tipos públicos
# ============================================================================

MovieRecord: TypeAlias = Mapping[str, object]
DiagnosticSink: TypeAlias = Callable[[str], None]
Year: TypeAlias = int | float

TITLE_FIELD: Final[str] = "title"
YEAR_FIELD: Final[str] = "year"


@dataclass(frozen=True, slots=True)
class RecordOptions:
    classic_year_cutoff: int = 2000
    falsy_as_missing: bool = False


def default_options() -> RecordOptions:
    """Opciones derivadas de config, leídas en cada llamada."""
    return RecordOptions(
        classic_year_cutoff=_config.MOVIE_RECORD_CLASSIC_YEAR_CUTOFF,
        falsy_as_missing=_config.MOVIE_RECORD_FALSY_AS_MISSING,
    )


def _emit(sink: DiagnosticSink | None, message: str) -> None:
    target = sink if sink is not None else _logger.warning
    try:
        target(message)
    except Exception as exc:
        _logger.debug_ctx("RECORD", f"diagnostic sink failed: {exc!r}")


def collecting_sink(logs: list[str]) -> DiagnosticSink:
    """Sink que acumula los diagnósticos en `logs` (acotado por logger.logs_limit())."""

    def _sink(message: str) -> None:
        _logger.append_bounded_log(logs, message)

    return _sink


# ============================================================================
# Clasificación de tipos
# ============================================================================


def _is_number(value: object) -> bool:
    # bool es subclase de int: no es un número a estos efectos
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_object(value: object) -> bool:
    return value is None or isinstance(value, (Mapping, list, tuple, set, frozenset))


_TYPE_CHECKS: Final[dict[str, Callable[[object], bool]]] = {
    "string": lambda v: isinstance(v, str),
    "str": lambda v: isinstance(v, str),
    "number": _is_number,
    "int": lambda v: isinstance(v, int) and not isinstance(v, bool),
    "float": lambda v: isinstance(v, float),
    "boolean": lambda v: isinstance(v, bool),
    "bool": lambda v: isinstance(v, bool),
    "object": _is_object,
    "array": lambda v: isinstance(v, (list, tuple)),
    "list": lambda v: isinstance(v, (list, tuple)),
    "function": callable,
}


# ============================================================================
# Operaciones
# ============================================================================


def is_valid_record(value: object) -> TypeGuard[MovieRecord]:
    """True si `value` es un mapping (no None, no primitivo, no secuencia)."""
    return value is not None and isinstance(value, Mapping)


def has_property_of_type(
    record: object,
    property_name: str,
    expected_type_name: str,
    *,
    sink: DiagnosticSink | None = None,
) -> bool:
    """
    True si el record contiene directamente `property_name` y su valor es del tipo
    `expected_type_name` ("string", "number", "boolean", "object", "array",
    "function" o los alias Python "str", "int", "float", "bool", "list").

    Un record inválido o una clave ausente devuelven False sin diagnóstico;
    un nombre de tipo desconocido devuelve False con diagnóstico.
    """
    type_key = str(expected_type_name or "").strip().lower()
    check = _TYPE_CHECKS.get(type_key)
    if check is None:
        _emit(sink, f"has_property_of_type: Unknown type name {expected_type_name!r}.")
        return False

    if not is_valid_record(record) or not isinstance(property_name, str):
        return False

    if property_name not in record:
        return False
    return bool(check(record[property_name]))


def _lookup(record: object, field: str, options: RecordOptions) -> tuple[bool, object]:
    """(presente, valor) aplicando la política de presencia."""
    if not is_valid_record(record):
        return False, None
    if field not in record:
        return False, None
    value = record[field]
    if value is None:
        return False, None
    if options.falsy_as_missing and not value:
        return False, None
    return True, value


def _usable_year(value: object) -> bool:
    # int arbitrariamente grande no cabe en float: solo los float pueden ser inf/nan
    if isinstance(value, float):
        return math.isfinite(value)
    return _is_number(value)


def get_title(
    record: object,
    *,
    sink: DiagnosticSink | None = None,
    options: RecordOptions | None = None,
) -> str:
    opts = options or default_options()
    present, value = _lookup(record, TITLE_FIELD, opts)
    if present and isinstance(value, str):
        return value
    _emit(sink, "get_title: Invalid movie record or title missing.")
    return ""


def get_year(
    record: object,
    *,
    sink: DiagnosticSink | None = None,
    options: RecordOptions | None = None,
) -> Year:
    opts = options or default_options()
    present, value = _lookup(record, YEAR_FIELD, opts)
    if present and _usable_year(value):
        return value  # type: ignore[return-value]
    _emit(sink, "get_year: Invalid movie record or year missing.")
    return 0


def is_classic(
    record: object,
    *,
    sink: DiagnosticSink | None = None,
    options: RecordOptions | None = None,
) -> bool:
    """
    True si el año es estrictamente menor que `classic_year_cutoff` (2000 por defecto).

    Años no numéricos ("1995", True, NaN) se rechazan; no hay coerción implícita.
    """
    opts = options or default_options()
    present, value = _lookup(record, YEAR_FIELD, opts)
    if not present:
        _emit(sink, "is_classic: Movie record invalid or missing year.")
        return False
    if not _usable_year(value):
        _emit(sink, f"is_classic: year is not a number: {value!r}.")
        return False
    return value < opts.classic_year_cutoff  # type: ignore[operator]


def list_keys(record: object, *, sink: DiagnosticSink | None = None) -> list[str]:
    """Claves propias en orden de inserción."""
    if not is_valid_record(record):
        _emit(sink, "list_keys: Provided input is not a valid record.")
        return []
    return [str(k) for k in record]


def count_properties(record: object, *, sink: DiagnosticSink | None = None) -> int:
    if not is_valid_record(record):
        _emit(sink, "count_properties: Provided input is not a valid record.")
        return 0
    return len(record)


def describe_record(
    record: object,
    *,
    sink: DiagnosticSink | None = None,
    options: RecordOptions | None = None,
) -> str:
    """Resumen de una línea: "<title> (<year>) [classic] keys=<n>"."""
    opts = options or default_options()
    title = get_title(record, sink=sink, options=opts) or "<untitled>"
    year = get_year(record, sink=sink, options=opts)
    present, value = _lookup(record, YEAR_FIELD, opts)
    has_year = present and _usable_year(value)
    year_part = f" ({year})" if has_year else ""
    classic_part = " [classic]" if has_year and is_classic(record, sink=sink, options=opts) else ""
    return f"{title}{year_part}{classic_part} keys={count_properties(record, sink=sink)}"
