"""Validated access helpers for loosely-typed movie records."""

from movie_record.record_utils import (
    DiagnosticSink,
    MovieRecord,
    RecordOptions,
    collecting_sink,
    count_properties,
    describe_record,
    get_title,
    get_year,
    has_property_of_type,
    is_classic,
    is_valid_record,
    list_keys,
)

__all__ = [
    "DiagnosticSink",
    "MovieRecord",
    "RecordOptions",
    "collecting_sink",
    "count_properties",
    "describe_record",
    "get_title",
    "get_year",
    "has_property_of_type",
    "is_classic",
    "is_valid_record",
    "list_keys",
]
