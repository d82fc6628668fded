from __future__ import annotations

"""
movie_record/main.py

CLI `movie-record`: demo e inspección de records.

- --examples: ejecuta la demo sobre un record de ejemplo.
- --json PATH: inspecciona un objeto JSON leído de fichero.
- Sin flags: ejecuta la demo solo si MOVIE_RECORD_SHOW_EXAMPLES=True.

Reglas de consola (alineado con movie_record/logger.py)
------------------------------------------------------
- Resultados: logger.progress(...) (siempre visibles).
- Diagnósticos de record_utils: logger.warning (respetan SILENT_MODE).
- Errores de lectura: logger.error + exit code 1.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Final, Sequence

from movie_record import logger as logger
from movie_record.config import MOVIE_RECORD_SHOW_EXAMPLES
from movie_record.record_utils import (
    count_properties,
    get_title,
    get_year,
    is_classic,
    list_keys,
)

SAMPLE_MOVIE: Final[dict[str, object]] = {
    "id": 1,
    "title": "Toy Story",
    "director": "John Lasseter",
    "year": 1995,
    "genre": "Animation",
    "rating": 8.3,
    "cast": ["Tom Hanks", "Tim Allen", "Don Rickles"],
}

EXIT_OK: Final[int] = 0
EXIT_BAD_INPUT: Final[int] = 1
EXIT_NOTHING_TO_DO: Final[int] = 2


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="movie-record",
        description="Validate and inspect movie records",
    )
    parser.add_argument("--examples", action="store_true", help="Run the sample-record demo")
    parser.add_argument("--json", dest="json_path", metavar="PATH", help="Inspect a JSON object from a file")
    return parser.parse_args(argv)


def print_report(record: object) -> None:
    logger.progress(f"Movie Title: {get_title(record)}")
    logger.progress(f"Movie Year: {get_year(record)}")
    logger.progress(f"Is Classic: {is_classic(record)}")
    logger.progress(f"Movie Keys: {list_keys(record)}")
    logger.progress(f"Properties Count: {count_properties(record)}")


def load_record(path: Path) -> object:
    """Lee JSON de `path`. Puede lanzar OSError / ValueError; el llamante decide."""
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    if args.json_path:
        path = Path(args.json_path)
        try:
            record = load_record(path)
        except (OSError, ValueError) as exc:
            logger.error(f"Could not read JSON record from {path}: {exc}")
            return EXIT_BAD_INPUT
        logger.debug_ctx("CLI", f"loaded {type(record).__name__} from {path}")
        print_report(record)
        return EXIT_OK

    if args.examples or MOVIE_RECORD_SHOW_EXAMPLES:
        print_report(SAMPLE_MOVIE)
        return EXIT_OK

    logger.info("Nothing to do: use --examples or --json PATH.", always=True)
    return EXIT_NOTHING_TO_DO


if __name__ == "__main__":
    sys.exit(main())
