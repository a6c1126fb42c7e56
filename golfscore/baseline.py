"""Baseline table loading.

Two tables back the strokes gained calculator: expected putts by distance
in feet, and expected strokes by distance in yards with one column per lie.
Both are CSV files with a header row, then ``distance,value...`` rows.
Columns are matched by position, not by header name.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

import polars as pl

from .config import get_baseline_files
from .constants import LONG_GAME_LIES, PUTTING
from .models import LongGameBaseline, PuttingBaseline
from .utils import data_path, read_text
from .validators import validate_baseline_table

logger = logging.getLogger('golfscore.baseline')


@dataclass(frozen=True)
class BaselineTables:
    """Immutable putting and long-game baselines, built once and shared."""
    putting: Tuple[PuttingBaseline, ...]
    long_game: Tuple[LongGameBaseline, ...]

    def distance_range(self, drill_type: str) -> Optional[Tuple[float, float]]:
        """(min, max) distance covered by the table for a drill type."""
        rows = self.putting if drill_type == PUTTING else self.long_game
        if not rows:
            return None
        distances = [row.distance for row in rows]
        return min(distances), max(distances)


def _read_frame(text: str) -> pl.DataFrame:
    """Read CSV text with every column as a string."""
    if not text.strip():
        return pl.DataFrame()
    return pl.read_csv(
        text.encode('utf-8'),
        has_header=True,
        infer_schema_length=0,
        truncate_ragged_lines=True,
    )


def _numeric(column: str) -> pl.Expr:
    # Blank, non-numeric and NaN cells all become null
    return (
        pl.col(column)
        .str.strip_chars()
        .cast(pl.Float64, strict=False)
        .fill_nan(None)
        .alias(column)
    )


def _log_dropped(raw: pl.DataFrame, mask: pl.Series, table_name: str) -> None:
    for row in raw.filter(mask).iter_rows():
        cells = ','.join('' if cell is None else cell for cell in row)
        logger.warning(f'Dropping malformed {table_name} baseline row: {cells}')


def parse_putting_baseline(text: str) -> Tuple[PuttingBaseline, ...]:
    """
    Parse putting baseline CSV text.

    Expected columns: distance (feet), expected putts. Rows where either
    field is not a number are dropped.

    Args:
        text: CSV content including the header row

    Returns:
        Tuple of PuttingBaseline rows in file order
    """
    raw = _read_frame(text)
    if raw.width < 2 or raw.height == 0:
        return ()

    distance_col, expected_col = raw.columns[:2]
    parsed = raw.select(_numeric(distance_col), _numeric(expected_col))
    mask = parsed[distance_col].is_null() | parsed[expected_col].is_null()
    _log_dropped(raw, mask, 'putting')

    return tuple(
        PuttingBaseline(distance=distance, expected_strokes=expected)
        for distance, expected in parsed.filter(~mask).iter_rows()
    )


def parse_long_game_baseline(text: str) -> Tuple[LongGameBaseline, ...]:
    """
    Parse long-game baseline CSV text.

    Expected columns: distance (yards), tee, fairway, rough, sand. A row with
    an unparseable distance is dropped. An empty lie cell means there is no
    baseline for that lie at that distance.

    Args:
        text: CSV content including the header row

    Returns:
        Tuple of LongGameBaseline rows in file order
    """
    raw = _read_frame(text)
    if raw.width == 0 or raw.height == 0:
        return ()

    distance_col = raw.columns[0]
    lie_cols = dict(zip(raw.columns[1:], LONG_GAME_LIES))
    parsed = raw.select(
        _numeric(distance_col).alias('distance'),
        *[_numeric(col).alias(lie) for col, lie in lie_cols.items()],
    )
    mask = parsed['distance'].is_null()
    _log_dropped(raw, mask, 'long game')

    return tuple(LongGameBaseline(**row) for row in parsed.filter(~mask).iter_rows(named=True))


def load_putting_baseline(path: Path | str) -> Tuple[PuttingBaseline, ...]:
    """Load the putting baseline from a CSV file."""
    table = parse_putting_baseline(read_text(path))
    for problem in validate_baseline_table([row.distance for row in table], 'putting'):
        logger.warning(problem)
    logger.debug(f'Loaded {len(table)} putting baseline rows from {path}')
    return table


def load_long_game_baseline(path: Path | str) -> Tuple[LongGameBaseline, ...]:
    """Load the long-game baseline from a CSV file."""
    table = parse_long_game_baseline(read_text(path))
    for problem in validate_baseline_table([row.distance for row in table], 'long game'):
        logger.warning(problem)
    logger.debug(f'Loaded {len(table)} long game baseline rows from {path}')
    return table


def load_baseline_tables(
    putting_path: Path | str | None = None,
    long_game_path: Path | str | None = None,
) -> BaselineTables:
    """
    Load both baseline tables.

    Args:
        putting_path: Putting CSV (default: packaged file from config)
        long_game_path: Long-game CSV (default: packaged file from config)

    Returns:
        BaselineTables ready to inject into a StrokesGainedCalculator

    Raises:
        FileNotFoundError: If either file doesn't exist
    """
    if putting_path is None or long_game_path is None:
        putting_file, long_game_file = get_baseline_files()
        putting_path = putting_path or data_path(putting_file)
        long_game_path = long_game_path or data_path(long_game_file)

    return BaselineTables(
        putting=load_putting_baseline(putting_path),
        long_game=load_long_game_baseline(long_game_path),
    )


@lru_cache(maxsize=1)
def get_default_baselines() -> BaselineTables:
    """
    Load the packaged baseline tables once per process.

    Use get_default_baselines.cache_clear() to force a reload.
    """
    return load_baseline_tables()
