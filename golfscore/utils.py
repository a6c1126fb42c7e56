"""Utility functions for loading packaged reference data."""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('golfscore.utils')

DATA_DIR = Path(__file__).parent / 'data'


def data_path(filename: str) -> Path:
    """Resolve a file name against the packaged data directory."""
    return DATA_DIR / filename


def load_json(
    path: Path | str,
    schema: type[T] | None = None,
) -> Any | T:
    """
    Load JSON file with optional schema validation.

    Args:
        path: Path to JSON file (str or Path object)
        schema: Optional Pydantic model to validate against

    Returns:
        Parsed JSON (validated if schema provided)

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON is malformed
        ValueError: If schema validation fails

    Example:
        from golfscore.schemas import ScoringConfig
        config = load_json(data_path('scoring_config.json'), schema=ScoringConfig)
    """
    path = Path(path)

    logger.debug(f'Loading JSON from: {path}')

    if not path.exists():
        logger.error(f'File not found: {path}')
        raise FileNotFoundError(f'File not found: {path}')

    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f'Invalid JSON in {path}: {e.msg} at position {e.pos}')
        raise json.JSONDecodeError(f'Invalid JSON in {path}: {e.msg}', e.doc, e.pos) from e

    if schema:
        try:
            validated = schema(**data) if isinstance(data, dict) else schema(data)  # type: ignore[call-arg]
            logger.debug(f'Schema validation passed for: {path}')
            return validated
        except ValidationError as e:
            logger.error(f'Schema validation failed for {path}: {e}')
            raise ValueError(f'Schema validation failed for {path}:\n{e}') from e

    return data


def read_text(path: Path | str) -> str:
    """
    Read a text reference file (baseline CSV).

    Raises:
        FileNotFoundError: If file doesn't exist
    """
    path = Path(path)

    if not path.exists():
        logger.error(f'File not found: {path}')
        raise FileNotFoundError(f'File not found: {path}')

    with open(path, encoding='utf-8') as f:
        text = f.read()
    logger.debug(f'Read {len(text)} characters from: {path}')
    return text


def round_half_away(value: float, digits: int = 2) -> float:
    """Round to `digits` decimals with halves rounded away from zero.

    The epsilon absorbs binary representation error, so 2.675 -> 2.68.
    """
    scale = 10 ** digits
    scaled = abs(value) * scale
    rounded = int(scaled + 0.5 + 1e-9) / scale
    return rounded if value >= 0 else -rounded
