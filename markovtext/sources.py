"""
Text acquisition strategies used by the Markov text builder.

A source is any callable that takes the value handed to the builder (the raw
text itself, or a filename) and returns the raw text to be modeled.
"""
import logging
from pathlib import Path

from . import config

logger = logging.getLogger(__name__)


def read_raw_text(raw_text: str) -> str:
    """The input already is the text."""
    return raw_text


def resolve_resource(filename) -> Path:
    """Resolves a relative filename against the resource directory."""
    path = Path(filename)
    if not path.is_absolute():
        path = config.RESOURCE_DIR / path
    return path


def read_file(filename) -> str:
    """
    Reads a corpus file and joins its lines, each preceded by a single space.
    Errors from opening or decoding the file are not handled here.
    """
    path = resolve_resource(filename)
    logger.info(f"Reading corpus from {path}")
    with open(path, 'r', encoding='utf-8') as f:
        lines = f.read().splitlines()
    return "".join(f" {line}" for line in lines)
