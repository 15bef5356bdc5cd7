"""Read context values for the CLI from JSON or YAML files."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


def parse_context(text: str, *, is_json: bool = False) -> Any:
    """Parse context text. YAML is the default since it also accepts JSON."""
    if is_json:
        return json.loads(text)
    return yaml.safe_load(text)


def load_context(path: str) -> Any:
    """Load a context value from ``path``; ``-`` reads stdin."""
    if path == "-":
        return parse_context(sys.stdin.read())
    p = Path(path)
    logger.debug("Loading context from %s", p)
    return parse_context(p.read_text(), is_json=p.suffix.lower() == ".json")
