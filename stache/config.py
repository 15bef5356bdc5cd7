"""Render options: defaults and YAML loader."""

from __future__ import annotations

import os
from dataclasses import fields, replace
from typing import Optional

import yaml

from stache.models import RenderOptions

CONFIG_ENV_VAR = "STACHE_CONFIG"

_OPTION_KEYS = frozenset(f.name for f in fields(RenderOptions))


def default_options() -> RenderOptions:
    return RenderOptions()


def load_options(path: str) -> RenderOptions:
    """Load render options from a YAML file.

    Unknown keys cause a ``ValueError`` so typos are caught early. An empty
    file yields the defaults.
    """
    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return default_options()
    if not isinstance(raw, dict):
        raise ValueError(f"Options YAML must be a mapping, got {type(raw).__name__}")

    unknown = set(raw) - _OPTION_KEYS
    if unknown:
        raise ValueError(
            f"Unknown keys in options: {sorted(unknown)}. "
            f"Allowed: {sorted(_OPTION_KEYS)}"
        )
    return RenderOptions(**raw)


def resolve_options(
    path: Optional[str] = None,
    *,
    delim_open: Optional[str] = None,
    delim_close: Optional[str] = None,
    max_depth: Optional[int] = None,
) -> RenderOptions:
    """Build options: defaults <- YAML (``path`` or ``$STACHE_CONFIG``) <- overrides."""
    path = path or os.environ.get(CONFIG_ENV_VAR)
    options = load_options(path) if path else default_options()

    overrides = {}
    if delim_open is not None:
        overrides["delim_open"] = delim_open
    if delim_close is not None:
        overrides["delim_close"] = delim_close
    if max_depth is not None:
        overrides["max_depth"] = max_depth
    if overrides:
        options = replace(options, **overrides)
    return options
