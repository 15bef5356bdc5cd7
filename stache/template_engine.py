"""Mustache template engine: substitutes, iterates and conditionally includes
parts of a template against a JSON-like context value.

Context values are the shapes ``json.load`` produces: ``None``, ``bool``,
``int``/``float``, ``str``, lists (or tuples) and mappings. The context is
only ever read.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from stache.classifier import classify, should_escape
from stache.errors import (
    RenderError,
    SectionDepthError,
    UnrecognizedTagError,
    UnterminatedSectionError,
)
from stache.models import RenderOptions, RenderResult, Tag, TagType
from stache.scanner import find_next_tag
from stache.stringify import escape_html, is_array, is_object, stringify

logger = logging.getLogger(__name__)

_SELF_NAMES = ("", ".")


def _lookup(frame: Any, name: str) -> tuple[bool, Any]:
    """Resolve ``name`` in the current frame only; no parent fallback."""
    if is_object(frame) and name in frame:
        return True, frame[name]
    return False, None


def is_truthy(value: Any) -> bool:
    """Lists and mappings are truthy even when empty; only ``True`` otherwise."""
    if is_array(value) or is_object(value):
        return True
    if isinstance(value, bool):
        return value
    return False


class _SectionRenderer:
    """Accumulates output for a single render call."""

    def __init__(self, template: str, options: RenderOptions):
        self.template = template
        self.options = options
        self.parts: list[str] = []

    def render_range(self, begin: int, end: int, element: Any, depth: int) -> None:
        # Arrays render the range once per element, in order.
        frames = element if is_array(element) else (element,)
        for frame in frames:
            self._render_frame(begin, end, frame, depth)

    def _render_frame(self, begin: int, end: int, frame: Any, depth: int) -> None:
        template = self.template
        cursor = begin
        while True:
            span = find_next_tag(template, cursor, end, self.options)
            if span is None:
                break
            self.parts.append(template[cursor:span[0]])
            tag = classify(template, span[0], span[1], self.options)

            if tag.type in (TagType.VARIABLE, TagType.ESCAPED):
                self._substitute(tag, frame)
                cursor = tag.end
            elif tag.type in (TagType.SECTION, TagType.INVERTED_SECTION):
                cursor = self._section(tag, end, frame, depth)
            elif tag.type is TagType.COMMENT:
                self.parts.append(tag.text)
                cursor = tag.end
            else:
                raise UnrecognizedTagError(tag.text)

        self.parts.append(template[cursor:end])

    def _substitute(self, tag: Tag, frame: Any) -> None:
        if tag.name in _SELF_NAMES:
            value = frame
        else:
            found, value = _lookup(frame, tag.name)
            if not found:
                logger.debug("No value for %r, rendering nothing", tag.name)
                return
        text = stringify(value)
        self.parts.append(escape_html(text) if should_escape(tag) else text)

    def _find_closing(self, tag: Tag, end: int) -> tuple[str, int]:
        """Locate the closing tag, first as spelled by the opener, then without whitespace."""
        opts = self.options
        candidates = [f"{opts.delim_open}/{tag.raw_name}{opts.delim_close}"]
        if tag.raw_name != tag.name:
            candidates.append(f"{opts.delim_open}/{tag.name}{opts.delim_close}")
        for closing in candidates:
            close_start = self.template.find(closing, tag.end, end)
            if close_start != -1:
                return closing, close_start
        raise UnterminatedSectionError(candidates[0])

    def _section(self, tag: Tag, end: int, frame: Any, depth: int) -> int:
        """Render a section and return the index just past its closing tag."""
        opts = self.options
        closing, close_start = self._find_closing(tag, end)

        _, value = _lookup(frame, tag.name)
        render_interior = is_truthy(value)
        if tag.type is TagType.INVERTED_SECTION:
            render_interior = not render_interior
        logger.debug(
            "Section %r (%s) at depth %d: %s",
            tag.name, tag.type.value, depth + 1,
            "rendering" if render_interior else "skipped",
        )

        if render_interior:
            if depth + 1 > opts.max_depth:
                raise SectionDepthError(tag.text, opts.max_depth)
            self.render_range(tag.end, close_start, value, depth + 1)
        return close_start + len(closing)


def render(template: str, context: Any, options: Optional[RenderOptions] = None) -> str:
    """Render ``template`` against ``context``.

    Raises a :class:`~stache.errors.RenderError` subclass for an unterminated
    section, an unrecognized tag or sections nested deeper than
    ``options.max_depth``. Nothing is returned in that case.
    """
    options = options or RenderOptions()
    if not template:
        return ""
    renderer = _SectionRenderer(template, options)
    try:
        renderer.render_range(0, len(template), context, 0)
    except RecursionError as exc:
        raise SectionDepthError("", options.max_depth) from exc
    return "".join(renderer.parts)


def try_render(
    template: str, context: Any, options: Optional[RenderOptions] = None
) -> RenderResult:
    """Same as :func:`render` but reports failures in the returned result."""
    try:
        return RenderResult(output=render(template, context, options))
    except RenderError as exc:
        logger.warning("Render failed (%s): %s", exc.kind, exc)
        return RenderResult(error=str(exc), error_kind=exc.kind)


def render_template(
    template_path: str | Path, context: Any, options: Optional[RenderOptions] = None
) -> str:
    """Read a template file and render it."""
    content = Path(template_path).read_text()
    return render(content, context, options)
