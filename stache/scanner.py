"""Locate the next complete tag in a slice of the template."""

from __future__ import annotations

from typing import Optional

from stache.models import RenderOptions

_TRIPLE_OPEN = "{{{"
_TRIPLE_CLOSE = "}}}"


def find_next_tag(
    template: str, begin: int, end: int, options: RenderOptions
) -> Optional[tuple[int, int]]:
    """Return the ``(start, stop)`` span of the first tag in ``template[begin:end]``.

    The span includes both delimiters. With the default delimiters a tag
    opened by ``{{{`` must be closed by ``}}}``. Returns ``None`` when no
    opening delimiter is found, or when it has no closing delimiter before
    ``end``.
    """
    start = template.find(options.delim_open, begin, end)
    if start == -1:
        return None

    delim_close = options.delim_close
    if options.is_default_delimiters and template.startswith(_TRIPLE_OPEN, start, end):
        delim_close = _TRIPLE_CLOSE

    close = template.find(delim_close, start + len(options.delim_open), end)
    if close == -1:
        return None
    return start, close + len(delim_close)
