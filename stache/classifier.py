"""Work out what a located tag means: its type, its name and its escaping."""

from __future__ import annotations

from stache.models import TAG_SYMBOLS, RenderOptions, Tag, TagType

_STRIPPED = frozenset("{}") | frozenset(TAG_SYMBOLS)


def tag_interior(tag_text: str, options: RenderOptions) -> str:
    """Text between the opening and closing delimiters."""
    return tag_text[len(options.delim_open):len(tag_text) - len(options.delim_close)]


def tag_name(interior: str) -> str:
    """Drop braces, type symbols and whitespace from a tag's interior."""
    return "".join(ch for ch in interior if ch not in _STRIPPED and not ch.isspace())


def tag_raw_name(interior: str) -> str:
    """Drop only braces and type symbols, keeping the spelling of the name."""
    return "".join(ch for ch in interior if ch not in _STRIPPED)


def tag_type(interior: str) -> TagType:
    for ch in interior:
        found = TAG_SYMBOLS.get(ch)
        if found is not None:
            return found
    return TagType.VARIABLE


def should_escape(tag: Tag) -> bool:
    """True unless the tag is ``{{&name}}`` or a literal ``{{{name}}}``.

    The triple-mustache check is textual, so it ignores custom delimiters.
    """
    if tag.type is TagType.ESCAPED:
        return False
    text = tag.text
    if len(text) >= 6 and text.startswith("{{{") and text.endswith("}}}"):
        return False
    return True


def classify(template: str, start: int, end: int, options: RenderOptions) -> Tag:
    """Build a :class:`Tag` for the span ``template[start:end]``."""
    text = template[start:end]
    interior = tag_interior(text, options)
    return Tag(
        start=start,
        end=end,
        text=text,
        type=tag_type(interior),
        name=tag_name(interior),
        raw_name=tag_raw_name(interior),
    )
