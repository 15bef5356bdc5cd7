"""Fatal render errors."""

from __future__ import annotations


class RenderError(Exception):
    """Base class for conditions that abort a render call."""

    kind = "render_error"

    def __init__(self, message: str, tag: str = ""):
        super().__init__(message)
        self.tag = tag


class UnterminatedSectionError(RenderError):
    kind = "unterminated_section"

    def __init__(self, closing_tag: str):
        super().__init__(f"Could not find closing tag {closing_tag!r}", tag=closing_tag)


class UnrecognizedTagError(RenderError):
    kind = "unrecognized_tag"

    def __init__(self, tag: str):
        super().__init__(f"Unknown tag: {tag!r}", tag=tag)


class SectionDepthError(RenderError):
    kind = "section_too_deep"

    def __init__(self, tag: str, max_depth: int):
        if tag:
            message = f"Section {tag!r} exceeds the maximum nesting depth of {max_depth}"
        else:
            # interpreter stack ran out before max_depth was reached
            message = (
                "Sections nest deeper than the interpreter stack allows "
                f"(max_depth={max_depth})"
            )
        super().__init__(message, tag=tag)
        self.max_depth = max_depth
