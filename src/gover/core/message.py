"""Template driven commit message matching.

A commit template is plain text with ``{{.Name}}`` placeholders, e.g.::

    {{.Type}}({{.Scope}}): {{.Message}}

    {{.Description}}

The literal text between two placeholders acts as the separator that ends
the first one. Matching is greedy and separator-delimited: each field ends
at the first occurrence of its separator in the remaining message. It is not
a grammar, so separators are assumed not to occur inside field values.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from gover.exceptions import DuplicateFieldError, MissingRequiredFieldError

PLACEHOLDER_OPEN = "{{."
PLACEHOLDER_CLOSE = "}}"
FIELD_NAME = re.compile(r"\w+", re.ASCII)

Message = dict[str, str]


class SegmentKind(str, Enum):
    LITERAL = "literal"
    PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class Segment:
    """A piece of a template: literal text or a placeholder name."""

    kind: SegmentKind
    text: str

    @property
    def is_placeholder(self) -> bool:
        return self.kind is SegmentKind.PLACEHOLDER


def _is_field_name(name: str) -> bool:
    return FIELD_NAME.fullmatch(name) is not None


def tokenize(text: str) -> Iterator[Segment]:
    """Split template text into literal and placeholder segments.

    Marker-like text that is not a well formed ``{{.Name}}`` placeholder is
    kept as literal text. Adjacent literal pieces are merged.
    """
    literal = ""
    pos = 0
    while True:
        start = text.find(PLACEHOLDER_OPEN, pos)
        if start < 0:
            break
        end = text.find(PLACEHOLDER_CLOSE, start + len(PLACEHOLDER_OPEN))
        if end < 0:
            break
        name = text[start + len(PLACEHOLDER_OPEN) : end]
        if not _is_field_name(name):
            literal += text[pos : start + 1]
            pos = start + 1
            continue
        literal += text[pos:start]
        if literal:
            yield Segment(SegmentKind.LITERAL, literal)
            literal = ""
        yield Segment(SegmentKind.PLACEHOLDER, name)
        pos = end + len(PLACEHOLDER_CLOSE)

    literal += text[pos:]
    if literal:
        yield Segment(SegmentKind.LITERAL, literal)


@dataclass(frozen=True)
class Template:
    """A parsed commit message template."""

    text: str
    segments: tuple[Segment, ...]

    @classmethod
    def parse(cls, text: str) -> Template:
        """Tokenize template text.

        Raises:
            DuplicateFieldError: If a placeholder name occurs twice
        """
        segments = tuple(tokenize(text))
        seen: set[str] = set()
        for segment in segments:
            if not segment.is_placeholder:
                continue
            if segment.text in seen:
                raise DuplicateFieldError(text, segment.text)
            seen.add(segment.text)
        return cls(text=text, segments=segments)

    @property
    def fields(self) -> list[str]:
        """Placeholder names in template order."""
        return [segment.text for segment in self.segments if segment.is_placeholder]

    def separators(self) -> list[tuple[str, str]]:
        """Pair each placeholder with the literal text that follows it.

        The separator is empty when the placeholder ends the template or is
        directly followed by another placeholder.
        """
        pairs: list[tuple[str, str]] = []
        for index, segment in enumerate(self.segments):
            if not segment.is_placeholder:
                continue
            following = self.segments[index + 1] if index + 1 < len(self.segments) else None
            separator = following.text if following and not following.is_placeholder else ""
            pairs.append((segment.text, separator))
        return pairs


def match_message(
    template: Template | str,
    message: str,
    required: Iterable[str] = (),
) -> Message:
    """Extract template fields from a commit message.

    Args:
        template: Commit template, parsed or as text
        message: Raw commit message
        required: Field names that must have a non-empty value

    Returns:
        Mapping of field name to matched text, in template order. Fields
        that the message ends before are absent.

    Raises:
        MissingRequiredFieldError: If a required field is missing or empty
    """
    if isinstance(template, str):
        template = Template.parse(template)

    fields: Message = {}
    cursor = 0
    for name, separator in template.separators():
        remaining = message[cursor:]
        if not remaining:
            break
        if not separator:
            fields[name] = remaining
            break
        end = remaining.find(separator)
        if end < 0:
            fields[name] = remaining
            break
        fields[name] = remaining[:end]
        cursor += end + len(separator)

    required = list(required)
    for name in required:
        if not fields.get(name):
            raise MissingRequiredFieldError(template.text, required, name)

    return fields
