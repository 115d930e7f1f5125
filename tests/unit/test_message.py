"""Tests for template tokenizing and commit message matching."""

from __future__ import annotations

import pytest

from gover.core.message import Segment, SegmentKind, Template, match_message, tokenize
from gover.exceptions import DuplicateFieldError, MissingRequiredFieldError

TEMPLATE = "{{.Type}}({{.Scope}}): {{.Message}}\n\n{{.Description}}"


class TestTokenize:
    """Tests for tokenize() and Template.parse()."""

    def test_alternating_segments(self):
        """Literal text and placeholders alternate in order."""
        segments = list(tokenize("{{.Type}}: {{.Message}}"))

        assert segments == [
            Segment(SegmentKind.PLACEHOLDER, "Type"),
            Segment(SegmentKind.LITERAL, ": "),
            Segment(SegmentKind.PLACEHOLDER, "Message"),
        ]

    def test_leading_and_trailing_literals(self):
        """Text around the placeholders is kept."""
        template = Template.parse("[{{.Ticket}}] done")

        assert [s.text for s in template.segments] == ["[", "Ticket", "] done"]

    def test_fields(self):
        """Placeholder names are listed in template order."""
        assert Template.parse(TEMPLATE).fields == ["Type", "Scope", "Message", "Description"]

    def test_malformed_markers_are_literal(self):
        """Text that is not a valid placeholder stays literal."""
        template = Template.parse("{{.Not valid}} {{Type}} {{.Ok}}")

        assert template.fields == ["Ok"]
        assert template.segments[0] == Segment(SegmentKind.LITERAL, "{{.Not valid}} {{Type}} ")

    def test_unterminated_marker(self):
        """An unterminated marker is literal text."""
        assert Template.parse("{{.Type").fields == []

    def test_empty_template(self):
        """An empty template has no segments."""
        assert Template.parse("").segments == ()

    def test_separators(self):
        """Each placeholder is paired with the literal that follows it."""
        template = Template.parse("{{.A}}{{.B}}-{{.C}}")

        assert template.separators() == [("A", ""), ("B", "-"), ("C", "")]

    def test_duplicate_placeholder(self):
        """A field name can only appear once."""
        with pytest.raises(DuplicateFieldError) as exc_info:
            Template.parse("{{.A}}-{{.A}}")

        assert exc_info.value.field == "A"
        assert exc_info.value.template == "{{.A}}-{{.A}}"

    def test_duplicate_placeholder_rejected_by_matcher(self):
        with pytest.raises(DuplicateFieldError):
            match_message("{{.Type}}: {{.Type}}", "feat: fix")


class TestMatchMessage:
    """Tests for match_message()."""

    def test_exact_format(self):
        """All fields are extracted from a conforming message."""
        message = match_message(
            TEMPLATE,
            "improvement(semver): commit message\n\ndescription",
            ["Type", "Scope", "Message", "Description"],
        )

        assert message == {
            "Type": "improvement",
            "Scope": "semver",
            "Message": "commit message",
            "Description": "description",
        }

    def test_missing_description(self):
        """A missing trailing section leaves its field out."""
        message = match_message(
            TEMPLATE,
            "improvement(semver): commit message",
            ["Type", "Scope", "Message"],
        )

        assert message == {
            "Type": "improvement",
            "Scope": "semver",
            "Message": "commit message",
        }

    def test_missing_required_field(self):
        """A missing required field raises with diagnostics."""
        required = ["Type", "Scope", "Message", "Description"]

        with pytest.raises(MissingRequiredFieldError) as exc_info:
            match_message(TEMPLATE, "improvement(semver): commit message", required)

        error = exc_info.value
        assert error.field == "Description"
        assert error.template == TEMPLATE
        assert error.required == required
        assert "missing: Description" in str(error)

    def test_empty_required_value(self):
        """An empty value does not satisfy a required field."""
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            match_message(TEMPLATE, "fix(): message", ["Scope"])

        assert exc_info.value.field == "Scope"

    def test_empty_template(self):
        """An empty template matches nothing."""
        assert match_message("", "description") == {}

    def test_empty_message(self):
        """An empty message matches no field."""
        assert match_message(TEMPLATE, "") == {}

    def test_separator_not_found(self):
        """A field whose separator is missing takes the rest of the message."""
        message = match_message(TEMPLATE, "just some text")

        assert message == {"Type": "just some text"}

    def test_first_separator_wins(self):
        """Fields end at the first occurrence of their separator."""
        message = match_message("{{.Type}}: {{.Message}}", "fix: parse a: b pairs")

        assert message == {"Type": "fix", "Message": "parse a: b pairs"}

    def test_adjacent_placeholders(self):
        """A placeholder followed by another consumes the rest."""
        message = match_message("{{.A}}{{.B}}", "everything")

        assert message == {"A": "everything"}

    def test_description_keeps_inner_newlines(self):
        """The last field takes the remaining text verbatim."""
        message = match_message(TEMPLATE, "fix(api): crash\n\nline one\n\nline two")

        assert message["Description"] == "line one\n\nline two"

    def test_parsed_template_accepted(self):
        """A pre-parsed template gives the same result."""
        raw = "feat(core): add\n\nmore"

        assert match_message(Template.parse(TEMPLATE), raw) == match_message(TEMPLATE, raw)

    def test_results_are_independent(self):
        """Each call returns a fresh mapping."""
        first = match_message(TEMPLATE, "feat(a): one")
        second = match_message(TEMPLATE, "fix(b): two")

        first["Type"] = "changed"
        assert second["Type"] == "fix"
