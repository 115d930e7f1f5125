"""Change classification of commit messages.

Each template field may map some of its values to a change type, e.g. a
``Type`` field where ``feat`` means a minor and ``fix`` a patch change. A
commit is as significant as its most significant field value, and a set of
commits as significant as its most significant commit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from gover.core.message import Message, Template, match_message
from gover.core.version import ChangeType
from gover.exceptions import MissingRequiredFieldError

if TYPE_CHECKING:
    from gover.config.models import ArgConfig

logger = logging.getLogger(__name__)

SeverityTables = Mapping[str, Mapping[str, ChangeType]]


def build_severity_tables(args: Iterable[ArgConfig]) -> dict[str, dict[str, ChangeType]]:
    """Build the field value to change type lookup from configured args.

    Only options with a version contribute. Values without one classify as
    :attr:`ChangeType.NONE` by omission.
    """
    tables: dict[str, dict[str, ChangeType]] = {}
    for arg in args:
        table: dict[str, ChangeType] = {}
        for option in arg.options:
            change = ChangeType.parse(option.version)
            if change != ChangeType.NONE:
                table[option.value] = change
        tables[arg.name] = table
    return tables


def classify_message(tables: SeverityTables, message: Message) -> ChangeType:
    """Return the most significant change type of one matched message."""
    change = ChangeType.NONE
    for field, value in message.items():
        change = max(change, tables.get(field, {}).get(value, ChangeType.NONE))
    return change


def parse_messages(
    template: Template | str,
    messages: Iterable[str],
    required: Iterable[str] = (),
    *,
    strict: bool = False,
) -> list[Message]:
    """Match raw commit messages against the commit template.

    Args:
        template: Commit template
        messages: Raw commit messages
        required: Fields every message must fill
        strict: Raise on the first non-conforming message instead of
            skipping it

    Returns:
        Matched messages, in input order

    Raises:
        MissingRequiredFieldError: In strict mode, for the first message
            missing a required field
    """
    if isinstance(template, str):
        template = Template.parse(template)
    required = list(required)

    parsed: list[Message] = []
    for raw in messages:
        try:
            parsed.append(match_message(template, raw, required))
        except MissingRequiredFieldError:
            if strict:
                raise
            logger.debug("Skipping commit not matching template: %r", raw)
    return parsed


def classify(
    tables: SeverityTables,
    messages: Iterable[str],
    template: Template | str,
    required: Iterable[str] = (),
    *,
    strict: bool = False,
) -> ChangeType:
    """Reduce raw commit messages to their most significant change type.

    Args:
        tables: Field value to change type lookup
        messages: Raw commit messages
        template: Commit template
        required: Fields every message must fill
        strict: Abort on non-conforming messages instead of skipping them

    Returns:
        Aggregate change type, :attr:`ChangeType.NONE` for no messages

    Raises:
        MissingRequiredFieldError: In strict mode, for the first message
            missing a required field
    """
    change = ChangeType.NONE
    for message in parse_messages(template, messages, required, strict=strict):
        change = max(change, classify_message(tables, message))
    return change
