"""Changelog generation from unreleased commits.

The changelog template is a Jinja2 template rendered with:

- ``fields``: matched messages grouped by field name, then by value, e.g.
  ``fields["Type"]["feat"]`` lists every feature commit
- ``messages``: every matched message, newest first
- ``version``: the version being released, when known

Without a changelog template the raw unreleased commit messages are listed
instead.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import jinja2

from gover.core.changes import parse_messages
from gover.core.message import Message
from gover.exceptions import TemplateRenderError

if TYPE_CHECKING:
    from gover.config.models import GoverConfig
    from gover.core.history import HistoryResolver
    from gover.core.version import Version

GroupedMessages = dict[str, dict[str, list[Message]]]

_environment = jinja2.Environment(
    undefined=jinja2.ChainableUndefined,
    autoescape=False,
    keep_trailing_newline=True,
)


def group_messages(messages: Iterable[Message]) -> GroupedMessages:
    """Group matched messages by field name and field value."""
    grouped: GroupedMessages = {}
    for message in messages:
        for field, value in message.items():
            grouped.setdefault(field, {}).setdefault(value, []).append(message)
    return grouped


def render_changelog(
    template_text: str,
    messages: list[Message],
    version: Version | None = None,
) -> str:
    """Render a changelog template.

    Args:
        template_text: Jinja2 changelog template
        messages: Matched commit messages, newest first
        version: Version being released

    Returns:
        Rendered changelog

    Raises:
        TemplateRenderError: If the template cannot be parsed or rendered
    """
    try:
        template = _environment.from_string(template_text)
        return template.render(
            fields=group_messages(messages),
            messages=messages,
            version=str(version) if version is not None else "",
        )
    except jinja2.TemplateError as e:
        raise TemplateRenderError(
            f"couldn't execute changelog template\n{template_text}\n{e}"
        ) from e


def generate_changelog(
    history: HistoryResolver,
    config: GoverConfig,
    version: Version | None = None,
) -> str:
    """Generate the changelog of unreleased commits.

    Commits that do not match the commit template are left out of a
    templated changelog.

    Args:
        history: Release history of the repository
        config: Configuration providing the templates
        version: Version being released

    Returns:
        Changelog content

    Raises:
        TagNotFoundError: If there is no release tag yet
        CommitNotFoundError: If the latest tag is not reachable from HEAD
        TemplateRenderError: If the changelog template fails
    """
    commits = history.commits_since_latest_tag()

    if not config.templates.changelog:
        return generate_fallback_changelog(commits)

    messages = parse_messages(config.commit_template, commits, config.required_args)
    return render_changelog(config.templates.changelog, messages, version)


def generate_fallback_changelog(commits: list[str]) -> str:
    """List raw commit messages, one block per commit."""
    return "\n".join(commits)
