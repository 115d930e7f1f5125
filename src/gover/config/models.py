"""Pydantic models for the gover configuration file.

Example ``gover.yml``::

    templates:
      commit: "{{.Type}}({{.Scope}}): {{.Message}}"
    args:
      - name: Type
        required: true
        options:
          - value: feat
            description: A new feature
            version: minor
          - value: fix
            description: A bug fix
            version: patch
      - name: Scope
      - name: Message
        required: true
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from gover.core.message import Template
from gover.exceptions import DuplicateFieldError

DEFAULT_CONFIG_FILE = "gover.yml"


class Option(BaseModel):
    """A selectable value for a template field.

    ``version`` is the change type a commit carrying this value implies.
    """

    model_config = ConfigDict(extra="forbid")

    value: str = Field(min_length=1)
    description: str = ""
    version: Literal["major", "minor", "patch"] | None = None

    @field_validator("version", mode="before")
    @classmethod
    def _normalize_version(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip().lower()
            return value or None
        return value

    @property
    def field(self) -> str:
        return self.value

    @property
    def doc(self) -> str:
        return self.description


class ArgConfig(BaseModel):
    """A template field the user fills in when composing a commit."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, pattern=r"^\w+$")
    options: list[Option] = Field(default_factory=list)
    required: bool = False
    width: int = Field(default=0, ge=0)


class TemplatesConfig(BaseModel):
    """Commit and changelog templates."""

    model_config = ConfigDict(extra="forbid")

    commit: str = Field(min_length=1)
    changelog: str = ""

    @field_validator("commit")
    @classmethod
    def _check_commit_fields(cls, value: str) -> str:
        try:
            Template.parse(value)
        except DuplicateFieldError as e:
            raise ValueError(f"duplicate template field: {e.field}") from e
        return value


class GoverConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    templates: TemplatesConfig
    args: list[ArgConfig] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_arg_names(self) -> GoverConfig:
        names = [arg.name for arg in self.args]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate args: {', '.join(duplicates)}")
        return self

    @property
    def required_args(self) -> list[str]:
        """Names of args that every commit message must fill."""
        return [arg.name for arg in self.args if arg.required]

    @property
    def commit_template(self) -> Template:
        return Template.parse(self.templates.commit)
