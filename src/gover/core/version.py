"""Semantic version parsing and the bump state machine.

Versions have the shape ``[v]MAJOR.MINOR.PATCH[-LABEL.BUILD]``, for example
``v1.2.3`` or ``2.0.0-beta.4``. The pre-release part is a label naming the
release train and a positive build counter within that train.

A :class:`Version` is immutable. Every transformation returns a new
instance, so a parsed tag can be reused after computing its successor.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import IntEnum
from types import MappingProxyType

from gover.exceptions import InvalidVersionError

VERSION_PATTERN = re.compile(
    r"(?P<prefix>v)?"
    r"(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)"
    r"(?:-(?P<pre_release>\S+)\.(?P<build>\d+))?",
    re.ASCII,
)
PRE_RELEASE_PATTERN = re.compile(r"\S+", re.ASCII)


class ChangeType(IntEnum):
    """Severity of a change, ordered from least to most significant."""

    NONE = 0
    PATCH = 1
    MINOR = 2
    MAJOR = 3

    def __str__(self) -> str:
        return self.name.lower()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    @classmethod
    def parse(cls, value: str | None) -> ChangeType:
        """Parse a change type name.

        Names are matched case-insensitively and surrounding whitespace is
        ignored. Unknown names map to :attr:`NONE`.
        """
        if not value:
            return cls.NONE
        return CHANGE_TYPE_NAMES.get(value.strip().lower(), cls.NONE)


CHANGE_TYPE_NAMES = MappingProxyType({str(change): change for change in ChangeType})


@dataclass(frozen=True)
class Version:
    """A semantic version with an optional pre-release train.

    Attributes:
        major: Major component
        minor: Minor component
        patch: Patch component
        pre_release: Pre-release label, empty for a final release
        build: Build number within the pre-release train (0 when final)
        prefix: Literal prefix, either "v" or ""
    """

    major: int
    minor: int
    patch: int
    pre_release: str = ""
    build: int = 0
    prefix: str = ""

    def __post_init__(self) -> None:
        if min(self.major, self.minor, self.patch) < 0:
            raise InvalidVersionError(self.format(), "components must be non-negative")
        if self.pre_release and PRE_RELEASE_PATTERN.fullmatch(self.pre_release) is None:
            raise InvalidVersionError(self.format(), "pre-release label contains whitespace")
        if self.pre_release and self.build < 1:
            raise InvalidVersionError(self.format(), "pre-release build must be positive")
        if not self.pre_release and self.build != 0:
            raise InvalidVersionError(self.format(), "build requires a pre-release label")

    @classmethod
    def parse(cls, value: str) -> Version:
        """Parse a version string.

        Args:
            value: Version string such as ``v1.2.3`` or ``1.0.0-rc.2``

        Returns:
            Parsed version

        Raises:
            InvalidVersionError: If the string is not a valid version
        """
        match = VERSION_PATTERN.fullmatch(value)
        if match is None:
            raise InvalidVersionError(value)

        pre_release = match.group("pre_release") or ""
        build = int(match.group("build")) if pre_release else 0
        if pre_release and build < 1:
            raise InvalidVersionError(value, "pre-release build must be positive")

        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            pre_release=pre_release,
            build=build,
            prefix=match.group("prefix") or "",
        )

    def format(self) -> str:
        """Format the version back into its string form."""
        text = f"{self.prefix}{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            return f"{text}-{self.pre_release}.{self.build}"
        return text

    def __str__(self) -> str:
        return self.format()

    @property
    def is_pre_release(self) -> bool:
        return bool(self.pre_release)

    def is_greater(self, other: Version) -> bool:
        """Check whether this version is greater than another.

        Builds are only compared when both versions belong to the same
        pre-release train. Versions on different trains with equal numeric
        components are never greater than each other.
        """
        if self.major != other.major:
            return self.major > other.major
        if self.minor != other.minor:
            return self.minor > other.minor
        if self.patch != other.patch:
            return self.patch > other.patch
        if self.pre_release == other.pre_release:
            return self.build > other.build
        return False

    def latest_change_type(self) -> ChangeType:
        """Return the change type that produced this version.

        The lowest non-zero component tells which bump was applied last:
        ``1.2.3`` came from a patch, ``1.3.0`` from a minor bump.
        """
        if self.patch != 0:
            return ChangeType.PATCH
        if self.minor != 0:
            return ChangeType.MINOR
        if self.major != 0:
            return ChangeType.MAJOR
        return ChangeType.NONE

    def next(self, change: ChangeType, pre_release: str = "") -> Version:
        """Compute the version following this one.

        Args:
            change: Most significant change since this version
            pre_release: Pre-release label for the new version, empty for a
                final release

        Returns:
            The next version
        """
        if pre_release:
            return self.bump_pre_release(change, pre_release)
        return self.bump(change)

    def bump(self, change: ChangeType) -> Version:
        """Bump to a final release for the given change type.

        A pre-release whose train already covers ``change`` is promoted by
        dropping its suffix. A more significant change first reverts the
        provisional bump that opened the train.
        """
        version = self
        if version.is_pre_release:
            if change <= version.latest_change_type():
                return replace(version, pre_release="", build=0)
            version = version.revert()

        if change == ChangeType.MAJOR:
            return version.bump_major()
        if change == ChangeType.MINOR:
            return version.bump_minor()
        if change == ChangeType.PATCH:
            return version.bump_patch()
        return version

    def bump_pre_release(self, change: ChangeType, label: str) -> Version:
        """Bump within, or start, the pre-release train ``label``."""
        if self.pre_release == label and change <= self.latest_change_type():
            return replace(self, build=self.build + 1)

        bumped = self.bump(change)
        return replace(bumped, pre_release=label, build=1)

    def revert(self) -> Version:
        """Undo the bump reported by :meth:`latest_change_type`.

        Components never drop below zero.
        """
        latest = self.latest_change_type()
        if latest == ChangeType.MAJOR:
            return replace(self, major=max(0, self.major - 1))
        if latest == ChangeType.MINOR:
            return replace(self, minor=max(0, self.minor - 1))
        if latest == ChangeType.PATCH:
            return replace(self, patch=max(0, self.patch - 1))
        return self

    def bump_major(self) -> Version:
        return replace(self.bump_minor(), major=self.major + 1, minor=0, patch=0)

    def bump_minor(self) -> Version:
        return replace(self.bump_patch(), minor=self.minor + 1, patch=0)

    def bump_patch(self) -> Version:
        return replace(self, patch=self.patch + 1, pre_release="", build=0)


def parse_version(value: str) -> Version:
    """Parse a version string. See :meth:`Version.parse`."""
    return Version.parse(value)
