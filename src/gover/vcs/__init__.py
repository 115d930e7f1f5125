"""Version control access for gover."""

from __future__ import annotations

from gover.vcs.git import Commit, GitRepository, TagRef

__all__ = ["Commit", "GitRepository", "TagRef"]
