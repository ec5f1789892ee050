"""Resource kinds a URL can be classified into.

A `Resource` is one of three frozen models, told apart by `kind`. The kind is
decided once by the classifier and never re-derived; none of them knows where
it will be stored locally.
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Archive(BaseModel):
    """Compressed tarball fetched over HTTP(S) and unpacked in place."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["archive"] = "archive"
    url: str


class GitRepository(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["git"] = "git"
    url: str
    branch: Optional[str] = None

    def with_branch(self, branch: Optional[str]) -> "GitRepository":
        """Return a copy that clones `branch` instead of the remote default."""
        return self.model_copy(update={"branch": branch})


class SubversionRepository(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["svn"] = "svn"
    url: str


Resource = Annotated[
    Union[Archive, GitRepository, SubversionRepository],
    Field(discriminator="kind"),
]

__all__ = ["Archive", "GitRepository", "SubversionRepository", "Resource"]
