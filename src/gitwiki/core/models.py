"""Data models for GitWiki."""

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, PrivateAttr

from gitwiki.core.parser import parse_wiki_content
from gitwiki.core.repository import Blob

if TYPE_CHECKING:
    from gitwiki.core.store import PageStore

logger = logging.getLogger(__name__)


class Page(BaseModel):
    """Represents a wiki page backed by a single repository file."""

    blob: Blob
    _store: "PageStore" = PrivateAttr()

    def __init__(self, store: "PageStore", **data):
        super().__init__(**data)
        self._store = store

    def __str__(self) -> str:
        return self.name

    @property
    def name(self) -> str:
        """File name with the configured extension stripped once."""
        return self.blob.name.removesuffix(self._store.extension)

    @property
    def content(self) -> str:
        return self.blob.data

    @property
    def is_new(self) -> bool:
        """True until the page has been committed for the first time."""
        return self.blob.id is None

    @property
    def file_name(self) -> str:
        return self.name + self._store.extension

    def to_html(self) -> str:
        """Render content to HTML with bicapitalized words linked."""
        return parse_wiki_content(self.content, classify=self._store.classify)

    def update_content(self, new_content: str) -> None:
        """Write, stage and commit new content.

        Does nothing when the content is unchanged, so saving an
        untouched page never produces an empty commit.
        """
        if new_content == self.content:
            logger.debug("Content of %s unchanged, skipping commit", self.name)
            return
        self.blob = self._store.save(self, new_content)
