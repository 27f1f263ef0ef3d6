"""Page store: name lookups and commits against a page repository."""

import logging
import threading

from gitwiki.config import Settings
from gitwiki.core.exceptions import PageNotFound
from gitwiki.core.models import Page
from gitwiki.core.parser import LinkStatus
from gitwiki.core.repository import Blob, Repository

logger = logging.getLogger(__name__)


class PageStore:
    """Resolves page names against the repository's current tree.

    Every lookup re-reads the tree, so callers always see the latest
    commit. Writes are serialized by a lock around write, stage and
    commit; reads never take it.
    """

    def __init__(self, repository: Repository, config: Settings):
        self.repository = repository
        self.config = config
        self._write_lock = threading.Lock()

    @property
    def extension(self) -> str:
        return self.config.extension

    def _file_name(self, name: str) -> str:
        """Convert page name to filename."""
        return name + self.extension

    def find_all(self) -> list[Page]:
        """One page per file in the current tree, in backend order."""
        return [
            Page(self, blob=blob)
            for blob in self.repository.tree_entries(suffix=self.extension)
        ]

    def find(self, name: str) -> Page:
        """Get a page by name. Raises PageNotFound if it has no file."""
        blob = self.repository.read_blob(self._file_name(name))
        if blob is None:
            logger.debug("Page %s not found", name)
            raise PageNotFound(name)
        return Page(self, blob=blob)

    def find_or_create(self, name: str) -> Page:
        """Get a page, or an unsaved empty page if none exists yet."""
        try:
            return self.find(name)
        except PageNotFound:
            return Page(self, blob=Blob(name=self._file_name(name)))

    def exists(self, name: str) -> bool:
        """Check if a page exists."""
        return self.repository.read_blob(self._file_name(name)) is not None

    def classify(self, name: str) -> LinkStatus:
        """Link status for a referenced page name."""
        return LinkStatus.EXISTS if self.exists(name) else LinkStatus.UNKNOWN

    def save(self, page: Page, content: str) -> Blob:
        """Write, stage and commit page content as one locked step.

        The page is re-read under the lock, so content another writer has
        already committed is not committed again and the message follows
        the latest state. Returns the current blob. Repository errors
        propagate.
        """
        path = page.file_name
        with self._write_lock:
            current = self.repository.read_blob(path)
            if current is not None and current.data == content:
                logger.debug("Content of %s already committed", page.name)
                return current
            verb = "Created" if current is None else "Updated"
            self.repository.write_file(path, content)
            self.repository.stage(path)
            self.repository.commit(f"{verb} {page.name}")
            blob = self.repository.read_blob(path)
        return blob or Blob(name=path, data=content)
