"""Version-control capabilities the page store relies on."""

from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import BaseModel


class Blob(BaseModel):
    """A top-level file entry of the repository tree.

    ``id`` is the object id assigned by the backend; a blob that has never
    been committed has no id.
    """

    name: str
    id: str | None = None
    data: str = ""


class Repository(ABC):
    """Abstract base class for a version-controlled page repository."""

    @property
    @abstractmethod
    def working_dir(self) -> Path:
        """Root directory of the working copy."""
        ...

    @abstractmethod
    def tree_entries(self, suffix: str = "") -> list[Blob]:
        """List the file entries at the top of the current tree.

        Only entries whose name ends with ``suffix`` are read. Returns an
        empty list when nothing has been committed yet.
        """
        ...

    @abstractmethod
    def read_blob(self, path: str) -> Blob | None:
        """Read a top-level file from the current tree.

        Returns None if absent or if ``path`` points into a subdirectory.
        """
        ...

    @abstractmethod
    def write_file(self, path: str, data: str) -> None:
        """Write a file to the working copy."""
        ...

    @abstractmethod
    def stage(self, path: str) -> None:
        """Add a path to the pending commit index."""
        ...

    @abstractmethod
    def commit(self, message: str) -> str:
        """Commit the staged index. Returns the new revision id."""
        ...
