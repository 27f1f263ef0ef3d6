"""GitPython implementation of the page repository."""

import logging
from pathlib import Path

from git import Actor, InvalidGitRepositoryError, NoSuchPathError, Repo

from gitwiki.core.exceptions import RepositoryError
from gitwiki.core.repository import Blob, Repository

logger = logging.getLogger(__name__)


class GitRepository(Repository):
    """Pages stored as files at the root of a git working tree.

    Reads come from the tree of HEAD, so uncommitted edits in the working
    copy are invisible to lookups.
    """

    def __init__(
        self,
        path: Path,
        create: bool = False,
        author: Actor | None = None,
    ):
        self.path = Path(path).expanduser()
        self.author = author or Actor("GitWiki", "gitwiki@localhost")
        try:
            self.repo = Repo(self.path)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            if not create:
                raise RepositoryError(
                    f"Not a git repository: {self.path}"
                ) from e
            self.path.mkdir(parents=True, exist_ok=True)
            self.repo = Repo.init(self.path)
            logger.info("Initialized empty wiki repository at %s", self.path)

    @property
    def working_dir(self) -> Path:
        return Path(self.repo.working_tree_dir)

    def _head_tree(self):
        """Tree of the current HEAD commit, or None before the first commit."""
        if not self.repo.head.is_valid():
            return None
        return self.repo.head.commit.tree

    @staticmethod
    def _to_blob(git_blob) -> Blob:
        return Blob(
            name=git_blob.name,
            id=git_blob.hexsha,
            data=git_blob.data_stream.read().decode("utf-8", errors="replace"),
        )

    def tree_entries(self, suffix: str = "") -> list[Blob]:
        tree = self._head_tree()
        if tree is None:
            return []
        return [self._to_blob(b) for b in tree.blobs if b.name.endswith(suffix)]

    def read_blob(self, path: str) -> Blob | None:
        tree = self._head_tree()
        if tree is None or "/" in path:
            return None
        try:
            entry = tree / path
        except KeyError:
            return None
        if entry.type != "blob":
            return None
        return self._to_blob(entry)

    def write_file(self, path: str, data: str) -> None:
        (self.working_dir / path).write_bytes(data.encode("utf-8"))

    def stage(self, path: str) -> None:
        self.repo.index.add([path])

    def commit(self, message: str) -> str:
        commit = self.repo.index.commit(
            message,
            author=self.author,
            committer=self.author,
        )
        logger.info("Committed %s: %s", commit.hexsha[:7], message)
        return commit.hexsha
