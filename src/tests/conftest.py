"""Shared fixtures: an in-memory repository and stores built on it."""

import hashlib
from pathlib import Path

import pytest

from gitwiki.config import Settings
from gitwiki.core.repository import Blob, Repository
from gitwiki.core.store import PageStore


class InMemoryRepository(Repository):
    """Repository fake keeping the working copy, index and HEAD in dicts."""

    def __init__(self, files: dict[str, str] | None = None):
        self.worktree: dict[str, str] = {}
        self.index: dict[str, str] = {}
        self.head: dict[str, str] = {}
        self.commits: list[str] = []
        for name, data in (files or {}).items():
            self.write_file(name, data)
            self.stage(name)
        if files:
            self.commit("Initial commit")
            self.commits.clear()

    @property
    def working_dir(self) -> Path:
        return Path("/memory")

    @staticmethod
    def _blob(name: str, data: str) -> Blob:
        return Blob(name=name, id=hashlib.sha1(data.encode()).hexdigest(), data=data)

    def tree_entries(self, suffix: str = "") -> list[Blob]:
        return [
            self._blob(name, data)
            for name, data in self.head.items()
            if name.endswith(suffix)
        ]

    def read_blob(self, path: str) -> Blob | None:
        if "/" in path or path not in self.head:
            return None
        return self._blob(path, self.head[path])

    def write_file(self, path: str, data: str) -> None:
        self.worktree[path] = data

    def stage(self, path: str) -> None:
        self.index[path] = self.worktree[path]

    def commit(self, message: str) -> str:
        self.head = dict(self.index)
        self.commits.append(message)
        return f"{len(self.commits):040x}"


@pytest.fixture
def config():
    return Settings(_env_file=None)


@pytest.fixture
def repository():
    return InMemoryRepository()


@pytest.fixture
def store(repository, config):
    return PageStore(repository, config)


@pytest.fixture
def make_store(config):
    """Factory for stores over an in-memory repository seeded with files."""

    def _make(files: dict[str, str] | None = None, **overrides) -> PageStore:
        store_config = config.model_copy(update=overrides) if overrides else config
        return PageStore(InMemoryRepository(files), store_config)

    return _make
