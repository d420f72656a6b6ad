# git_repo.py
import os

# Let preflight report a missing git binary instead of failing at import time.
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

import git
from loguru import logger

from errors import DiffError


class GitDiffSource:
    """Reads pending changes from a working tree."""

    def __init__(self, repo_path=".", staged_only=False):
        self.repo_path = repo_path
        self.staged_only = staged_only
        try:
            self.repo = git.Repo(repo_path, search_parent_directories=True)
        except (git.InvalidGitRepositoryError, git.NoSuchPathError) as e:
            raise DiffError(f"{repo_path} is not a valid Git repository.",
                            "Are you in a git repository?") from e

    def _diff(self, *args) -> str:
        command = " ".join(["git diff", *args])
        logger.debug(f"Running git command: {command}")
        try:
            diff = self.repo.git.diff(*args)
        except git.exc.CommandError as e:
            raise DiffError(f"Failed to get {command}: {e.stderr.strip() if e.stderr else e}",
                            "Are you in a git repository?") from e
        # Undecodable bytes come back as lone surrogates, which cannot be sent as JSON.
        return diff.encode("utf-8", "surrogateescape").decode("utf-8", "replace")

    def get_unstaged_diff(self) -> str:
        return self._diff()

    def get_staged_diff(self) -> str:
        return self._diff("--staged")

    def get_pending_diff(self) -> str:
        """
        Returns the unstaged diff, falling back to the staged diff.
        An empty string means there is nothing to describe.
        """
        if not self.staged_only:
            diff = self.get_unstaged_diff()
            logger.info("Got git diff.")
            if diff:
                return diff
        diff = self.get_staged_diff()
        logger.info("Got git diff --staged.")
        return diff
