"""Current branch lookup for branch-db.

The branch is read from git on every call. Any failure to run git is
treated as "no branch" and never raised to the caller.
"""

import logging
import subprocess
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class BranchSource(Protocol):
    """Anything that can report the current branch name, or ""."""

    def current_branch(self) -> str: ...


class GitBranchSource:
    """Read the checked-out branch with `git rev-parse --abbrev-ref HEAD`.

    Parameters
    ----------
    cwd : Path, optional
        Directory to run git in (default: current working directory)
    git : str
        git executable to invoke (default: "git" from PATH)
    """

    def __init__(self, cwd: Path | None = None, git: str = "git"):
        self.cwd = cwd
        self.git = git

    def current_branch(self) -> str:
        try:
            result = subprocess.run(
                [self.git, "rev-parse", "--abbrev-ref", "HEAD"],
                capture_output=True,
                text=True,
                check=True,
                cwd=self.cwd,
            )
        except subprocess.CalledProcessError as e:
            # Not a repository, or no commits yet
            logger.debug(
                "git exited with %s, no branch suffix: %s",
                e.returncode,
                (e.stderr or "").strip(),
            )
            return ""
        except OSError as e:
            logger.debug("Could not run %s, no branch suffix: %s", self.git, e)
            return ""

        return result.stdout.strip()


class StaticBranchSource:
    """Branch source that always reports the same name."""

    def __init__(self, branch: str = ""):
        self.branch = branch

    def current_branch(self) -> str:
        return self.branch


def get_current_branch(cwd: Path | None = None) -> str:
    """Get the current git branch name, or "" if it cannot be determined."""
    return GitBranchSource(cwd).current_branch()
