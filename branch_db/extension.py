"""Per-branch database registration.

Wraps a server builder's `add_database` so each git branch gets its own
database name during local development:

    postgres = builder.add_postgres("postgres")
    add_database_with_branch_name_suffix(postgres, "database")
    # on branch feature/login -> database "database-feature-login"
"""

import logging
from typing import Any, Protocol

from .git import BranchSource, GitBranchSource
from .naming import MAX_DATABASE_NAME_LENGTH, compose_database_name

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when a required argument is missing or empty."""

    pass


class DatabaseServerBuilder(Protocol):
    """Server resource that can register databases in the app model."""

    def add_database(self, name: str, database_name: str | None = None) -> Any: ...


def add_database_with_branch_name_suffix(
    builder: DatabaseServerBuilder,
    name: str,
    database_name: str | None = None,
    *,
    branch_source: BranchSource | None = None,
    max_length: int = MAX_DATABASE_NAME_LENGTH,
) -> Any:
    """Add a database whose name carries the current git branch.

    Format: {database_name}-{sanitized-branch}

    Examples (database_name="database"):
    - main -> "database-main"
    - feature/ABC-123_test -> "database-feature-abc-123-test"
    - not in a git repository -> "database"

    Parameters
    ----------
    builder : DatabaseServerBuilder
        Server resource to register the database on
    name : str
        Resource name, also used as connection string name by dependents
    database_name : str, optional
        Base database name (default: name)
    branch_source : BranchSource, optional
        Where to read the branch from (default: git in the current directory)
    max_length : int
        Identifier length limit (default: 63)

    Returns
    -------
    Any
        Whatever builder.add_database returns

    Raises
    ------
    InvalidArgumentError
        When builder is None, name is empty, or max_length is not positive
    """
    if builder is None:
        raise InvalidArgumentError("builder must not be None")
    if not name:
        raise InvalidArgumentError("name must not be None or empty")
    if max_length <= 0:
        raise InvalidArgumentError(f"max_length must be positive, got {max_length}")

    if database_name is None:
        database_name = name

    if branch_source is None:
        branch_source = GitBranchSource()

    branch_name = branch_source.current_branch()
    final_name = compose_database_name(database_name, branch_name, max_length)

    logger.debug(
        "Resource %r: branch %r -> database %r", name, branch_name, final_name
    )
    return builder.add_database(name, final_name)
