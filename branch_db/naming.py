"""Database name composition.

Branch names are mapped into PostgreSQL-friendly identifiers:

- "main" -> "main"
- "feature/ABC-123_test" -> "feature-abc-123-test"
- "release//v2.0" -> "release-v2-0"

The composed name is "{database_name}-{branch}", cut to fit the
PostgreSQL identifier limit.
"""

import re

MAX_DATABASE_NAME_LENGTH = 63

_INVALID_CHARS = re.compile(r"[^a-zA-Z0-9]")
_CONSECUTIVE_HYPHENS = re.compile(r"-+")


def sanitize_branch_name(branch_name: str) -> str:
    """Replace non-alphanumerics with hyphens, collapse runs, lowercase.

    Leading and trailing hyphens are kept: "/feature/" -> "-feature-".
    """
    sanitized = _INVALID_CHARS.sub("-", branch_name)
    sanitized = _CONSECUTIVE_HYPHENS.sub("-", sanitized)
    return sanitized.lower()


def compose_database_name(
    database_name: str,
    branch_name: str,
    max_length: int = MAX_DATABASE_NAME_LENGTH,
) -> str:
    """Append the sanitized branch name to a database name.

    Parameters
    ----------
    database_name : str
        Base database name
    branch_name : str
        Raw branch name; "" means no suffix
    max_length : int
        Identifier length limit (default: 63)

    Returns
    -------
    str
        database_name unchanged when branch_name is empty. Otherwise
        "{database_name}-{branch}" where branch keeps its LAST characters
        when it has to be cut. When database_name leaves no room for a
        hyphen and one character, it is cut to max_length and the branch
        is dropped.
    """
    if not branch_name:
        return database_name

    branch = sanitize_branch_name(branch_name)
    remaining_length = max_length - len(database_name) - 1  # -1 for the hyphen

    if remaining_length <= 0:
        return database_name[:max_length]

    if len(branch) > remaining_length:
        branch = branch[-remaining_length:]

    return f"{database_name}-{branch}"
