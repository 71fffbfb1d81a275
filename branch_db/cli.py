"""Main CLI entry point for branch-db."""

from pathlib import Path

from cyclopts import App
from cyclopts.config import Env
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .extension import InvalidArgumentError
from .git import BranchSource, GitBranchSource, StaticBranchSource
from .logging import configure_logging
from .naming import (
    MAX_DATABASE_NAME_LENGTH,
    compose_database_name,
    sanitize_branch_name,
)

app = App(
    help="Per-branch database names for local development.\n\n"
    "Use 'branch-db COMMAND --help' for detailed command options.",
    version_flags=["--version", "-v"],
    config=Env("BRANCH_DB_", command=False),
)
console = Console()


def _branch_source(branch: str, repo_path: str) -> BranchSource:
    if branch:
        return StaticBranchSource(branch)
    return GitBranchSource(Path(repo_path).expanduser() if repo_path else None)


def _check_max_length(max_length: int):
    if max_length <= 0:
        raise InvalidArgumentError(f"max_length must be positive, got {max_length}")


@app.command
def name(
    database_name: str,
    *,
    branch: str = "",
    repo_path: str = "",
    max_length: int = MAX_DATABASE_NAME_LENGTH,
    verbose: bool = False,
):
    """Print database name: name DATABASE-NAME [--branch BRANCH] [--repo-path PATH]

    Appends the sanitized current git branch to DATABASE-NAME and prints
    the result on stdout, e.g. for docker compose or psql scripts.

    Parameters
    ----------
    database_name : str
        Base database name
    branch : str
        Use this branch instead of asking git
    repo_path : str
        Repository to read the branch from (default: current directory)
    max_length : int
        Identifier length limit (default: 63)
    verbose : bool
        Log branch detection details to stderr
    """
    configure_logging(verbose)
    try:
        if not database_name:
            raise InvalidArgumentError("database name must not be empty")
        _check_max_length(max_length)

        branch_name = _branch_source(branch, repo_path).current_branch()
        print(compose_database_name(database_name, branch_name, max_length))
    except InvalidArgumentError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)
    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        raise SystemExit(1)


@app.command(name="branch")
def current_branch(*, repo_path: str = "", verbose: bool = False):
    """Print branch suffix: branch [--repo-path PATH]

    Prints the sanitized current branch, or an empty line when git is
    not available or this is not a repository.

    Parameters
    ----------
    repo_path : str
        Repository to read the branch from (default: current directory)
    verbose : bool
        Log branch detection details to stderr
    """
    configure_logging(verbose)
    try:
        branch_name = _branch_source("", repo_path).current_branch()
        print(sanitize_branch_name(branch_name) if branch_name else "")
    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        raise SystemExit(1)


@app.command
def show(
    database_names: list[str],
    *,
    branch: str = "",
    repo_path: str = "",
    max_length: int = MAX_DATABASE_NAME_LENGTH,
    verbose: bool = False,
):
    """Show database names: show DATABASE-NAME... [--branch BRANCH]

    Displays a table with the branch-suffixed name of each database and
    flags names whose branch suffix had to be dropped.

    Parameters
    ----------
    database_names : list[str]
        Base database names
    branch : str
        Use this branch instead of asking git
    repo_path : str
        Repository to read the branch from (default: current directory)
    max_length : int
        Identifier length limit (default: 63)
    verbose : bool
        Log branch detection details to stderr
    """
    configure_logging(verbose)
    try:
        _check_max_length(max_length)
        branch_name = _branch_source(branch, repo_path).current_branch()
    except InvalidArgumentError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)
    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        raise SystemExit(1)

    if not branch_name:
        console.print("[yellow]No git branch found, names are left unchanged.[/yellow]")
    else:
        console.print(
            f"[cyan]Branch:[/cyan] {escape(branch_name)} -> "
            f"[bold]{sanitize_branch_name(branch_name)}[/bold]"
        )

    table = Table(title="Database Names")
    table.add_column("Base", style="cyan")
    table.add_column("Database", style="green")
    table.add_column("Length", justify="right")
    table.add_column("Note", style="yellow")

    for database_name in database_names:
        final_name = compose_database_name(database_name, branch_name, max_length)
        note = ""
        if branch_name and final_name == database_name[:max_length]:
            note = "no room for branch"
        elif len(final_name) > max_length:
            note = "too long"
        table.add_row(
            escape(database_name),
            escape(final_name),
            f"{len(final_name)}/{max_length}",
            note,
        )

    console.print(table)


if __name__ == "__main__":
    app()
