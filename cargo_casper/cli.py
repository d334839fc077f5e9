"""Command line tool for creating a Wasm contract and tests for the Casper platform.

Usage::

    cargo casper [-w] <path>
    cd <path>
    make prepare
    make test
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

from cargo_casper import __version__
from cargo_casper.config import CasperOverrides, GitOverride, ScaffoldConfig, WorkspaceOverride
from cargo_casper.errors import FAILURE_EXIT_CODE, ScaffoldError, UsageError
from cargo_casper.scaffolder import ProjectGenerator
from cargo_casper.utils import console, err_console, print_error, print_success

PROG_NAME = "cargo-casper"
SUBCOMMAND_NAME = "casper"

USAGE = """cargo casper [FLAGS] <path>
    cd <path>
    make prepare
    make test"""


class _ArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises ``UsageError`` instead of exiting with code 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG_NAME,
        usage=USAGE,
        allow_abbrev=False,
        description="A command line tool for creating a Wasm contract and tests "
        "for use on the Casper Platform.",
    )
    parser.add_argument(
        "path",
        type=Path,
        help="Path to new folder for contract and tests",
    )
    parser.add_argument(
        "--wrapper", "-w",
        action="store_true",
        help="Use rustc wrapper to ensure wasm reproducibility",
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"{PROG_NAME} {__version__}",
    )
    # Hidden: redirect every Casper crate to a local or git copy of casper-node.
    parser.add_argument("--workspace-path", default=None, help=argparse.SUPPRESS)
    parser.add_argument("--git-url", default=None, help=argparse.SUPPRESS)
    parser.add_argument("--git-branch", default=None, help=argparse.SUPPRESS)
    return parser


def filter_subcommand_arg(argv: Sequence[str]) -> list[str]:
    """Drop the subcommand name cargo injects when run as ``cargo casper``.

    Run directly the args are ``cargo-casper <path>``; run via cargo they are
    ``cargo-casper casper <path>``.  Only an exact ``casper`` straight after
    the program name is removed, so ``cargo-casper casper`` with no further
    args is treated as a missing path rather than a folder named ``casper``.
    """
    return [
        value
        for index, value in enumerate(argv)
        if not (index == 1 and value == SUBCOMMAND_NAME)
    ]


def _resolve_overrides(
    workspace_path: str | None,
    git_url: str | None,
    git_branch: str | None,
) -> CasperOverrides | None:
    if workspace_path is not None and (git_url is not None or git_branch is not None):
        flag = "--git-url" if git_url is not None else "--git-branch"
        raise UsageError(f"the argument '--workspace-path' cannot be used with '{flag}'")
    if git_url is not None and git_branch is None:
        raise UsageError("the argument '--git-url' requires '--git-branch'")
    if git_branch is not None and git_url is None:
        raise UsageError("the argument '--git-branch' requires '--git-url'")

    if workspace_path is not None:
        return WorkspaceOverride(path=Path(workspace_path))
    if git_url is not None and git_branch is not None:
        return GitOverride(url=git_url, branch=git_branch)
    return None


def parse_args(argv: Sequence[str]) -> ScaffoldConfig:
    """Resolve the process arguments into a ``ScaffoldConfig``.

    Args:
        argv: Full argument list, program name first (as in ``sys.argv``).

    Raises:
        UsageError: If arguments are missing, unknown, or conflicting.
    """
    filtered = filter_subcommand_arg(argv)
    args = build_parser().parse_args(filtered[1:])
    overrides = _resolve_overrides(args.workspace_path, args.git_url, args.git_branch)
    return ScaffoldConfig(
        root_path=args.path,
        casper_overrides=overrides,
        use_wrapper=args.wrapper,
    )


def _fail(error: ScaffoldError) -> NoReturn:
    print_error(str(error))
    if isinstance(error, UsageError):
        err_console.print(f"\nUsage: {USAGE}", highlight=False, markup=False)
    sys.exit(FAILURE_EXIT_CODE)


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``cargo-casper`` and ``python -m cargo_casper``."""
    if argv is None:
        argv = sys.argv
    try:
        config = parse_args(argv)
        ProjectGenerator(config).generate()
    except ScaffoldError as exc:
        _fail(exc)

    print_success(f"Created Casper contract project at {config.root_path}")
    console.print(
        f"  cd {config.root_path}\n  make prepare\n  make test",
        highlight=False,
        markup=False,
    )


if __name__ == "__main__":
    main()
