# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Command line interface: ``shamir-recover solve`` and ``shamir-recover decode``."""

from __future__ import annotations

import dataclasses
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from tqdm import tqdm

from . import audit
from .decoder import decode
from .errors import DecodeError
from .policy import load_policy
from .reconstruct import RunOutcome, reconstruct_many
from .selector import MAX_BASE, MIN_BASE


def _configure_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _record_outcome(outcome: RunOutcome, directory: Path) -> None:
    if outcome.result is not None:
        audit.record_event(
            "reconstruct.success",
            details={
                "source": outcome.source,
                "k": len(outcome.result.points),
                "indices": outcome.result.indices,
                "unused": outcome.result.unused,
                "diagnostics": len(outcome.result.diagnostics),
            },
            directory=directory,
        )
    else:
        audit.record_event(
            "reconstruct.failure",
            details={"source": outcome.source, "error": type(outcome.error).__name__},
            directory=directory,
        )


@click.group()
@click.option("-v", "--verbose", count=True, help="Increase log verbosity (-v info, -vv debug).")
def main(verbose: int) -> None:
    """Recover Shamir secrets from base-N encoded share files."""
    _configure_logging(verbose)
    # Secrets are printed in decimal and may exceed the default 4300-digit limit.
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)


@main.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.option("--verify-unused", is_flag=True, help="Check shares beyond k against the result.")
@click.option("--strict-count", is_flag=True, help="Fail when keys.n disagrees with the share count.")
@click.option("--workers", type=click.IntRange(min=1), default=None, help="Threads used to decode shares.")
@click.option("--progress", is_flag=True, help="Show a progress bar over input files.")
@click.option("--audit", "audit_enabled", is_flag=True, help="Write a signed audit entry per file.")
def solve(
    files: Tuple[str, ...],
    verify_unused: bool,
    strict_count: bool,
    workers: Optional[int],
    progress: bool,
    audit_enabled: bool,
) -> None:
    """Reconstruct the secret of every FILE and print it."""
    overrides = {}
    if verify_unused:
        overrides["verify_unused"] = True
    if strict_count:
        overrides["strict_count"] = True
    if workers is not None:
        overrides["decode_workers"] = workers
    run_policy = dataclasses.replace(load_policy(), **overrides)

    paths = tqdm(files, desc="share files", unit="file", disable=not progress)
    outcomes = reconstruct_many(paths, policy=run_policy)

    failed = 0
    for outcome in outcomes:
        if outcome.result is not None:
            for diagnostic in outcome.result.diagnostics:
                click.echo(f"{outcome.source}: {diagnostic}", err=True)
            if len(files) == 1:
                click.echo(str(outcome.result.secret))
            else:
                click.echo(f"{outcome.source}: {outcome.result.secret}")
        else:
            failed += 1
            click.echo(f"{outcome.source}: error: {outcome.error}", err=True)
        if audit_enabled:
            _record_outcome(outcome, run_policy.audit_dir)

    if failed:
        raise SystemExit(1)


@main.command("decode")
@click.argument("value")
@click.option("--base", "-b", required=True, type=click.IntRange(MIN_BASE, MAX_BASE), help="Base of VALUE.")
def decode_command(value: str, base: int) -> None:
    """Print the integer encoded by VALUE in the given base."""
    try:
        click.echo(str(decode(value, base)))
    except DecodeError as exc:
        raise click.ClickException(str(exc)) from exc


if __name__ == "__main__":
    main()
