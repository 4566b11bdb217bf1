"""CLI interface for prunedirs."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click

from prunedirs.core.confirm import AskFunc, confirm
from prunedirs.core.deleter import delete
from prunedirs.core.scanner import normalize_names, scan
from prunedirs.core.sizer import measure
from prunedirs.errors import InvalidArguments, PruneError
from prunedirs.models import DeleteResult, RunOptions, ScanResult, SizeReport
from prunedirs.utils import format_size, plural

EXIT_OK = 0
EXIT_PARTIAL_FAILURE = 3

_EXAMPLES = """\b
Examples:
  prunedirs -n bin -n obj                 # current directory, asks first
  prunedirs ~/src -n node_modules --dry-run
  prunedirs ~/src -n __pycache__ -f       # no confirmation
"""


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _prompt(text: str) -> str:
    try:
        return click.prompt(text, default="", show_default=False)
    except click.Abort:
        click.echo()
        return ""


@click.command(
    epilog=_EXAMPLES,
    context_settings={"auto_envvar_prefix": "PRUNEDIRS", "help_option_names": ["-h", "--help"]},
)
@click.argument("root", required=False)
@click.option(
    "--name", "-n", "names", multiple=True, required=True, metavar="NAME",
    help="Folder name to delete (exact match). Repeat for several names.",
)
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.option(
    "--dry-run", "--preview", "--what-if", "-w", "preview", is_flag=True,
    help="Show what would be deleted without doing it",
)
@click.option("--strict", is_flag=True, help=f"Exit with status {EXIT_PARTIAL_FAILURE} if any folder could not be deleted")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON (requires --force or --dry-run)")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.pass_context
def main(
    ctx: click.Context,
    root: str | None,
    names: tuple[str, ...],
    force: bool,
    preview: bool,
    strict: bool,
    as_json: bool,
    verbose: int,
) -> None:
    """Recursively find folders named NAME under ROOT and delete them.

    ROOT defaults to the current directory. Matching is on the exact
    folder name; symlinked folders are never followed.
    """
    _setup_logging(verbose)

    if as_json and not (force or preview):
        raise click.UsageError("--json cannot prompt for confirmation; add --force or --dry-run", ctx=ctx)

    try:
        options = RunOptions(
            root=root,
            names=normalize_names(names),
            force=force,
            preview=preview,
            strict=strict,
            as_json=as_json,
        )
        code = run(options)
    except InvalidArguments as e:
        raise click.UsageError(str(e), ctx=ctx) from e
    except PruneError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(e.exit_code)
    ctx.exit(code)


def run(options: RunOptions, ask: AskFunc = _prompt) -> int:
    """Execute one scan/confirm/delete pass and return the exit status.

    Raises:
        PruneError: for fatal problems detected before any deletion.
    """
    as_json = options.as_json

    # ── scan ─────────────────────────────────────────────────────────────
    scan_result = scan(options.root, options.names)

    if not as_json:
        click.echo(
            f"\n{click.style('🔍', bold=True)} Scanned {scan_result.root} for: "
            f"{', '.join(scan_result.names)}\n"
        )

    if not scan_result:
        if as_json:
            _emit_json("no_matches", scan_result)
        else:
            click.echo("No matching folders found.")
        return EXIT_OK

    # ── report & size ────────────────────────────────────────────────────
    sizes = measure(scan_result.matches)

    if not as_json:
        for entry in sizes.entries:
            size = format_size(entry.size_bytes if entry.sized else None)
            click.echo(f"  {click.style('•', fg='cyan')} {entry.path} ({size})")
        click.echo(f"\nFound {plural(len(scan_result), 'matching folder')}.")
        if scan_result.skipped_dirs:
            click.echo(
                click.style(f"({plural(scan_result.skipped_dirs, 'folder')} could not be read)", fg="yellow")
            )
        total = format_size(sizes.total_bytes)
        click.echo(
            f"Total size: {click.style(total, fg='green', bold=True)} "
            f"({plural(sizes.file_count, 'file')})\n"
        )

    # ── confirm ──────────────────────────────────────────────────────────
    if not confirm(len(scan_result), force=options.force, preview=options.preview, ask=ask):
        click.echo("Operation cancelled.")
        return EXIT_OK

    # ── delete ───────────────────────────────────────────────────────────
    if not as_json and not options.preview:
        click.echo(f"{click.style('🧹', bold=True)} Deleting...\n")

    def on_progress(path: Path, status: str, detail: str) -> None:
        if as_json:
            return
        match status:
            case "preview":
                click.echo(f"  {click.style('·', fg='bright_black')} Would delete: {path}")
            case "deleted":
                click.echo(f"  {click.style('✓', fg='green')} Deleted: {path}")
            case "error":
                click.echo(f"  {click.style('✗', fg='red')} Failed: {path} — {detail}")

    result = delete(scan_result.matches, preview=options.preview, on_progress=on_progress)

    # ── summary ──────────────────────────────────────────────────────────
    if as_json:
        _emit_json("dry_run" if result.preview else "deleted", scan_result, sizes, result)
    else:
        _print_summary(result)

    if options.strict and not result.ok:
        return EXIT_PARTIAL_FAILURE
    return EXIT_OK


def _print_summary(result: DeleteResult) -> None:
    click.echo()
    if result.preview:
        click.echo(f"Would delete {plural(result.succeeded, 'folder')}.")
        click.echo("(dry run — no folders were deleted)")
        return

    click.echo(f"Deleted {click.style(plural(result.succeeded, 'folder'), fg='green', bold=True)}.")
    if result.failed:
        click.echo(click.style(f"Failed to delete {plural(result.failed, 'folder')}.", fg="yellow"))


def _emit_json(
    status: str,
    scan_result: ScanResult,
    sizes: SizeReport | None = None,
    result: DeleteResult | None = None,
) -> None:
    data: dict[str, Any] = {
        "status": status,
        "root": str(scan_result.root),
        "names": list(scan_result.names),
        "skipped_dirs": scan_result.skipped_dirs,
        "matches": [],
        "total_bytes": None,
    }
    if sizes is not None:
        data["matches"] = [
            {
                "path": str(e.path),
                "size_bytes": e.size_bytes if e.sized else None,
                "file_count": e.file_count,
            }
            for e in sizes.entries
        ]
        data["total_bytes"] = sizes.total_bytes
    if result is not None:
        data["succeeded"] = result.succeeded
        data["failed"] = result.failed
        data["errors"] = result.errors
    click.echo(json.dumps(data, indent=2))
