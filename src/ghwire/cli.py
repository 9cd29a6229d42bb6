# cli.py
from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from ghwire import settings
from ghwire.build import build, slug
from ghwire.dag import DIRECTIONS, render_dot, render_mermaid
from ghwire.differ import diff_workflows
from ghwire.discover import WORKFLOW, Declaration, discover
from ghwire.errors import GhwireError
from ghwire.importer import TYPES, import_file, to_source
from ghwire.ui.console import Console, get_console, set_console
from ghwire.writer import write_artifacts


def load_declarations(source: str) -> list[Declaration]:
    """
    Discover declarations under `source`, exiting with a readable error on failure.

    Args:
        source: Declaration file or directory

    Returns:
        List of discovered declarations (possibly empty)
    """
    console = get_console()
    try:
        declarations = list(discover(source))
    except GhwireError as e:
        console.print_error(
            "Could not load declarations",
            e.message,
            details=[f"source: {source}"],
            suggestion="Point --source at a declaration file or a directory of them:\n  ghwire build --source ci/",
        )
        if console.debug:
            import traceback
            traceback.print_exc()
        sys.exit(1)
    for decl in declarations:
        console.print_debug(f"loaded {decl.kind} {decl.name} from {decl.source}")
    return declarations


def find_workflow(declarations: list[Declaration], name: str) -> Declaration:
    """
    Pick a workflow declaration by variable name, file slug or workflow name.

    Raises:
        SystemExit: If no workflow matches
    """
    workflows = [d for d in declarations if d.kind == WORKFLOW]
    for decl in workflows:
        if name in (decl.name, slug(decl.name), decl.value.name):
            return decl

    get_console().print_error(
        "Workflow not found",
        f"No workflow named {name!r}.",
        details=[f"{d.name} ({slug(d.name)}.yml)" for d in workflows] or ["no workflows declared"],
        suggestion="List declarations with:\n  ghwire list",
    )
    sys.exit(1)


@click.group()
@click.option(
    "--debug",
    is_flag=True,
    default=settings.DEBUG,
    help="Enable debug mode (show stack traces and detailed output)",
)
@click.pass_context
def cli(ctx, debug):
    """ghwire: generate GitHub automation files from Python declarations."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    console = Console(debug=debug)
    set_console(console)
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug


@cli.command(name="build")
@click.option("--source", default=settings.SOURCE, show_default=True, help="Declaration file or directory")
@click.option("--output", default=settings.OUTPUT, show_default=True, help="Repository root to write .github/ under")
@click.option("--dry-run", is_flag=True, default=False, help="Build and report paths without writing")
@click.pass_context
def build_cmd(ctx, source, output, dry_run):
    """Build every declared artifact and write it under OUTPUT."""
    console = get_console()
    declarations = load_declarations(source)
    console.print_build_started(source, output, len(declarations))

    try:
        result = build(declarations)
        if dry_run:
            for artifact in result.artifacts:
                console.print_artifact(artifact.path, "dry-run")
            written = unchanged = 0
        else:
            statuses = write_artifacts(result.artifacts, output)
            for artifact, (_, status) in zip(result.artifacts, statuses):
                console.print_artifact(artifact.path, status)
            written = sum(1 for _, s in statuses if s == "written")
            unchanged = len(statuses) - written
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)

    for error in result.errors:
        console.print_artifact_failed(error)
    console.print_summary(written, unchanged, len(result.errors))

    if not result.ok:
        sys.exit(1)


@cli.command(name="list")
@click.option("--source", default=settings.SOURCE, show_default=True, help="Declaration file or directory")
@click.pass_context
def list_cmd(ctx, source):
    """List discovered declarations."""
    console = get_console()
    declarations = load_declarations(source)
    if not declarations:
        console.print_info("No declarations found.")
        return
    console.print_header(f"{len(declarations)} declaration(s)")
    for decl in declarations:
        console.print_declaration(decl.kind, decl.name, decl.source)


@cli.command()
@click.argument("name")
@click.option("--source", default=settings.SOURCE, show_default=True, help="Declaration file or directory")
@click.option("--format", "fmt", type=click.Choice(["dot", "mermaid"]), default="mermaid", show_default=True)
@click.option(
    "--direction",
    type=click.Choice(list(DIRECTIONS), case_sensitive=False),
    default="TB",
    show_default=True,
)
@click.pass_context
def graph(ctx, name, source, fmt, direction):
    """Print the job graph of workflow NAME."""
    console = get_console()
    decl = find_workflow(load_declarations(source), name)
    try:
        render = render_dot if fmt == "dot" else render_mermaid
        console.print_text(render(decl.value, direction))
    except (GhwireError, ValueError) as e:
        console.print_error("Invalid job graph", str(e), details=[f"workflow: {decl.name}"])
        if ctx.obj.get("debug", False):
            import traceback
            traceback.print_exc()
        sys.exit(1)


@cli.command(name="import")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--type", "kind", type=click.Choice(["auto", *TYPES]), default="auto", show_default=True)
@click.option("--name", default="", help="PR template name (defaults to the file stem)")
@click.option("--var", "var_name", default="", help="Variable name in the generated source")
@click.pass_context
def import_cmd(ctx, file, kind, name, var_name):
    """Print Python declarations that rebuild an existing GitHub FILE."""
    console = get_console()
    try:
        value = import_file(file, kind=kind, name=name)
    except (GhwireError, ValueError) as e:
        console.print_error("Import failed", str(e), details=[f"file: {file}"])
        if ctx.obj.get("debug", False):
            import traceback
            traceback.print_exc()
        sys.exit(1)

    var_name = var_name or slug(Path(file).stem).replace("-", "_") or "value"
    if not var_name.isidentifier():
        var_name = f"_{var_name}"
    console.print_text(to_source(value, var_name))


@cli.command()
@click.argument("old", type=click.Path(exists=True, dir_okay=False))
@click.argument("new", type=click.Path(exists=True, dir_okay=False))
@click.option("--ignore-order", is_flag=True, default=False, help="Treat lists as unordered")
@click.pass_context
def diff(ctx, old, new, ignore_order):
    """Show semantic differences between two workflow files."""
    console = get_console()
    try:
        result = diff_workflows(
            Path(old).read_text(encoding="utf-8"),
            Path(new).read_text(encoding="utf-8"),
            ignore_order=ignore_order,
        )
    except GhwireError as e:
        console.print_error("Diff failed", str(e))
        sys.exit(1)

    if result.identical:
        console.print_info("No differences.")
        return

    for entry in result.entries:
        console.print_info(f"{entry.action}: {entry.resource}")
        for change in entry.changes:
            console.print_info(f"  {change}")
    s = result.summary
    console.print_info(f"\n{s.added} added, {s.modified} modified, {s.removed} removed")
    sys.exit(1)


if __name__ == "__main__":
    cli()
