from pathlib import Path
from typing import Any, Dict

import click
from rich.console import Console

from agents_md.builder import AgentsBuilder, BuildResult
from agents_md.errors import AgentsBuildError
from agents_md.tui import BuildConsoleUI


def _builder_from_obj(obj: Dict[str, Any], output: Path | None = None) -> AgentsBuilder:
    return AgentsBuilder(root=obj["root"], output_path=output)


def _run_build(builder: AgentsBuilder) -> BuildResult:
    try:
        return builder.build()
    except (AgentsBuildError, OSError) as exc:
        raise click.ClickException(f"Fatal: {exc}")


def _build_and_write(builder: AgentsBuilder) -> None:
    ui = BuildConsoleUI(Console())
    result = _run_build(builder)
    try:
        builder.write(result)
    except OSError as exc:
        raise click.ClickException(f"Fatal: {exc}")
    ui.render_build_result(result)


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Skill root holding metadata.json and rules/.",
)
@click.pass_context
def cli(ctx: click.Context, root: Path) -> None:
    """Compile rules/*.md into a single AGENTS.md."""
    ctx.obj = {"root": root}
    if ctx.invoked_subcommand is None:
        _build_and_write(_builder_from_obj(ctx.obj))


@cli.command(help="Build AGENTS.md from metadata.json and rules/.")
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write to this path instead of <root>/AGENTS.md.",
)
@click.pass_obj
def build(obj: Dict[str, Any], output: Path | None) -> None:
    _build_and_write(_builder_from_obj(obj, output))


@cli.command(help="Exit non-zero when AGENTS.md is missing or stale.")
@click.pass_obj
def check(obj: Dict[str, Any]) -> None:
    ui = BuildConsoleUI(Console())
    builder = _builder_from_obj(obj)
    result = _run_build(builder)
    try:
        up_to_date = builder.is_up_to_date(result)
    except (OSError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"Fatal: {exc}")
    ui.render_check_result(result, up_to_date)
    if not up_to_date:
        raise click.exceptions.Exit(1)


@cli.command(help="List parsed rules with their category and impact.")
@click.pass_obj
def rules(obj: Dict[str, Any]) -> None:
    ui = BuildConsoleUI(Console())
    builder = _builder_from_obj(obj)
    try:
        parsed = builder.rules.list_rules()
    except (AgentsBuildError, OSError) as exc:
        raise click.ClickException(f"Fatal: {exc}")
    ui.render_rules(parsed)


def main() -> int:
    try:
        code = cli(standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return 2
    return code if isinstance(code, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
