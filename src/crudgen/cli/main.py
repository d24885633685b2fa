"""CLI entry point for crudgen."""
from __future__ import annotations

import logging
import sys
from typing import List, Optional, Sequence, Tuple

import click

from crudgen import __version__, bootstrap
from crudgen.config import bind_manifest, describe_manifest, load_manifest
from crudgen.core import ResourceReport, ShorthandKind
from crudgen.reporting import JsonReporter, Reporter, ReportManager, TerminalReporter
from crudgen.resolver import compute_suffix, resolve


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class CliState:
    """Holds global CLI state."""

    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"crudgen {__version__}")
    raise click.exceptions.Exit()


def _report_options(func):
    func = click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")(func)
    func = click.option("--report-path", type=str, help="When --report json, write to this path instead of stdout.")(func)
    func = click.option(
        "--report",
        "report_format",
        type=click.Choice(["terminal", "json"]),
        default="terminal",
        show_default=True,
        help="Report format (terminal by default).",
    )(func)
    return func


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Enable verbose logging output.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the crudgen version and exit.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Generate conventional CRUD function names for data schemas."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    bootstrap()
    ctx.obj = CliState(verbose=verbose)


@cli.command("resolve")
@click.argument("schema")
@click.option("--no-suffix", is_flag=True, help="Use bare operation ids as function names.")
@click.option("--only", "only_ids", type=str, help="Comma-separated operation ids to keep.")
@click.option("--except", "except_ids", type=str, help="Comma-separated operation ids to drop.")
@click.option(
    "--preset",
    type=click.Choice([kind.value for kind in ShorthandKind]),
    help="Named operation preset.",
)
@_report_options
@click.pass_obj
def resolve_command(
    state: CliState,
    schema: str,
    no_suffix: bool,
    only_ids: Optional[str],
    except_ids: Optional[str],
    preset: Optional[str],
    report_format: str,
    report_path: Optional[str],
    no_color: bool,
) -> None:
    """List the functions generated for SCHEMA (e.g. BlogPost or app.models.BlogPost)."""

    chosen = [value for value in (only_ids, except_ids, preset) if value is not None]
    if len(chosen) > 1:
        raise click.UsageError("Use only one of --only, --except or --preset.")
    selector: object = preset
    if only_ids is not None:
        selector = {"only": _split_csv(only_ids)}
    elif except_ids is not None:
        selector = {"except": _split_csv(except_ids)}
    try:
        suffix = compute_suffix(schema, {"suffix": False} if no_suffix else None)
        report = ResourceReport(
            schema=schema.replace(":", ".").rsplit(".", 1)[-1],
            suffix=suffix,
            entries=resolve(suffix, selector),
        )
        _emit([report], report_format, report_path, use_color=not no_color)
    except Exception as exc:  # pragma: no cover - CLI error translation
        raise click.ClickException(str(exc)) from exc


@cli.command("inspect")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="YAML resource manifest.",
)
@click.option("--bind", "bind", is_flag=True, help="Also bind the functions onto their host modules.")
@_report_options
@click.pass_obj
def inspect_command(
    state: CliState,
    config_path: str,
    bind: bool,
    report_format: str,
    report_path: Optional[str],
    no_color: bool,
) -> None:
    """List the functions every resource in a manifest generates."""

    try:
        manifest = load_manifest(config_path)
        reports = describe_manifest(manifest)
        bound = bind_manifest(manifest) if bind else []
        _emit(reports, report_format, report_path, use_color=not no_color)
    except Exception as exc:  # pragma: no cover - CLI error translation
        raise click.ClickException(str(exc)) from exc
    if bound:
        click.echo(f"Bound {len(bound)} resource(s)")


def _emit(reports: Sequence[ResourceReport], report_format: str, report_path: Optional[str], *, use_color: bool) -> None:
    reporters: List[Reporter]
    if report_format == "json":
        reporters = [JsonReporter(path=report_path)]
    else:
        reporters = [TerminalReporter(use_color=use_color)]
    ReportManager(reporters).emit(reports)


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="crudgen", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


def _split_csv(value: Optional[str]) -> Tuple[str, ...]:
    if not value:
        return tuple()
    parts = [part.strip() for part in value.split(",") if part.strip()]
    return tuple(parts)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
