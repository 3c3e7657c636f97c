# ui69/cli.py
# -*- coding: utf-8 -*-
"""
Command-line entry point.

    ui69 add [component...]   copy components into ./components/ui
    ui69 list                 show the component table
    ui69 --version / -v       print the installed version
    ui69 --help / -h          usage (also shown for anything unrecognised)
"""

import importlib.metadata
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

import click

from ui69.common.console import echo_status, render_splash, show_splash
from ui69.common.logging_config import setup_logging
from ui69.config import (
    CLI_NAME,
    DISTRIBUTION_NAME,
    HELP_DESCRIPTION,
    HELP_EXAMPLES,
)
from ui69.config_models import AppSettings
from ui69.exceptions import Ui69Error, VersionMetadataError
from ui69.installer.component_installer import ComponentInstaller
from ui69.installer.registry import ComponentRegistry
from ui69.installer.selector import select_components

module_logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

# Subcommands take unknown options as plain arguments instead of failing
# with a usage error.
LENIENT_CONTEXT_SETTINGS = {"ignore_unknown_options": True}


class Ui69Group(click.Group):
    """
    Click group that never fails on unrecognised input.

    Unknown commands and unknown options print the usage text and exit with
    status 0 instead of click's usage error.
    """

    def parse_args(self, ctx: click.Context, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError:
            click.echo(ctx.get_help(), color=ctx.color)
            ctx.exit(0)

    def resolve_command(self, ctx: click.Context, args):
        if args and self.get_command(ctx, args[0]) is None:
            module_logger.debug(f"Unknown command '{args[0]}', showing usage")
            click.echo(ctx.get_help(), color=ctx.color)
            ctx.exit(0)
        return super().resolve_command(ctx, args)

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        formatter.write(render_splash())
        super().format_help(ctx, formatter)

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        with formatter.section("Examples"):
            for example in HELP_EXAMPLES:
                formatter.write(f"{'':>{formatter.current_indent}}{example}\n")


def report_error(error: Ui69Error, app_settings: Optional[AppSettings] = None) -> None:
    """Prints a fatal error and its detail lines on stderr."""
    echo_status(error.message, "error", module_logger, app_settings)
    for line in error.details:
        click.echo(line, err=True)
    if error.original_error is not None:
        module_logger.debug(
            f"Caused by {error.original_error!r}", exc_info=error.original_error
        )


@contextmanager
def fatal_errors(
    ctx: click.Context, app_settings: Optional[AppSettings] = None
) -> Iterator[None]:
    """Turns any Ui69Error raised in the block into a report and exit status 1."""
    try:
        yield
    except Ui69Error as e:
        report_error(e, app_settings)
        ctx.exit(1)


def read_version() -> str:
    """
    Reads the installed distribution's version.

    Raises:
        VersionMetadataError: If the package metadata is unavailable.
    """
    try:
        return importlib.metadata.version(DISTRIBUTION_NAME)
    except importlib.metadata.PackageNotFoundError as e:
        raise VersionMetadataError(
            "Unable to read package metadata",
            details=[f"Distribution '{DISTRIBUTION_NAME}' is not installed."],
            original_error=e,
        ) from e


def _print_version(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    with fatal_errors(ctx):
        click.echo(read_version())
    ctx.exit(0)


def _app_settings(ctx: click.Context) -> AppSettings:
    return ctx.obj["APP_SETTINGS"]


def _registry(app_settings: AppSettings) -> ComponentRegistry:
    return ComponentRegistry(
        template_root=app_settings.template_root,
        registry_file=app_settings.registry_file,
    )


@click.group(
    name=CLI_NAME,
    cls=Ui69Group,
    invoke_without_command=True,
    help=HELP_DESCRIPTION,
    context_settings=CONTEXT_SETTINGS,
)
@click.option(
    "-v",
    "--version",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_print_version,
    help="Show the version number.",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Show diagnostic logging on stderr.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    ctx.ensure_object(dict)
    app_settings = ctx.obj.get("APP_SETTINGS") or AppSettings()
    if verbose:
        app_settings = app_settings.model_copy(update={"verbose": True})
    ctx.obj["APP_SETTINGS"] = app_settings

    setup_logging(verbose=app_settings.verbose, symbols=app_settings.symbols)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help(), color=ctx.color)


@cli.command(name="add", context_settings=LENIENT_CONTEXT_SETTINGS)
@click.argument("components", nargs=-1)
@click.pass_context
def add_command(ctx: click.Context, components):
    """
    Add a component to your project (interactive if no component specified).
    """
    app_settings = _app_settings(ctx)
    registry = _registry(app_settings)
    installer = ComponentInstaller(app_settings)

    with fatal_errors(ctx, app_settings):
        if not components:
            entries = registry.get_all_components()
            show_splash()
            components = select_components(entries, app_settings)

        installer.install_many(registry.get_component(key) for key in components)


@cli.command(
    name="list",
    context_settings={**LENIENT_CONTEXT_SETTINGS, "allow_extra_args": True},
)
@click.pass_context
def list_command(ctx: click.Context):
    """
    List all available components.
    """
    app_settings = _app_settings(ctx)

    with fatal_errors(ctx, app_settings):
        components = _registry(app_settings).get_all_components()

    show_splash()
    echo_status("Available Components", "title", module_logger, app_settings)

    for key, entry in components:
        click.secho(key, bold=True)
        click.echo(f"  {entry.description}")
        if entry.dependencies:
            click.secho(
                f"  Dependencies: {', '.join(entry.dependencies)}",
                fg="bright_black",
            )
        click.echo("")

    click.echo("To add a component:")
    echo_status(f"  {CLI_NAME} add <component>", "code", module_logger, app_settings)
    click.echo("\nOr select from the interactive menu:")
    echo_status(f"  {CLI_NAME} add", "code", module_logger, app_settings)


def main() -> None:
    cli(prog_name=CLI_NAME)


if __name__ == "__main__":
    main()
