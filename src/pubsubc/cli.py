"""Typer CLI for pubsubc."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from itertools import chain

import structlog
import typer
from rich.console import Console

from pubsubc.clients import open_clients
from pubsubc.config.models import RunSettings
from pubsubc.config.parser import iter_project_envs, parse_project
from pubsubc.errors import PubSubcError
from pubsubc.log import configure_logging
from pubsubc.provisioner import PubSubProvisioner
from pubsubc.reporter import ResultReporter, render_report
from pubsubc.version import version_string

logger = structlog.get_logger()
console = Console()
err_console = Console(stderr=True)
app = typer.Typer(
    name="pubsubc",
    help="Create Pub/Sub topics and subscriptions from PUBSUB_PROJECTn variables.",
    add_completion=False,
)
HELP_OPTIONS = {"help_option_names": ["--help", "-help", "-h"]}

USAGE = (
    "Usage: env PUBSUB_PROJECT1="
    '"project1,topic1,topic2:subscription1,topic3:subscription2+endpoint1|port" '
    "{prog}"
)


def provision_projects(
    projects: Iterable[tuple[str, str]],
    settings: RunSettings,
    out: Console,
) -> None:
    """Parse, provision and report each project in turn.

    Stops at the first error; later projects are not touched.
    """
    for env_name, value in projects:
        spec = parse_project(value, source=env_name)
        logger.debug(
            "pubsubc.project_parsed", env=env_name, project_id=spec.project_id
        )

        with open_clients(spec.project_id) as clients:
            result = PubSubProvisioner(clients, settings).provision(spec)
        logger.debug(
            "pubsubc.project_provisioned",
            project_id=spec.project_id,
            topics=len(result.topics),
            subscriptions=len(result.subscriptions),
        )

        with open_clients(spec.project_id) as clients:
            reports = ResultReporter(clients, settings).collect(spec.project_id)
        render_report(reports, out)


def _settings_from_env(debug: bool, environ: Mapping[str, str]) -> RunSettings:
    return RunSettings(
        verbose=debug,
        emulator_host=environ.get("PUBSUB_EMULATOR_HOST") or None,
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(
            version_string(), markup=False, highlight=False, soft_wrap=True
        )
        raise typer.Exit()


@app.command(context_settings=HELP_OPTIONS)
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False, "--debug", "-debug", help="Enable debug logging"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-version",
        help="Display version information",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Create the topics and subscriptions described by PUBSUB_PROJECTn."""
    prog = ctx.find_root().info_name or "pubsubc"
    settings = _settings_from_env(debug, os.environ)
    configure_logging(settings.verbose)

    projects = iter_project_envs(os.environ, settings.env_prefix)
    first = next(projects, None)
    if first is None:
        console.print(
            USAGE.format(prog=prog), markup=False, highlight=False, soft_wrap=True
        )
        typer.echo(ctx.get_help())
        raise typer.Exit(1)

    try:
        provision_projects(chain([first], projects), settings, console)
    except PubSubcError as exc:
        err_console.print(
            f"{prog}: {exc}", markup=False, highlight=False, soft_wrap=True
        )
        raise typer.Exit(1) from exc
