"""Click CLI entry point for warnkit."""

from __future__ import annotations

import json
from pathlib import Path

import click

from warnkit import __version__
from warnkit.config import WarnkitConfig, build_manager, load_config
from warnkit.errors import WarnkitError
from warnkit.kinds import get_kind
from warnkit.messages import FeatureData
from warnkit.models import WarningRecord
from warnkit.observers import CallbackObserver
from warnkit.parser import load_warnings
from warnkit.report import kinds_payload, render_kinds_text, render_text, summary_payload
from warnkit.warning_policy import parse_kind_list


def _build_config(
    config_file: Path | None, warn_as_error: str | None, suppress_warning: str | None
) -> WarnkitConfig:
    """Load the config file, if any, and extend it with CLI warning options."""
    try:
        config = load_config(config_file) if config_file is not None else WarnkitConfig()
    except WarnkitError as e:
        raise click.ClickException(str(e)) from e
    try:
        wae = parse_kind_list(warn_as_error) if warn_as_error else frozenset()
        sup = parse_kind_list(suppress_warning) if suppress_warning else frozenset()
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    return config.model_copy(
        update={
            "warn_as_error": sorted(set(config.warn_as_error) | wae),
            "suppress": sorted(set(config.suppress) | sup),
        }
    )


def _echo_warning(record: WarningRecord) -> None:
    click.echo(f"warning: {record}", err=True)


@click.group()
@click.version_option(version=__version__, prog_name="warnkit")
def main() -> None:
    """warnkit: typed, observable application warnings."""


@main.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format.",
)
def kinds(output_format: str = "text") -> None:
    """List the warning kinds with their codes."""
    entries = kinds_payload()
    if output_format == "json":
        click.echo(json.dumps(entries, indent=2))
    else:
        click.echo(render_kinds_text(entries), nl=False)


@main.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="YAML configuration file.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Summary output format.",
)
@click.option(
    "--warn-as-error",
    "warn_as_error",
    type=str,
    default=None,
    help="Comma-separated kinds to treat as errors (e.g. DiskWarning,OSWarning).",
)
@click.option(
    "--suppress-warning",
    "suppress_warning",
    type=str,
    default=None,
    help="Comma-separated kinds to suppress (e.g. StabilityWarning).",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Do not echo each warning to stderr as it is recorded.",
)
def replay(
    input_file: Path,
    config_file: Path | None = None,
    output_format: str = "text",
    warn_as_error: str | None = None,
    suppress_warning: str | None = None,
    quiet: bool = False,
) -> None:
    """Record the warnings listed in a YAML file and print a summary."""
    config = _build_config(config_file, warn_as_error, suppress_warning)
    manager = build_manager(config.model_copy(update={"console": False}))
    if config.console and not quiet:
        manager.subscribe(CallbackObserver(_echo_warning))

    try:
        for record in load_warnings(input_file):
            manager.record(record)
        payload = summary_payload(manager)
    except WarnkitError as e:
        raise click.ClickException(str(e)) from e
    finally:
        manager.complete()

    if output_format == "json":
        click.echo(json.dumps(payload, indent=2))
    else:
        click.echo(render_text(payload), nl=False)


@main.command()
@click.argument("kind_name", metavar="KIND")
@click.option("--feature-type", type=str, default=None, help="Kind of feature, e.g. 'function'.")
@click.option("--feature-name", type=str, default=None, help="Name of the feature.")
@click.option("--about-url", type=str, default=None, help="Where to read more.")
@click.option(
    "--alternative",
    "alternative_feature_name",
    type=str,
    default=None,
    help="Feature to use instead (deprecations only).",
)
def message(
    kind_name: str,
    feature_type: str | None = None,
    feature_name: str | None = None,
    about_url: str | None = None,
    alternative_feature_name: str | None = None,
) -> None:
    """Print the message a future-facing KIND builds from feature details."""
    try:
        kind = get_kind(kind_name)
    except WarnkitError as e:
        raise click.UsageError(str(e)) from e
    if kind.synthesize is None:
        raise click.UsageError(f"{kind.name} does not build messages from feature details")

    data = FeatureData(
        feature_type=feature_type,
        feature_name=feature_name,
        about_url=about_url,
        alternative_feature_name=alternative_feature_name,
    )
    click.echo(kind(data).message)
