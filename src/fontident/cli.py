"""
Command line interface for fontident.

Resolves legacy font names, lists the legacy catalog, converts descriptors to the
document form and fetches published releases.
"""

import logging
import sys
from pathlib import Path

import click

from fontident.core.config import AppConfig, ReleaseClientConfig
from fontident.core.exceptions import FontIdentError, ReleaseError
from fontident.fonts import (
    DEFAULT_CATALOG,
    FontDescriptor,
    StyleKind,
    WeightScale,
    to_document_font,
)
from fontident.releases import ReleaseClient

logger = logging.getLogger(__name__)

WEIGHT_NAMES = [weight.to_name() for weight in WeightScale]
STYLE_NAMES = [style.to_name() for style in StyleKind]


def setup_logging(level: str = "INFO", log_format: str | None = None) -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=log_format or "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to application configuration YAML file",
)
@click.pass_context
def cli(ctx, verbose, config):
    """Font identity tools."""
    app_config = AppConfig.from_env_and_yaml(yaml_path=config)
    setup_logging(app_config.log_level, app_config.log_format)
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    ctx.obj = app_config


@cli.command(name="resolve")
@click.argument("name")
def resolve(name):
    """Resolve a legacy font NAME into a font descriptor."""
    try:
        descriptor = FontDescriptor.from_enum(name)
    except FontIdentError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    click.echo(str(descriptor))
    click.echo(f"   Bold: {descriptor.bold}")


@cli.command(name="list-fonts")
@click.option("--mapped-only", is_flag=True, help="Only list names that resolve")
def list_fonts(mapped_only):
    """List the legacy font catalog."""
    for entry in DEFAULT_CATALOG:
        if entry.mapping is None:
            if not mapped_only:
                click.echo(f"{entry.name:<20} (reserved, no mapping)")
            continue
        family, weight, style = entry.mapping
        click.echo(f"{entry.name:<20} {family}  {weight} {style}")


@cli.command(name="convert")
@click.argument("family")
@click.option("--weight", type=click.Choice(WEIGHT_NAMES), default="Regular", show_default=True)
@click.option("--style", type=click.Choice(STYLE_NAMES), default="Normal", show_default=True)
def convert(family, weight, style):
    """Show the document form of a FAMILY with the given weight and style."""
    descriptor = FontDescriptor(
        family, WeightScale.parse_name(weight), StyleKind.parse_name(style)
    )
    click.echo(to_document_font(descriptor).model_dump_json())


@cli.group(name="releases")
def releases():
    """Fetch published releases."""


def _release_client(ctx) -> ReleaseClient:
    app_config = ctx.find_root().obj
    config = app_config.releases if app_config is not None else ReleaseClientConfig()
    return ReleaseClient(config)


@releases.command(name="list")
@click.pass_context
def list_releases(ctx):
    """List releases of the configured repository."""
    try:
        with _release_client(ctx) as client:
            for release in client.fetch_releases():
                flags = " (prerelease)" if release.prerelease else ""
                click.echo(f"{release.tag_name}{flags}: {len(release.assets)} assets")
    except ReleaseError as e:
        logger.exception(f"Listing releases failed: {e}")
        sys.exit(1)


@releases.command(name="download")
@click.argument("tag")
@click.argument("asset_name")
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to write the asset into",
)
@click.pass_context
def download(ctx, tag, asset_name, output):
    """Download ASSET_NAME from the release tagged TAG."""
    try:
        with _release_client(ctx) as client:
            release = client.fetch_release(tag)
            path = client.fetch_release_asset(release, asset_name, output)
    except ReleaseError as e:
        logger.exception(f"Download failed: {e}")
        sys.exit(1)

    click.echo(f"✅ Downloaded {path}")


if __name__ == "__main__":
    cli()
