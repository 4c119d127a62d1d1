"""
CLI commands for releasing the library.

Typical release flow:

    easy-di-publish docs      # generate API docs and pack them
    easy-di-publish plan      # check dist/ holds wheel, sdist and docs archive
    easy-di-publish sign      # create detached gpg signatures
    easy-di-publish upload    # upload to the release or snapshot repository
"""

import json
import logging
import sys
from typing import Optional

import click

from easy_di.logging.logging_config import configure_logging
from easy_di.publishing.api_docs_generator import ApiDocsGenerator
from easy_di.publishing.artifact_signer import ArtifactSigner
from easy_di.publishing.config_loader import PublicationConfigLoader
from easy_di.publishing.docs_archive_builder import DocsArchiveBuilder
from easy_di.publishing.publication import Publication, PublicationPlanner
from easy_di.publishing.publication_config import PublicationConfig
from easy_di.publishing.publication_error import PublicationError
from easy_di.publishing.repository_uploader import RepositoryUploader

logger = logging.getLogger(__name__)


def _plan(config: PublicationConfig) -> Publication:
    return PublicationPlanner(config).plan()


def _fail(message: str) -> None:
    click.echo(f"❌ {message}", err=True)
    sys.exit(1)


def _load_config(ctx: click.Context) -> PublicationConfig:
    """Load the configuration on first use, so ``--help`` works without one."""
    if "config" not in ctx.obj:
        try:
            ctx.obj["config"] = PublicationConfigLoader.load_config(ctx.obj["config_path"])
        except (FileNotFoundError, ValueError) as e:
            _fail(f"Invalid publication configuration: {e}")
    return ctx.obj["config"]


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to publishing.yaml (default: $EASY_DI_PUBLISHING_CONFIG or ./publishing.yaml).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str], verbose: bool) -> None:
    """Release management commands."""
    configure_logging(verbose=verbose)
    ctx.obj = {"config_path": config_path}


@cli.command()
@click.pass_context
def plan(ctx: click.Context) -> None:
    """Show what would be published and where."""
    config = _load_config(ctx)
    try:
        publication = _plan(config)
    except PublicationError as e:
        _fail(str(e))
        return

    click.echo(json.dumps(publication.metadata(), indent=2))
    click.echo(f"Target repository: {publication.repository_url}")
    for artifact in publication.artifacts:
        click.echo(f"  {artifact.kind.value:<8} {artifact.path}")


@cli.command()
@click.option(
    "--generate/--no-generate",
    default=True,
    help="Generate the API documentation before packing (default) or pack docs_dir as is.",
)
@click.pass_context
def docs(ctx: click.Context, generate: bool) -> None:
    """Generate the API documentation and pack it into the docs archive."""
    config = _load_config(ctx)
    try:
        if generate:
            pages = ApiDocsGenerator(config).generate()
            click.echo(f"📚 Generated {len(pages)} documentation pages in {config.docs_dir}")
        archive = DocsArchiveBuilder(config).build()
    except PublicationError as e:
        _fail(str(e))
        return
    click.echo(f"✅ Documentation archive written to {archive}")


@cli.command()
@click.pass_context
def sign(ctx: click.Context) -> None:
    """Create detached signatures for all artifacts."""
    config = _load_config(ctx)
    try:
        publication = ArtifactSigner(config.signing).sign(_plan(config))
    except PublicationError as e:
        _fail(str(e))
        return
    for artifact in publication.artifacts:
        click.echo(f"✅ Signed {artifact.path.name}")


@cli.command()
@click.pass_context
def upload(ctx: click.Context) -> None:
    """Upload signed artifacts to the release or snapshot repository."""
    config = _load_config(ctx)
    try:
        publication = _plan(config)
        for artifact in publication.artifacts:
            signature = artifact.path.with_name(artifact.path.name + ".asc")
            if not signature.exists():
                raise PublicationError(
                    f"Missing signature for {artifact.path.name}. Run 'sign' first."
                )
            artifact.signature = signature

        urls = RepositoryUploader(config.repository).upload(publication)
    except PublicationError as e:
        _fail(str(e))
        return

    click.echo(f"✅ Uploaded {len(urls)} files to {publication.repository_url}")


if __name__ == "__main__":
    cli()
