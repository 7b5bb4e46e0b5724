import logging
from pathlib import Path

import click

from mdb_publish.cli.output import user_output
from mdb_publish.core.context import create_context
from mdb_publish.core.errors import PublishError
from mdb_publish.core.publisher import report_success, run_release

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.command(name="mdb-publish", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="mdb-publish")
@click.option(
    "-l",
    "--update-latest",
    is_flag=True,
    help="Also point the remote 'latest' object at this release",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, update_latest: bool, debug: bool) -> None:
    """Publish a release build of mdb_v8.

    Checks that every per-architecture build is a release build, tags the
    version in git, and uploads the builds to the remote store under
    <root>/v<version>/.

    Prompts before continuing if the tag cannot be created, and before
    overwriting a version that is already published.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(Path.cwd())
        except ValueError as e:
            raise click.ClickException(str(e)) from e

    publish_ctx = ctx.obj
    try:
        result = run_release(publish_ctx, update_latest=update_latest)
    except PublishError as e:
        raise click.ClickException(str(e)) from e
    except KeyboardInterrupt:
        user_output("\n✗ Interrupted by user")
        raise SystemExit(130) from None

    report_success(result, publish_ctx.config.version_file)


def main() -> None:
    """CLI entry point used by the `mdb-publish` console script."""
    cli()
