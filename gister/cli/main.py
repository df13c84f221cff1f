#!/usr/bin/env python3
"""
Command-line interface for gister.

Uploads files (or standard input) to a GitHub Gist and prints its URL:

    gister notes.txt script.py
    echo hello | gister -a -
    gister -u <gist-id> -d 'updated notes' notes.txt
"""

from __future__ import annotations

import traceback

import pydantic
import typer

from gister.cli.logger import CLILogger
from gister.config.base import GisterSettings, get_settings
from gister.exceptions import GistAPIError, GisterError, UsageError
from gister.services.upload import GistUploadService, UploadOptions

app = typer.Typer(
    name='gister',
    help='Upload files to a GitHub Gist',
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        settings = GisterSettings()
        typer.echo(f'{settings.APP_NAME} v{settings.VERSION}')
        raise typer.Exit()


@app.command()
def upload(
    ctx: typer.Context,
    files: list[str] | None = typer.Argument(
        None, help="Files to upload, or '-' for standard input", show_default=False
    ),
    update: str | None = typer.Option(None, '--update', '-u', help='ID of existing gist to update'),
    public: bool = typer.Option(False, '--public', '-p', help='Create a public gist (default: secret)'),
    anonymous: bool = typer.Option(False, '--anonymous', '-a', help="Don't send credentials"),
    description: str = typer.Option('', '--description', '-d', help='Gist description (default: file names)'),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
    version: bool = typer.Option(
        False, '--version', help='Show version and exit', callback=_version_callback, is_eager=True
    ),
) -> None:
    """Upload files to a GitHub Gist and print its URL.

    Credentials ('username:token') come from GISTER_GITHUB_TOKEN or ~/.gist.
    """
    logger = CLILogger(verbose=verbose)
    options = UploadOptions(
        paths=files or (),
        update_id=update,
        public=public,
        anonymous=anonymous,
        description=description,
    )

    try:
        settings = get_settings(GisterSettings)
        service = GistUploadService(settings=settings, logger=logger, stdin=typer.get_binary_stream('stdin'))
        result = service.upload(options)
    except UsageError as e:
        typer.echo(ctx.get_usage(), err=True)
        typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(e.exit_code)
    except GistAPIError as e:
        for field_error in e.field_errors:
            logger.error(str(field_error))
        typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(e.exit_code)
    except GisterError as e:
        typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(e.exit_code)
    except (FileNotFoundError, pydantic.ValidationError) as e:
        # Missing LOAD_ENV_FILE or an invalid setting
        typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except Exception as e:
        logger.error(f'Failed to upload gist: {e}')
        if verbose:
            traceback.print_exc()
        raise typer.Exit(1)

    typer.echo(result.url)


def main() -> None:
    """Entry point for CLI."""
    app()


if __name__ == '__main__':
    main()
