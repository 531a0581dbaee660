"""CLI entry point for the translation client."""

import logging

import click
import requests

from . import __version__
from .auth import get_microsoft_access_token
from .config import TRANSLATION_QUOTES, TranslationConfig
from .core import BACKENDS, TranslationService
from .translation.batch import PARALLELIZATION_STRATEGIES

MISSING_MARKER = "<missing>"


@click.group()
@click.version_option(version=__version__)
def cli():
    """Translate text with Google Translate or Microsoft Translator."""
    pass


@cli.command()
@click.argument('texts', nargs=-1, required=True)
@click.option('--to', '-t', 'lang_to', required=True, help='Target language code')
@click.option('--from', '-f', 'lang_from', default='en', help='Source language code')
@click.option('--engine', '-e', type=click.Choice(list(BACKENDS)), default='google', help='Translation engine')
@click.option('--strategy', '-s', type=click.Choice(PARALLELIZATION_STRATEGIES), default='sequential', help='How to spread requests out')
@click.option('--api-key', default=None, help='API key (defaults to the engine environment variable)')
@click.option('--workers', type=int, default=None, help='Pool size for parallel strategies')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
def translate(
    texts: tuple[str, ...],
    lang_to: str,
    lang_from: str,
    engine: str,
    strategy: str,
    api_key: str,
    workers: int,
    verbose: bool
):
    """Translate TEXTS, printing one translation per line."""
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING)

    service = TranslationService(TranslationConfig(source_language=lang_from))
    try:
        result = service.translate_items(
            list(texts),
            lang_to,
            lang_from,
            api_key=api_key,
            parallelization_strategy=strategy,
            engine=engine,
            max_workers=workers
        )
    except requests.RequestException as e:
        click.secho(f"Error: could not reach {engine}: {e}", fg='red', err=True)
        raise SystemExit(1)

    for item in result.results:
        if item.ok:
            click.echo(item.text)
        else:
            click.secho(MISSING_MARKER, fg='yellow')

    if result.failed:
        click.echo(
            f"{result.failed} of {result.total} translations failed",
            err=True
        )
        if verbose:
            for item in result.results:
                if not item.ok:
                    click.secho(f"  [{item.index}] {item.error}", fg='red', err=True)
        raise SystemExit(1)


@cli.command()
@click.option('--engine', '-e', type=click.Choice(list(BACKENDS)), default='google', help='Translation engine')
def languages(engine: str):
    """List the languages an engine supports."""
    for name, code in BACKENDS[engine].languages.items():
        click.echo(f"{code:<10} {name.replace('_', ' ')}")


@cli.command()
@click.option('--api-key', default=None, help='Microsoft subscription key')
def token(api_key: str):
    """Check a Microsoft subscription key by requesting an access token."""
    try:
        access_token = get_microsoft_access_token(api_key)
    except requests.RequestException as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        raise SystemExit(1)

    click.secho("Access token issued.", fg='green')
    click.echo(f"  Valid until: {access_token.valid_until.isoformat()}")


@cli.command()
def quotes():
    """Print the bundled sample quotes."""
    for name, quote in TRANSLATION_QUOTES.items():
        click.echo(f"{name}: {quote}")


if __name__ == '__main__':
    cli()
