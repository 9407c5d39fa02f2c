"""Typer application for the zodiac-mapper CLI."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import List, Optional

import typer

from ..boot import configure_logging
from ..config import ZodiacMatcherOptions
from ..dates import ZodiacDateError, get_zodiac_date_range, get_zodiac_sign_from_date
from ..matcher import (
    find_all_zodiac_in_text,
    find_first_zodiac_in_text,
    get_supported_locales,
    get_zodiac_names,
    get_zodiac_sign,
)
from ..signs import ZodiacSign, coerce_sign

app = typer.Typer(help="Map zodiac names, mentions and dates to signs.")

_INCLUDE_HELP = "Only use aliases from this locale (repeatable)."
_EXCLUDE_HELP = "Ignore aliases from this locale (repeatable)."


def _options(
    include: Optional[List[str]], exclude: Optional[List[str]]
) -> Optional[ZodiacMatcherOptions]:
    if not include and not exclude:
        return None
    return ZodiacMatcherOptions(include_locales=include or None, exclude_locales=exclude or None)


def _resolve_sign_argument(value: str) -> ZodiacSign:
    resolved = coerce_sign(value) or get_zodiac_sign(value)
    if resolved is None:
        raise typer.BadParameter(f"Unknown zodiac sign '{value}'.")
    return resolved


@app.command("sign")
def sign(
    name: str = typer.Argument(..., help="Alias to resolve, e.g. 'Bélier' or '♈'."),
    include: Optional[List[str]] = typer.Option(None, "--include", "-i", help=_INCLUDE_HELP),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", "-x", help=_EXCLUDE_HELP),
) -> None:
    """Resolve a single alias to its zodiac sign."""

    resolved = get_zodiac_sign(name, _options(include, exclude))
    if resolved is None:
        typer.secho(f"No zodiac sign matches '{name}'.", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    typer.echo(resolved.value)


@app.command("scan")
def scan(
    text: str = typer.Argument(..., help="Text to search for zodiac mentions."),
    first: bool = typer.Option(False, "--first", help="Stop after the first mention."),
    json_output: bool = typer.Option(False, "--json", help="Emit matches as JSON."),
    include: Optional[List[str]] = typer.Option(None, "--include", "-i", help=_INCLUDE_HELP),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", "-x", help=_EXCLUDE_HELP),
) -> None:
    """List zodiac mentions found in TEXT."""

    options = _options(include, exclude)
    if first:
        found = find_first_zodiac_in_text(text, options)
        matches = [found] if found is not None else []
    else:
        matches = find_all_zodiac_in_text(text, options)

    if json_output:
        payload = [{**asdict(match), "sign": match.sign.value} for match in matches]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return
    if not matches:
        typer.echo("No zodiac mentions found.")
        return
    for match in matches:
        typer.echo(f"{match.index}\t{match.sign.value}\t{match.match}")


@app.command("date")
def date_sign(
    value: str = typer.Argument(..., metavar="DATE", help="Date as YYYY-MM-DD or MM-DD."),
) -> None:
    """Print the tropical zodiac sign for a calendar date."""

    try:
        resolved = get_zodiac_sign_from_date(value)
    except ZodiacDateError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc
    typer.echo(resolved.value)


@app.command("range")
def date_range(
    sign_name: str = typer.Argument(..., metavar="SIGN", help="Sign identifier or alias."),
) -> None:
    """Print the inclusive date range of a sign as MM-DD..MM-DD."""

    window = get_zodiac_date_range(_resolve_sign_argument(sign_name))
    typer.echo(
        f"{window.start.month:02d}-{window.start.day:02d}.."
        f"{window.end.month:02d}-{window.end.day:02d}"
    )


@app.command("names")
def names(
    sign_name: str = typer.Argument(..., metavar="SIGN", help="Sign identifier or alias."),
    locale: str = typer.Argument(..., help="Locale tag, e.g. 'fr' or 'zh-CN'."),
) -> None:
    """List the aliases of a sign in one locale."""

    aliases = get_zodiac_names(_resolve_sign_argument(sign_name), locale)
    if not aliases:
        typer.secho(f"No aliases for locale '{locale}'.", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(1)
    for alias in aliases:
        typer.echo(alias)


@app.command("locales")
def locales() -> None:
    """List the locale keys available in the alias table."""

    for key in get_supported_locales():
        typer.echo(key)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (defaults to $LOG_LEVEL, then WARNING)."
    ),
) -> None:
    """Configure logging before executing subcommands."""

    configure_logging(level=log_level)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()
