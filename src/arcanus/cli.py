"""Console entry point for the password generator."""

from pathlib import Path
from typing import Optional

from loguru import logger
from rich.console import Console
from rich.table import Table
import typer

from arcanus.config import config
from arcanus.entities import ArcanusError, get_strength_label
from arcanus.entropy import check_entropy
from arcanus.generator import (
    generate_list,
    generate_numbers,
    generate_password,
    generate_specials,
    generate_word,
)
from arcanus.random_source import RandomSource, build_random_source
from arcanus.storage import read_list, save_list


app = typer.Typer(no_args_is_help=True, help="Arcanus password generator.")

_console = Console(highlight=False)


def _fail(error: ArcanusError) -> typer.Exit:
    logger.debug(f"Command failed with {error.kind}: {error.message}")
    _console.print(f"[red]{error.message}[/red]")
    return typer.Exit(code=1)


def _source(ctx: typer.Context) -> RandomSource:
    return ctx.obj


def _print_passwords(passwords: list[str], title: str) -> None:
    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Password", style="bright_green", no_wrap=True)
    table.add_column("Bits", justify="right")
    table.add_column("Strength", style="white")

    for index, password in enumerate(passwords, start=1):
        result = check_entropy(password)
        table.add_row(
            str(index),
            password,
            str(result.bits),
            get_strength_label(result.strength),
        )
    _console.print(table)


@app.callback()
def main(
    ctx: typer.Context,
    source: Optional[str] = typer.Option(
        None,
        "--source",
        help="Random source: 'secure' (OS CSPRNG) or 'fast' (not for real credentials).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed for the fast generator (reproducible output)."
    ),
) -> None:
    if seed is None:
        seed = config.random_seed
    try:
        ctx.obj = build_random_source(source or config.random_source, seed=seed)  # type: ignore[arg-type]
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--source") from e
    logger.debug(f"Using {ctx.obj}")


@app.command()
def word(ctx: typer.Context, length: int = typer.Argument(13)) -> None:
    """Generate a pronounceable word of LENGTH letters (13-64)."""
    try:
        _console.print(generate_word(length, source=_source(ctx)))
    except ArcanusError as e:
        raise _fail(e) from e


@app.command()
def numbers(ctx: typer.Context, length: int = typer.Argument(4)) -> None:
    """Generate LENGTH digits (1-4)."""
    try:
        _console.print(generate_numbers(length, source=_source(ctx)))
    except ArcanusError as e:
        raise _fail(e) from e


@app.command()
def special(ctx: typer.Context) -> None:
    """Generate a single symbol."""
    _console.print(generate_specials(source=_source(ctx)), markup=False)


@app.command()
def password(
    ctx: typer.Context,
    length: Optional[int] = typer.Option(None, "--length", "-l", help="16-64."),
) -> None:
    """Generate one password."""
    try:
        _console.print(generate_password(length, source=_source(ctx)), markup=False)
    except ArcanusError as e:
        raise _fail(e) from e


@app.command("list")
def list_(
    ctx: typer.Context,
    count: Optional[int] = typer.Option(None, "--count", "-c", help="16-255."),
    length: Optional[int] = typer.Option(None, "--length", "-l", help="16-64."),
    save: Optional[Path] = typer.Option(
        None, "--save", "-s", help="Write the list to this file."
    ),
) -> None:
    """Generate a list of passwords, optionally saving it."""
    try:
        passwords = generate_list(count, length=length, source=_source(ctx))
        _print_passwords(passwords, title=f"{len(passwords)} passwords")
        if save is not None:
            save_list(passwords, save)
            _console.print(f"[green]Saved to {save}[/green]")
    except ArcanusError as e:
        raise _fail(e) from e


@app.command()
def read(path: Path) -> None:
    """Read a saved password list."""
    try:
        passwords = read_list(path)
    except ArcanusError as e:
        raise _fail(e) from e

    for line in passwords:
        _console.print(line, markup=False)


@app.command()
def entropy(password: str) -> None:
    """Estimate the entropy of PASSWORD (at least 16 characters)."""
    try:
        result = check_entropy(password)
    except ArcanusError as e:
        raise _fail(e) from e

    _console.print(
        f"{result.bits} bits - {get_strength_label(result.strength)}", markup=False
    )


@app.command()
def demo(ctx: typer.Context) -> None:
    """Run every generator once, then save and reload a list."""
    source = _source(ctx)
    _console.print("[bold]Arcanus password generator[/bold]")
    try:
        _console.print(f"Word: {generate_word(13, source=source)}", markup=False)
        _console.print(f"Numbers: {generate_numbers(4, source=source)}", markup=False)
        _console.print(f"Special: {generate_specials(source=source)}", markup=False)
        _console.print(f"Password: {generate_password(source=source)}", markup=False)
        _console.print(
            f"Password (32): {generate_password(32, source=source)}", markup=False
        )
        _print_passwords(generate_list(source=source), title="Default list")

        passwords = generate_list(32, source=source)
        _print_passwords(passwords, title="List of 32")
        save_list(passwords, config.passwords_file_path)
        reloaded = read_list(config.passwords_file_path)
    except ArcanusError as e:
        raise _fail(e) from e

    if reloaded == passwords:
        _console.print("[green]File read ok[/green]")
    else:
        _console.print("[yellow]File contents differ from the generated list[/yellow]")
