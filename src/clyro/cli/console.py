"""Console output helpers: bulleted, coloured status lines and boxes."""
from __future__ import annotations

import click


def _line(message: str, color: str, err: bool = False) -> None:
    bullet = click.style("•", dim=True)
    click.echo(f"{bullet} {click.style(message, fg=color)}", err=err)


def info(message: str) -> None:
    _line(message, "cyan")


def success(message: str) -> None:
    _line(message, "green")


def warn(message: str) -> None:
    _line(message, "yellow")


def error(message: str) -> None:
    _line(message, "red", err=True)


def blank() -> None:
    click.echo()


def box(title: str, lines: list[str], color: str = "blue") -> None:
    """Print *title* and *lines* inside a rounded box."""
    body = [click.style(title, fg=color, bold=True), ""]
    body += [click.style(f"  • {line}", fg=color) for line in lines]
    width = max(len(click.unstyle(b)) for b in body) + 2
    click.echo(click.style("╭" + "─" * width + "╮", fg=color))
    for row in body:
        pad = width - len(click.unstyle(row)) - 1
        click.echo(
            click.style("│", fg=color) + " " + row + " " * pad + click.style("│", fg=color)
        )
    click.echo(click.style("╰" + "─" * width + "╯", fg=color))


BANNER = r"""
      _
  ___| |_   _ _ __ ___
 / __| | | | | '__/ _ \
| (__| | |_| | | | (_) |
 \___|_|\__, |_|  \___/
        |___/
"""


def banner(version: str) -> None:
    click.secho(BANNER, fg="cyan")
    box(
        "clyro UI",
        [
            "A UI component library for modern web apps.",
            f"Version: v{version}",
            "Repo: https://github.com/devsToolKit/clyro",
        ],
        color="cyan",
    )
