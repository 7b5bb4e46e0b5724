"""Terminal-backed Console using click's single-character input."""

import click

from mdb_publish.gateway.console.abc import Console


class InteractiveConsole(Console):
    def confirm(self, prompt: str) -> bool:
        click.echo(f"{prompt} [y/N] ", nl=False, err=True)
        answer = click.getchar()
        click.echo(err=True)
        return answer in ("y", "Y")
