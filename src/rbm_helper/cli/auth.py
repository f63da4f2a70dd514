"""CLI: rbm auth use|status|clear"""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console

console = Console()


def _load_config() -> dict:
    from rbm_helper.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from rbm_helper.cli.main import _save_config
    _save_config(cfg)


def _credentials_file() -> Optional[str]:
    from rbm_helper.cli.main import _credentials_file
    return _credentials_file()


def _read_credentials(path: str) -> dict:
    from rbm_helper.cli.main import _read_credentials
    return _read_credentials(path)


@click.group()
def auth():
    """Credential commands."""


@auth.command("use")
@click.argument("key_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--base-url", default=None, help="RBM API base URL")
def auth_use(key_file: str, base_url: Optional[str]):
    """Use a service account key file for every command."""
    info = _read_credentials(key_file)
    cfg = _load_config()
    cfg["credentials_file"] = str(Path(key_file).resolve())
    if base_url:
        cfg["base_url"] = base_url
    _save_config(cfg)
    console.print(f"[green]Using service account {info.get('client_email', 'unknown')}[/green]")
    console.print("[dim]Saved to ~/.rbm/config.json[/dim]")


@auth.command("status")
def auth_status():
    """Show which credentials will be used."""
    path = _credentials_file()
    if path:
        info = _read_credentials(path)
        console.print(f"[green]Service account[/green] {info.get('client_email', 'unknown')} ({path})")
    else:
        console.print("[yellow]No key file configured; ambient credentials will be used.[/yellow]")


@auth.command("clear")
def auth_clear():
    """Forget the saved key file."""
    _save_config({})
    console.print("[green]Credentials cleared.[/green]")
