"""
RBM helper CLI — `rbm` command.

Commands:
  rbm auth use <key.json>    Remember a service account key file
  rbm capability <msisdn>    Capability check
  rbm users <msisdn>...      Batch reachability check
  rbm invite <msisdn>        Invite a tester
  rbm typing|read            Agent events
  rbm send|card|carousel     Agent messages
  rbm revoke <msisdn> <id>   Revoke an undelivered message
"""

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install rbm-helper[cli]")

from rbm_helper.client import AsyncRbmHelper
from rbm_helper.errors import RbmError
from rbm_helper.transport.http import DEFAULT_BASE_URL

console = Console()
CONFIG_FILE = Path.home() / ".rbm" / "config.json"
CREDENTIALS_ENV = "RBM_CREDENTIALS_FILE"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _credentials_file() -> Optional[str]:
    return os.environ.get(CREDENTIALS_ENV) or _load_config().get("credentials_file")


def _read_credentials(path: str) -> dict[str, Any]:
    try:
        return json.loads(Path(path).read_text())
    except (OSError, json.JSONDecodeError) as e:
        console.print(f"[red]Cannot read credentials file {path}: {e}[/red]")
        raise SystemExit(1)


async def _get_client() -> AsyncRbmHelper:
    """Build and initialize a client from the saved key file, or ambient credentials."""
    cfg = _load_config()
    client = AsyncRbmHelper(base_url=cfg.get("base_url", DEFAULT_BASE_URL))
    path = _credentials_file()
    await client.initialize(_read_credentials(path) if path else None)
    return client


def _run(coro):
    try:
        return asyncio.run(coro)
    except RbmError as e:
        console.print(f"[red]{e.code}: {e}[/red]")
        raise SystemExit(1)


def _call(operation):
    """Run `operation(client)` against a fresh client and close it afterwards."""

    async def _go():
        client = await _get_client()
        try:
            return await operation(client)
        finally:
            await client.close()

    return _run(_go())


def _print_result(result: Any, json_output: bool) -> None:
    if json_output:
        click.echo(json.dumps(result, indent=2))
    else:
        console.print_json(data=result)


@click.group()
@click.version_option("0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Log API calls")
def main(verbose: bool):
    """RBM helper CLI — send RCS Business Messaging agent messages."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Register subcommands from separate modules
from rbm_helper.cli.auth import auth
from rbm_helper.cli.phones import capability_cmd, users_cmd, invite_cmd, typing_cmd, read_cmd
from rbm_helper.cli.messages import send_cmd, card_cmd, carousel_cmd, revoke_cmd

main.add_command(auth)
main.add_command(capability_cmd)
main.add_command(users_cmd)
main.add_command(invite_cmd)
main.add_command(typing_cmd)
main.add_command(read_cmd)
main.add_command(send_cmd)
main.add_command(card_cmd)
main.add_command(carousel_cmd)
main.add_command(revoke_cmd)


if __name__ == "__main__":
    main()
