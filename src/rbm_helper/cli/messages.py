"""CLI: rbm send|card|carousel|revoke"""

import json
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from rbm_helper.ids import new_id
from rbm_helper.models.intents import CardWidth
from rbm_helper.models.suggestions import SuggestedReply

console = Console()


def _call(operation):
    from rbm_helper.cli.main import _call
    return _call(operation)


def _print_result(result, json_output):
    from rbm_helper.cli.main import _print_result
    _print_result(result, json_output)


def _replies(suggestions: tuple[str, ...]) -> list[SuggestedReply]:
    return [SuggestedReply(text=s, postback_data=s) for s in suggestions]


def _report(msisdn: str, message_id: str, result, json_output: bool) -> None:
    if json_output:
        _print_result(result, True)
    else:
        console.print(f"[green]Sent {message_id} to {msisdn}.[/green]")


@click.command("send")
@click.argument("msisdn")
@click.argument("text", required=False)
@click.option("--file-url", default=None, help="Public URL of a media file")
@click.option("-s", "--suggestion", "suggestions", multiple=True, help="Suggested reply text")
@click.option("--json-output", "--json", is_flag=True)
def send_cmd(msisdn: str, text: Optional[str], file_url: Optional[str], suggestions, json_output: bool):
    """Send a text message."""
    message_id = new_id()
    result = _call(lambda client: client.send_message(
        msisdn, text, suggestions=_replies(suggestions), file_url=file_url, message_id=message_id,
    ))
    _report(msisdn, message_id, result, json_output)


@click.command("card")
@click.argument("msisdn")
@click.argument("image_url")
@click.option("--title", default=None)
@click.option("--description", default=None)
@click.option("-s", "--suggestion", "suggestions", multiple=True, help="Suggested reply text")
@click.option("--json-output", "--json", is_flag=True)
def card_cmd(msisdn, image_url, title, description, suggestions, json_output):
    """Send a standalone rich card."""
    message_id = new_id()
    result = _call(lambda client: client.send_rich_card(
        msisdn, image_url, title=title, description=description,
        suggestions=_replies(suggestions), message_id=message_id,
    ))
    _report(msisdn, message_id, result, json_output)


@click.command("carousel")
@click.argument("msisdn")
@click.argument("cards_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--width", type=click.Choice([w.value for w in CardWidth]), default=None)
@click.option("--json-output", "--json", is_flag=True)
def carousel_cmd(msisdn, cards_file, width, json_output):
    """Send a carousel; CARDS_FILE holds a JSON list of card contents."""
    try:
        cards = json.loads(Path(cards_file).read_text())
    except json.JSONDecodeError as e:
        console.print(f"[red]Cannot parse cards file {cards_file}: {e}[/red]")
        raise SystemExit(1)
    message_id = new_id()
    result = _call(lambda client: client.send_carousel_card(
        msisdn, cards, card_width=width, message_id=message_id,
    ))
    _report(msisdn, message_id, result, json_output)


@click.command("revoke")
@click.argument("msisdn")
@click.argument("message_id")
def revoke_cmd(msisdn, message_id):
    """Revoke a message that has not been delivered."""
    _call(lambda client: client.revoke_message(msisdn, message_id))
    console.print(f"[green]Message {message_id} revoked.[/green]")
