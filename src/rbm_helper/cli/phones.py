"""CLI: rbm capability|users|invite|typing|read"""

import click
from rich.console import Console
from rich.table import Table

console = Console()


def _call(operation):
    from rbm_helper.cli.main import _call
    return _call(operation)


def _print_result(result, json_output):
    from rbm_helper.cli.main import _print_result
    _print_result(result, json_output)


@click.command("capability")
@click.argument("msisdn")
@click.option("--json-output", "--json", is_flag=True)
def capability_cmd(msisdn, json_output):
    """Check whether a device supports RBM."""
    result = _call(lambda client: client.check_capability(msisdn))
    _print_result(result, json_output)


@click.command("users")
@click.argument("msisdns", nargs=-1, required=True)
@click.option("--json-output", "--json", is_flag=True)
def users_cmd(msisdns, json_output):
    """Batch reachability check (up to 10,000 numbers)."""
    result = _call(lambda client: client.get_users(list(msisdns)))
    if json_output:
        _print_result(result, True)
        return
    reachable = set(result.get("reachableUsers", []))
    table = Table(title=f"Reachability ({len(reachable)} of {len(msisdns)} reachable)")
    table.add_column("MSISDN", style="bold")
    table.add_column("Reachable")
    for msisdn in msisdns:
        table.add_row(msisdn, "[green]yes[/green]" if msisdn in reachable else "[red]no[/red]")
    console.print(table)


@click.command("invite")
@click.argument("msisdn")
def invite_cmd(msisdn):
    """Invite a device to become a tester of the agent."""
    _call(lambda client: client.send_tester_invite(msisdn))
    console.print(f"[green]Tester invite sent to {msisdn}.[/green]")


@click.command("typing")
@click.argument("msisdn")
def typing_cmd(msisdn):
    """Show the typing indicator on the device."""
    _call(lambda client: client.send_is_typing(msisdn))
    console.print("[dim]IS_TYPING sent.[/dim]")


@click.command("read")
@click.argument("msisdn")
@click.argument("message_id")
def read_cmd(msisdn, message_id):
    """Mark a user message as read."""
    _call(lambda client: client.send_read(msisdn, message_id))
    console.print(f"[dim]READ sent for {message_id}.[/dim]")
