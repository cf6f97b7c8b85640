# contract_config/cli/commands/contract.py

import click

from ...contracts.compare import find_abi_mismatch
from ...core.errors import ContractConfigError


@click.group()
def contract():
    """Inspect configured contracts"""
    pass


@contract.command('list')
@click.pass_context
def list_contracts(ctx):
    """List configured contract names"""
    try:
        names = ctx.obj['cli_context'].accessor.contract_names()
    except ContractConfigError as e:
        raise click.ClickException(str(e))

    if not names:
        click.echo("No contracts configured")
        return

    for name in names:
        click.echo(name)


@contract.command('show')
@click.argument('name')
@click.pass_context
def show(ctx, name):
    """Show address, deployment block and ABI summary for a contract"""
    cli_context = ctx.obj['cli_context']

    try:
        descriptor = cli_context.accessor.contract(name)
        parsed = cli_context.registry.parsed_abi(name)
    except ContractConfigError as e:
        raise click.ClickException(str(e))

    click.echo(f"Contract: {descriptor.name}")
    click.echo(f"Address:  {descriptor.address}")
    click.echo(f"Deployed: {descriptor.deployed}")
    click.echo(f"Constructor: {parsed.constructor_signature() or '-'}")
    click.echo(f"Methods ({len(parsed.methods)}):")
    for method_name in sorted(parsed.methods):
        click.echo(f"  {parsed.method_signature(method_name)}")
    click.echo(f"Events ({len(parsed.events)}):")
    for event_name in sorted(parsed.events):
        click.echo(f"  {parsed.event_signature(event_name)}")


@contract.command('compare')
@click.argument('first')
@click.argument('second')
@click.option('--strict', is_flag=True, help='Also flag methods and events only present in SECOND')
@click.pass_context
def compare(ctx, first, second, strict):
    """Report the first ABI difference between two contracts"""
    try:
        registry = ctx.obj['cli_context'].registry
        mismatch = find_abi_mismatch(registry.parsed_abi(first), registry.parsed_abi(second), strict=strict)
    except ContractConfigError as e:
        raise click.ClickException(str(e))

    if mismatch is not None:
        raise click.ClickException(f"ABIs don't match for contracts: {first} and {second}. Reason: {mismatch}")

    click.echo(f"ABIs match for contracts: {first} and {second}")
