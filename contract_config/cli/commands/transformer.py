# contract_config/cli/commands/transformer.py

"""
Transformer CLI commands

Resolve the contracts a transformer indexes and validate that they share
one ABI.
"""

import click

from ...core.errors import ContractConfigError


@click.group()
def transformer():
    """Inspect transformer contract mappings"""
    pass


@transformer.command('list')
@click.pass_context
def list_transformers(ctx):
    """List configured transformer labels"""
    cli_context = ctx.obj['cli_context']

    try:
        labels = cli_context.accessor.transformer_labels()
    except ContractConfigError as e:
        raise click.ClickException(str(e))

    if not labels:
        click.echo("No transformers configured")
        return

    for label in labels:
        click.echo(label)


@transformer.command('show')
@click.argument('label')
@click.pass_context
def show(ctx, label):
    """Show contracts, addresses and starting block for a transformer"""
    try:
        accessor = ctx.obj['cli_context'].accessor
        names = accessor.transformer_contract_names(label)
        addresses = accessor.contract_addresses(names)
        start_block = accessor.min_deployment_block(names)
    except ContractConfigError as e:
        raise click.ClickException(str(e))

    click.echo(f"Transformer: {label}")
    click.echo(f"Start block: {start_block}")
    click.echo("Contracts:")
    for name, address in zip(names, addresses):
        click.echo(f"  {name:<30} {address}")


@transformer.command('check')
@click.argument('label')
@click.option('--strict', is_flag=True, help='Also flag methods and events only present in later contracts')
@click.pass_context
def check(ctx, label, strict):
    """Verify every contract of a transformer shares the first contract's ABI"""
    try:
        accessor = ctx.obj['cli_context'].accessor
        names = accessor.transformer_contract_names(label)
        accessor.matching_abi_for_contracts(names, strict=strict)
    except ContractConfigError as e:
        raise click.ClickException(str(e))

    click.echo(f"ABIs match for {len(names)} contract(s) of transformer {label}")
