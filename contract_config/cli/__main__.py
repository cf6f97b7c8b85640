# contract_config/cli/__main__.py

"""
Contract configuration CLI

Usage: python -m contract_config.cli [--config PATH] [command] [options]

Inspects the contracts and transformers declared in the configuration file
and checks that contracts sharing a transformer expose matching ABIs.
"""

import click
from pathlib import Path

from contract_config.cli.context import CLIContext
from contract_config.core.logging import ContractConfigLogger
from contract_config.core.settings import Settings


@click.group()
@click.option('--config', 'config_file', type=click.Path(dir_okay=False, path_type=Path),
              help='Configuration file (defaults to CONTRACT_CONFIG_FILE or ./config.*)')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx, config_file, verbose):
    """Contract configuration inspection and validation"""
    ctx.ensure_object(dict)

    settings = Settings.from_env()
    ContractConfigLogger.configure(
        log_dir=settings.log_dir,
        log_level="DEBUG" if verbose else settings.log_level,
        console_enabled=settings.log_console,
        file_enabled=settings.log_file,
        structured_format=settings.log_structured,
    )

    ctx.obj['verbose'] = verbose
    ctx.obj['cli_context'] = CLIContext(config_file=config_file, settings=settings)


from contract_config.cli.commands.transformer import transformer
from contract_config.cli.commands.contract import contract

cli.add_command(transformer)
cli.add_command(contract)


def main():
    cli(obj={})


if __name__ == '__main__':
    main()
