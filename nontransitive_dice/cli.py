#!/usr/bin/env python3
"""
Command-line entry point for the non-transitive dice game.
"""

import click

from . import __version__
from .commitment import CommitmentGenerator
from .dice import DiceParser
from .errors import ArgumentError, EntropySourceUnavailable, UserCancelled
from .fair_random import FairInteraction
from .game import GameController
from .logging_config import set_level, setup_logger
from .probability import HelpTableGenerator
from .ui import ConsoleUI

logger = setup_logger(__name__)


@click.command(context_settings={"ignore_unknown_options": True})
@click.version_option(version=__version__)
@click.option('--faces', type=int, default=None,
              help='Required number of faces per die (default: taken from the first die)')
@click.option('--log-level', default=None,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Set logging level (default: LOG_LEVEL env var or WARNING)')
@click.argument('dice', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx, faces, log_level, dice):
    """ Non-Transitive Dice - a provably fair dice game against the computer.

    Each DICE argument is one die given as comma-separated integer faces, e.g.

        nontransitive-dice 2,2,4,4,9,9 1,1,6,6,8,8 3,3,5,5,7,7
    """
    if log_level:
        set_level(log_level)
    ArgumentError.set_program_name(ctx.command_path)

    try:
        dice_set = DiceParser.parse(list(dice), face_count=faces)
    except ArgumentError as e:
        logger.info(f"Rejected arguments: {e.message}")
        click.echo(e, err=True)
        ctx.exit(1)

    try:
        with ConsoleUI() as ui:
            interaction = FairInteraction(CommitmentGenerator(), ui)
            controller = GameController(dice_set, ui, interaction, HelpTableGenerator())
            outcome = controller.run()
            logger.debug(f"Game finished in state {outcome.state.name}")
    except (UserCancelled, KeyboardInterrupt):
        click.echo("\nGame interrupted. Goodbye!")
    except EntropySourceUnavailable as e:
        logger.error(f"Aborting game: {e}")
        click.echo(f"Fatal error: {e}", err=True)
        ctx.exit(1)


def main():
    cli()


if __name__ == '__main__':
    main()
