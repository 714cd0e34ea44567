#!/usr/bin/env -S uv run --script

# /// script
# requires-python = ">=3.12"
# dependencies = [
#     "click>=8.2",
# ]
# ///

import sys

import click


class VerbatimCommand(click.Command):
    """Command that hands every token to the callback as ``names``.

    Click's parser is skipped entirely, so ``--`` and option-like tokens
    arrive exactly as typed.
    """

    def parse_args(self, ctx, args):
        ctx.params["names"] = tuple(args)
        ctx.args = []
        return []


@click.command(cls=VerbatimCommand, add_help_option=False)
def greet(names: tuple[str, ...]) -> None:
    """Greet the first NAME given on the command line.

    Any further arguments are ignored. Option-like tokens are greeted
    verbatim, so there is no --help.
    """
    if not names:
        click.echo("not enough arguments", err=True)
        sys.exit(1)

    # Keep escape sequences in the name untouched when piped.
    click.echo(f"hello {names[0]}", color=True)


if __name__ == "__main__":
    greet()
