"""Show how output colorization resolves in the current environment.

The color choice is determined, in order of priority from higher to lower, by:
- the CLICOLOR_FORCE environment variable,
- the -c/--color option,
- the CLICOLOR environment variable,
- the NO_COLOR environment variable,
- the -d/--default option.

Try it with/without the environment variables, with/without --color, and
piping stdout (`| cat`) or both stdout and stderr (`|& cat`):

    CLICOLOR_FORCE=1 should-color demo --color=never | cat
    NO_COLOR=1 should-color resolve --stream both
"""

import sys

from click import Choice, echo, group, style
from utz import err
from utz.cli import flag, opt

from .choice import CHOICES, ColorChoice
from .env import VARIABLES, SignalConfig
from .precedence import click_color, explain_env


# Common option decorators
color_opt = opt('-c', '--color', type=Choice(CHOICES), default=None, help='Explicit color preference; overrides CLICOLOR and NO_COLOR, but not CLICOLOR_FORCE')
default_opt = opt('-d', '--default', type=Choice(CHOICES), default=ColorChoice.AUTO.value, help='Choice to use when nothing else expresses a preference (default: auto)')
ignore_opt = opt('-i', '--ignore', type=Choice(VARIABLES), multiple=True, help='Do not recognize this environment variable (repeatable)')
verbose_flag = flag('-v', '--verbose', help='Report which source decided the color choice')


def common_opts(func):
    """Apply common options to all commands."""
    func = color_opt(func)
    func = default_opt(func)
    func = ignore_opt(func)
    func = verbose_flag(func)
    return func


def resolve_choice(
    color: str | None,
    default: str,
    ignore: tuple[str, ...],
    verbose: bool,
) -> ColorChoice:
    config = SignalConfig().without(ignore)
    choice, source = explain_env(color, default, config=config)
    if verbose:
        if ignore:
            err(f"Ignoring: {', '.join(ignore)}")
        err(f"Color choice {choice} decided by {source}")
    return choice


@group(context_settings=dict(color=click_color()))
def cli():
    """Determine whether output should use colors or not."""
    pass


# Register env command
from .commands import env as env_module
env_module.register(cli)


@cli.command()
@common_opts
@opt('-s', '--stream', type=Choice(['stdout', 'stderr', 'both']), default=None, help='Print whether to colorize the given stream(s) instead of the choice')
def resolve(
    color: str | None,
    default: str,
    ignore: tuple[str, ...],
    verbose: bool,
    stream: str | None,
) -> None:
    """Print the resolved color choice (never, auto, or always)."""
    choice = resolve_choice(color, default, ignore, verbose)
    if stream is None:
        echo(choice.value)
        return

    if stream in ('stdout', 'both'):
        echo(f"stdout: {str(choice.for_stream(sys.stdout)).lower()}")
    if stream in ('stderr', 'both'):
        echo(f"stderr: {str(choice.for_stream(sys.stderr)).lower()}")


@cli.command()
@common_opts
def demo(
    color: str | None,
    default: str,
    ignore: tuple[str, ...],
    verbose: bool,
) -> None:
    """Print colorized sample lines to stdout and stderr.

    Each stream is colorized independently, depending on whether it is a terminal.
    """
    # Determine per-stream color BEFORE anything redirects the streams
    choice = resolve_choice(color, default, ignore, verbose)
    color_stdout = choice.for_stream(sys.stdout)
    color_stderr = choice.for_stream(sys.stderr)

    echo(f"       color = {color}")
    echo(f"color_choice = {choice}")

    echo(
        f"{style('Colorize stdout', fg='bright_green', italic=True)}: "
        f"{style(str(color_stdout).lower(), fg='bright_yellow')}",
        color=color_stdout,
    )
    echo(
        f"{style('Colorize stderr', fg='bright_red', underline=True)}: "
        f"{style(str(color_stderr).lower(), fg='bright_yellow')}",
        err=True,
        color=color_stderr,
    )


if __name__ == '__main__':
    cli()
