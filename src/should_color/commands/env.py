"""Environment inspection command."""

from os import environ

from click import Choice, echo
from utz.cli import opt

from ..env import VARIABLES, SignalConfig, read_signals


def env(ignore: tuple[str, ...]) -> None:
    """Print each recognized environment variable and the signal read from it.

    Usage:
        should-color env
        NO_COLOR= CLICOLOR=0 should-color env
    """
    signals = read_signals(config=SignalConfig().without(ignore))
    for name in VARIABLES:
        value = environ.get(name)
        raw = 'unset' if value is None else repr(value)
        if name in ignore:
            echo(f"{name}: {raw} (ignored)")
            continue
        signal = getattr(signals, name.lower())
        echo(f"{name}: {raw} -> {'no opinion' if signal is None else str(signal).lower()}")


def register(cli):
    """Register command with CLI."""
    cli.command(name='env')(
        opt('-i', '--ignore', type=Choice(VARIABLES), multiple=True, help='Do not recognize this environment variable (repeatable)')(
            env
        )
    )
