"""Resolve the output color choice.

In order of priority from higher to lower:

1. CLICOLOR_FORCE environment variable,
2. explicit user preference (for instance a `--color` option),
3. CLICOLOR environment variable,
4. NO_COLOR environment variable,
5. application default choice.

Each step is only consulted when every step above it expressed no opinion.
"""

from typing import NamedTuple, Optional, Union

from .choice import ColorChoice
from .env import (
    CLICOLOR,
    CLICOLOR_FORCE,
    NO_COLOR,
    Environ,
    SignalConfig,
    Signals,
    read_signals,
)

ChoiceLike = Union[ColorChoice, str]

CLI = 'cli'
DEFAULT = 'default'


class Resolution(NamedTuple):
    """A resolved choice and the name of the source that decided it.

    `source` is one of the variable names, `'cli'`, `'default'`, or None when
    nothing expressed an opinion and there was no default.
    """
    choice: Optional[ColorChoice]
    source: Optional[str]


def _parse(value: Optional[ChoiceLike]) -> Optional[ColorChoice]:
    return None if value is None else ColorChoice.parse(value)


def explain(
    default: Optional[ChoiceLike] = None,
    no_color: Optional[bool] = None,
    clicolor: Optional[bool] = None,
    clicolor_force: Optional[bool] = None,
    cli: Optional[ChoiceLike] = None,
) -> Resolution:
    """Run the precedence chain on explicit signals, reporting the deciding source."""
    if clicolor_force:
        return Resolution(ColorChoice.ALWAYS, CLICOLOR_FORCE)
    if cli is not None:
        return Resolution(_parse(cli), CLI)
    if clicolor is not None:
        return Resolution(ColorChoice.AUTO if clicolor else ColorChoice.NEVER, CLICOLOR)
    if no_color:
        return Resolution(ColorChoice.NEVER, NO_COLOR)
    if default is not None:
        return Resolution(_parse(default), DEFAULT)
    return Resolution(None, None)


def resolve_all(
    default: ChoiceLike,
    no_color: Optional[bool] = None,
    clicolor: Optional[bool] = None,
    clicolor_force: Optional[bool] = None,
    cli: Optional[ChoiceLike] = None,
) -> ColorChoice:
    """Resolve the color choice from explicitly provided signals.

    Does not touch the environment; useful for tests, or when the signals come
    from somewhere else (e.g. a config file).
    """
    return explain(_parse(default), no_color, clicolor, clicolor_force, cli).choice


def explain_env(
    cli: Optional[ChoiceLike] = None,
    default: Optional[ChoiceLike] = None,
    *,
    environ: Optional[Environ] = None,
    config: Optional[SignalConfig] = None,
) -> Resolution:
    """Like `explain`, reading the signals from the environment."""
    signals: Signals = read_signals(environ, config)
    return explain(
        default,
        no_color=signals.no_color,
        clicolor=signals.clicolor,
        clicolor_force=signals.clicolor_force,
        cli=cli,
    )


def resolve(
    cli: Optional[ChoiceLike] = None,
    *,
    environ: Optional[Environ] = None,
    config: Optional[SignalConfig] = None,
) -> Optional[ColorChoice]:
    """Resolve the color choice from the environment and an explicit preference.

    Returns None if no source expressed an opinion, leaving the default to the
    caller:

        choice = resolve(cli_color) or ColorChoice.AUTO
    """
    return explain_env(cli, environ=environ, config=config).choice


def resolve_or(
    default: ChoiceLike,
    cli: Optional[ChoiceLike] = None,
    *,
    environ: Optional[Environ] = None,
    config: Optional[SignalConfig] = None,
) -> ColorChoice:
    """Resolve the color choice, falling back to `default`."""
    return explain_env(cli, ColorChoice.parse(default), environ=environ, config=config).choice


def click_color(
    default: ChoiceLike = ColorChoice.AUTO,
    *,
    environ: Optional[Environ] = None,
    config: Optional[SignalConfig] = None,
) -> Optional[bool]:
    """Compute a value for click's `color` context setting from the environment.

        @click.group(context_settings=dict(color=click_color()))
        def cli(): ...
    """
    return resolve_or(default, environ=environ, config=config).to_click()
