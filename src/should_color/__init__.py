"""should-color: Determine whether output should use colors or not."""

__version__ = "0.5.2"

from .choice import CHOICES, ColorChoice, is_terminal
from .env import (
    CLICOLOR,
    CLICOLOR_FORCE,
    NO_COLOR,
    SignalConfig,
    Signals,
    clicolor,
    clicolor_force,
    no_color,
    read_signals,
)
from .precedence import (
    Resolution,
    click_color,
    explain,
    explain_env,
    resolve,
    resolve_all,
    resolve_or,
)
from .color import should_use_color
from .cli import cli

__all__ = [
    "cli",
    "should_use_color",
    "CHOICES",
    "ColorChoice",
    "is_terminal",
    "CLICOLOR",
    "CLICOLOR_FORCE",
    "NO_COLOR",
    "SignalConfig",
    "Signals",
    "clicolor",
    "clicolor_force",
    "no_color",
    "read_signals",
    "Resolution",
    "click_color",
    "explain",
    "explain_env",
    "resolve",
    "resolve_all",
    "resolve_or",
]
