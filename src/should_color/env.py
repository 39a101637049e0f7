"""Read the NO_COLOR, CLICOLOR, and CLICOLOR_FORCE environment variables.

Each reader returns a tri-state signal: `None` when the variable expresses no
opinion, otherwise a boolean. Variables set to the empty string are treated as
unset, so that `VAR= cmd args...` behaves like `VAR` was never exported.

See <https://no-color.org> and <https://bixense.com/clicolors/>.
"""

from dataclasses import dataclass
from os import environ as os_environ
from typing import Iterable, Mapping, Optional

NO_COLOR = 'NO_COLOR'
CLICOLOR = 'CLICOLOR'
CLICOLOR_FORCE = 'CLICOLOR_FORCE'

VARIABLES = (CLICOLOR_FORCE, CLICOLOR, NO_COLOR)

Environ = Mapping[str, str]


def get_var(name: str, environ: Optional[Environ] = None) -> Optional[str]:
    """Look up `name`, returning None when it is unset or empty."""
    if environ is None:
        environ = os_environ
    value = environ.get(name)
    return value or None


def clicolor_force(environ: Optional[Environ] = None) -> Optional[bool]:
    """Get the setting of CLICOLOR_FORCE.

    - unset, `""` or `"0"`: None
    - anything else: True (force colors on)
    """
    value = get_var(CLICOLOR_FORCE, environ)
    if value is None or value == '0':
        return None
    return True


def clicolor(environ: Optional[Environ] = None) -> Optional[bool]:
    """Get the setting of CLICOLOR.

    - unset or `""`: None
    - `"0"`: False (never)
    - anything else: True (auto)
    """
    value = get_var(CLICOLOR, environ)
    if value is None:
        return None
    return value != '0'


def no_color(environ: Optional[Environ] = None) -> Optional[bool]:
    """Get the setting of NO_COLOR: True if set to a non-empty value, else None."""
    if get_var(NO_COLOR, environ) is None:
        return None
    return True


@dataclass(frozen=True)
class SignalConfig:
    """Which environment variables are recognized."""
    no_color: bool = True
    clicolor: bool = True
    clicolor_force: bool = True

    @classmethod
    def from_names(cls, names: Iterable[str]) -> 'SignalConfig':
        """Build a config recognizing only the variables in `names`."""
        names = set(names)
        unknown = names - set(VARIABLES)
        if unknown:
            raise ValueError(f"Unknown variable(s): {', '.join(sorted(unknown))}")
        return cls(
            no_color=NO_COLOR in names,
            clicolor=CLICOLOR in names,
            clicolor_force=CLICOLOR_FORCE in names,
        )

    def without(self, names: Iterable[str]) -> 'SignalConfig':
        """Copy of this config with the variables in `names` disabled."""
        enabled = set(self.names)
        return SignalConfig.from_names(enabled - set(names))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(name for name in VARIABLES if getattr(self, name.lower()))


@dataclass(frozen=True)
class Signals:
    """The three tri-state signals read from the environment."""
    no_color: Optional[bool] = None
    clicolor: Optional[bool] = None
    clicolor_force: Optional[bool] = None


def read_signals(
    environ: Optional[Environ] = None,
    config: Optional[SignalConfig] = None,
) -> Signals:
    """Read all recognized variables at once; disabled ones yield None."""
    if config is None:
        config = SignalConfig()
    return Signals(
        no_color=no_color(environ) if config.no_color else None,
        clicolor=clicolor(environ) if config.clicolor else None,
        clicolor_force=clicolor_force(environ) if config.clicolor_force else None,
    )
