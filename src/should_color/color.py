from typing import IO, Optional

from .choice import ColorChoice
from .env import Environ, SignalConfig
from .precedence import ChoiceLike, resolve_or


def should_use_color(
    color_option: Optional[ChoiceLike] = None,
    stream: Optional[IO] = None,
    *,
    default: ChoiceLike = ColorChoice.AUTO,
    environ: Optional[Environ] = None,
    config: Optional[SignalConfig] = None,
) -> bool:
    """Determine if color should be used based on option, environment, and TTY status of `stream`."""
    choice = resolve_or(default, color_option, environ=environ, config=config)
    return choice.for_stream(stream)
