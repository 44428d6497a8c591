"""
Centralized logging using Loguru with context-aware verbosity.

LOG() respects the verbosity of whatever object was last connected with
state_connectToLogger(): the CLI's ProgramState while its stages run, then
the RenderContext that a Compiler connects for the page it renders.

Usage:
    from zenaui.lib.log import LOG, state_connectToLogger

    state_connectToLogger(state)

    LOG("Compiled page", level=1)
    LOG("Variant 'lg' unknown, using fallback 'md'", level=2)
    LOG("Rendering zu-alert-1", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# Object carrying a `verbosity` attribute (ProgramState or RenderContext)
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <7}</level> │ "
    "<cyan>{function: <22}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="TRACE")

# LOG verbosity level -> loguru level name
_LEVELS = {1: "INFO", 2: "DEBUG", 3: "TRACE"}


def state_connectToLogger(state: Any) -> None:
    """
    Connect a state or render context to the logging context.

    Args:
        state: Any object with a `verbosity` attribute
    """
    _program_state.set(state)


def verbosity_get() -> int:
    """Verbosity of the connected state, 0 when nothing is connected"""
    state = _program_state.get()
    return getattr(state, 'verbosity', 0) if state is not None else 0


def LOG(message: str, level: int = 1, warning: bool = False, **kwargs: Any) -> None:
    """
    Log message if the connected state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=trace)
        warning: Emit at WARNING level (still gated by verbosity)
        **kwargs: Additional loguru metadata

    Example:
        LOG("Page written", level=1)
        LOG("Theme 'admin' loaded", level=2)
    """
    if verbosity_get() < level:
        return
    name = "WARNING" if warning else _LEVELS.get(level, "TRACE")
    logger.opt(depth=1).log(name, message, **kwargs)
