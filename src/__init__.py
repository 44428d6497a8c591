"""
zenaui - Declarative UI components for ZenaManage screens

Server-rendered Tailwind/Alpine components with typed options, variant
tables, conditional sections and per-instance toggle state.
"""

__version__ = "1.0.0"

from .lib import ComponentRenderer, ComponentRegistry, Compiler, PageParser, LOG, state_connectToLogger
from .models import RenderContext

__all__ = [
    "ComponentRenderer",
    "ComponentRegistry",
    "Compiler",
    "PageParser",
    "RenderContext",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
