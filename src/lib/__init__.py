"""
zenaui - Declarative UI components for ZenaManage screens

Option resolution, variant mapping, conditional rendering and client toggle
state for server-rendered Tailwind/Alpine components.
"""

__version__ = "1.0.0"

from .options import options_resolve, value_isBlank, ComponentError, InvalidOptionType
from .variants import variant_map, classes_join
from .markup import sections_decide, section_isPresent, attributes_merge
from .toggle import ToggleState, toggle_flip
from .components import ComponentRegistry
from .renderer import ComponentRenderer, RenderedComponent
from .parser import PageParser, PageSyntaxError
from .compiler import Compiler
from .theme import Theme, ThemeError
from .log import LOG, state_connectToLogger

__all__ = [
    "options_resolve",
    "value_isBlank",
    "ComponentError",
    "InvalidOptionType",
    "variant_map",
    "classes_join",
    "sections_decide",
    "section_isPresent",
    "attributes_merge",
    "ToggleState",
    "toggle_flip",
    "ComponentRegistry",
    "ComponentRenderer",
    "RenderedComponent",
    "PageParser",
    "PageSyntaxError",
    "Compiler",
    "Theme",
    "ThemeError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
