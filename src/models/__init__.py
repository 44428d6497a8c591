"""
Models package for zenaui

Contains data structures and type definitions for component rendering and
the page compilation pipeline.
"""

from .state import ProgramState, pipeline
from .options import OptionSpec, OptionSchema, ResolvedOptions, UNSET
from .variants import VariantTable, ClassBundle
from .toggle import ToggleKind, ToggleEvent, ToggleConfig
from .components import ComponentSpec, ComponentCategory, Section, RESERVED_OPTIONS
from .context import RenderContext
from .parser import ComponentNode, Page

__all__ = [
    "ProgramState",
    "pipeline",
    "OptionSpec",
    "OptionSchema",
    "ResolvedOptions",
    "UNSET",
    "VariantTable",
    "ClassBundle",
    "ToggleKind",
    "ToggleEvent",
    "ToggleConfig",
    "ComponentSpec",
    "ComponentCategory",
    "Section",
    "RESERVED_OPTIONS",
    "RenderContext",
    "ComponentNode",
    "Page",
]
