"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

import dataclasses
from functools import reduce
from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, Dict, Callable, TYPE_CHECKING
from dataclasses import dataclass, field

# Forward reference for type hint - avoid circular import
if TYPE_CHECKING:
    from .parser import Page


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the page compilation pipeline (state bus pattern).

    Each stage receives a copy of the state and adds fields as compilation
    progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, theme, outputSubdir, catalog
        - env_check: inputSourceFile, htmlOutputdir, envOK
        - source_parse: parsedPage
        - html_compile: compileResult, catalogFile
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the page .yaml file
        outputdir: Base output directory for compiled files
        verbosity: Logging verbosity level (1-3)
        inputFile: Input page filename (relative to inputdir)
        theme: Theme name from the CLI; overrides the page's meta.theme
        outputSubdir: Subdirectory within outputdir for output
        catalog: Also write the component catalog (catalog.yaml)
        envOK: Environment validation passed
        inputSourceFile: Resolved path to input page file
        htmlOutputdir: Final output directory (outputdir + outputSubdir)
        parsedPage: Parsed page (meta + component nodes)
        compileResult: Compilation results (output_file, component_count, status)
        catalogFile: Path of the written catalog, if requested
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    theme: Optional[str] = field(default=None)
    outputSubdir: str = field(default=".")
    catalog: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    htmlOutputdir: Path = field(default=Path("/"))
    parsedPage: Optional[Any] = field(default=None)  # Page at runtime
    compileResult: Optional[Dict] = field(default=None)
    catalogFile: Optional[Path] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (inputFile, theme, etc.)
            inputdir: Directory containing page files
            outputdir: Directory for compilation output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        # Only keep CLI options that are ProgramState fields
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}
        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            source_parse,
            html_compile,
            results_report
        )

    This is equivalent to:
        results_report(html_compile(source_parse(env_check(initial_state))))
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
