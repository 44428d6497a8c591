#!/usr/bin/env python3
"""
zenaui - Declarative UI components for ZenaManage screens

Compiles a YAML page description (a list of component invocations with
options and nested slots) into a standalone, themed HTML page that uses
Tailwind for styling and Alpine.js for client toggle state.

This tool follows the ChRIS "plugin" pattern: positional input and output
directories plus options.

Usage:
    zenaui inputdir/ outputdir/ --inputFile page.yaml

Examples:
    # Basic compilation
    zenaui . output/ --inputFile dashboard.yaml

    # Admin theme into a subdirectory, with the component catalog
    zenaui . output/ --inputFile tenants.yaml --theme admin --outputSubdir admin/ --catalog

    # Verbose output
    zenaui . output/ --inputFile dashboard.yaml -vv
"""

import sys
import traceback
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

import yaml
from chris_plugin import chris_plugin

from .lib import Compiler, ComponentRegistry, PageParser, ThemeError, __version__, LOG, state_connectToLogger
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
   _____ _ __   __ _ _   _ (_)
  |_  / _ \ '_ \ / _` | | | | |
   / /  __/ | | | (_| | |_| | |
  /___\___|_| |_|\__,_|\__,_|_|

  Declarative UI components for ZenaManage
"""

# Define CLI arguments
parser = ArgumentParser(
    description="zenaui - compile YAML page descriptions into themed HTML pages",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Input page (.yaml) file (relative to inputdir)"
)

parser.add_argument(
    "--theme",
    default=None,
    type=str,
    help="Theme name; overrides the page's meta.theme and ZENAUI_DEFAULT_THEME",
)

parser.add_argument(
    "--outputSubdir",
    default=".",
    type=str,
    help="Subdirectory within outputdir for the compiled page",
)

parser.add_argument(
    "--catalog",
    action="store_true",
    default=False,
    help="Also write catalog.yaml listing every component, its options and variants",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve file paths.

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the page file
            - htmlOutputdir: Created output directory path
            - envOK: True if environment is valid

    Exits:
        1 if the input file is missing
    """
    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    input_file = state.inputdir / state.inputFile
    if not input_file.is_file():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    state.htmlOutputdir = state.outputdir / state.outputSubdir
    state.htmlOutputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.htmlOutputdir}", level=2)

    state.envOK = True
    return state


def source_parse(inputstate: ProgramState) -> ProgramState:
    """
    Read and parse the page file.

    Returns:
        ProgramState with added field:
            - parsedPage: Page (meta + component nodes)

    Exits:
        1 if the file cannot be read or the page is malformed
    """
    state = inputstate.copy()

    LOG("Reading page file...", level=1)
    try:
        source = state.inputSourceFile.read_text(encoding="utf-8")
        LOG(f"Read {len(source)} characters from {state.inputSourceFile.name}", level=2)
    except OSError as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)

    LOG("Parsing page...", level=1)
    try:
        state.parsedPage = PageParser(source, registry=ComponentRegistry()).parse()
        LOG(f"Parsed {len(state.parsedPage.nodes)} top-level components", level=2)
    except SyntaxError as e:
        print(f"Parse error: {e}", file=sys.stderr)
        sys.exit(1)
    return state


def html_compile(inputstate: ProgramState) -> ProgramState:
    """
    Render the parsed page to a standalone HTML page.

    Returns:
        ProgramState with added fields:
            - compileResult: dict with status, output_file, component_count
            - catalogFile: path of catalog.yaml when --catalog is given

    Exits:
        1 if parsedPage is missing or compilation fails
    """
    state = inputstate.copy()

    LOG("Compiling page to HTML...", level=1)

    if state.parsedPage is None:
        print("Error: No parsed page available", file=sys.stderr)
        sys.exit(1)

    try:
        compiler = Compiler(
            page=state.parsedPage,
            output_dir=str(state.htmlOutputdir),
            theme_name=state.theme,
            verbosity=state.verbosity,
        )
        state.compileResult = compiler.compile()
        LOG(f"Compilation complete: {state.compileResult['component_count']} components", level=2)
    except ThemeError as e:
        print(f"Theme error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Compilation error: {e}", file=sys.stderr)
        if state.verbosity >= 3:
            traceback.print_exc()
        sys.exit(1)

    if state.catalog:
        state.catalogFile = state.htmlOutputdir / "catalog.yaml"
        catalog = compiler.renderer.registry.catalog_build()
        state.catalogFile.write_text(yaml.safe_dump(catalog, sort_keys=False), encoding="utf-8")
        LOG(f"Wrote component catalog: {state.catalogFile}", level=2)

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display compilation results.

    Exits:
        1 if compileResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.compileResult:
        print("Error: Compilation failed", file=sys.stderr)
        sys.exit(1)

    LOG("✓ Compilation successful!", level=1)
    LOG(f"  Output: {state.compileResult['output_file']}", level=1)
    LOG(f"  Components: {state.compileResult['component_count']}", level=1)
    if state.catalogFile:
        LOG(f"  Catalog: {state.catalogFile}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="zenaui - Declarative UI component page compiler",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - compile a page file to HTML.

    Orchestrates the pipeline:
        1. env_check: Validate paths and environment
        2. source_parse: Read and parse the page file
        3. html_compile: Render components and write the page
        4. results_report: Display results to user

    Note:
        Wrapped by @chris_plugin, which parses the CLI and invokes this
        function with parsed values.
    """
    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, source_parse, html_compile, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
