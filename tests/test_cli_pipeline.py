"""
CLI pipeline tests

Runs the compilation stages the way main() chains them, on a page file in
a temporary input directory.
"""

import pytest
from pathlib import Path
import tempfile

import yaml

from zenaui.__main__ import env_check, source_parse, html_compile, results_report
from zenaui.models import ProgramState, pipeline


PAGE = """
meta: {title: Dashboard}
components:
  - kpi_strip:
      items:
        - {key: projects, label: Total Projects, value: 12, change: 8.5}
  - empty_state: {title: No projects yet}
"""


def state_make(tmpdir: str, **kwargs) -> ProgramState:
    root = Path(tmpdir)
    (root / "in").mkdir(exist_ok=True)
    return ProgramState(inputdir=root / "in", outputdir=root / "out", inputFile="page.yaml", verbosity=0, **kwargs)


class TestPipeline:
    """env_check → source_parse → html_compile → results_report"""

    def test_compiles_page(self):
        """A valid page produces index.html in the output subdirectory"""
        with tempfile.TemporaryDirectory() as tmpdir:
            state = state_make(tmpdir, outputSubdir="site")
            (state.inputdir / "page.yaml").write_text(PAGE, encoding='utf-8')

            final = pipeline(state, env_check, source_parse, html_compile, results_report)

            assert final.envOK is True
            assert final.compileResult['status'] is True
            assert final.compileResult['component_count'] == 2
            output = Path(tmpdir) / "out" / "site" / "index.html"
            assert output.exists()
            assert "No projects yet" in output.read_text(encoding='utf-8')
            assert final.catalogFile is None

    def test_catalog(self):
        """--catalog writes catalog.yaml next to the page"""
        with tempfile.TemporaryDirectory() as tmpdir:
            state = state_make(tmpdir, catalog=True)
            (state.inputdir / "page.yaml").write_text(PAGE, encoding='utf-8')

            final = pipeline(state, env_check, source_parse, html_compile)

            catalog = yaml.safe_load(final.catalogFile.read_text(encoding='utf-8'))
            names = [entry['name'] for entry in catalog]
            assert "alert" in names
            assert "kpi_strip" in names

    def test_stage_copies_state(self):
        """Stages return a new state and leave their input alone"""
        with tempfile.TemporaryDirectory() as tmpdir:
            state = state_make(tmpdir)
            (state.inputdir / "page.yaml").write_text(PAGE, encoding='utf-8')

            checked = env_check(state)

            assert checked is not state
            assert checked.envOK is True
            assert state.envOK is False

    def test_missing_input_exits(self):
        """A missing page file stops the pipeline"""
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(SystemExit):
                env_check(state_make(tmpdir))

    def test_malformed_page_exits(self):
        """Parse errors stop the pipeline"""
        with tempfile.TemporaryDirectory() as tmpdir:
            state = state_make(tmpdir)
            (state.inputdir / "page.yaml").write_text("components:\n  - alert: warning\n", encoding='utf-8')
            with pytest.raises(SystemExit):
                pipeline(state, env_check, source_parse)

    def test_unknown_theme_exits(self):
        """Theme errors stop the pipeline"""
        with tempfile.TemporaryDirectory() as tmpdir:
            state = state_make(tmpdir, theme="nonexistent")
            (state.inputdir / "page.yaml").write_text(PAGE, encoding='utf-8')
            with pytest.raises(SystemExit):
                pipeline(state, env_check, source_parse, html_compile)
