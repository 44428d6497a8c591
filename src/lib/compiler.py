"""
Compiler for zenaui pages

Renders a parsed Page into a standalone HTML document.
"""

import html
import shutil
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..models.context import RenderContext
from ..models.parser import ComponentNode, Page
from .components import ComponentRegistry
from .renderer import ComponentRenderer
from .theme import Theme
from .log import LOG, state_connectToLogger


class Compiler:
    """
    Compiles a zenaui Page to a standalone HTML page

    Responsibilities:
    - Resolve the theme (CLI > page meta > settings default)
    - Build the render context from page meta
    - Render component nodes inside-out (slot components first)
    - Assemble the HTML document and copy theme CSS
    """

    def __init__(
        self,
        page: Page,
        output_dir: str,
        theme_name: Optional[str] = None,
        verbosity: int = 1,
        themes_dir: Optional[str] = None,
        registry: Optional[ComponentRegistry] = None,
    ) -> None:
        """
        Initialize compiler

        Args:
            page: Parsed page
            output_dir: Directory for compiled output
            theme_name: Theme override; falls back to meta.theme, then settings
            verbosity: Output verbosity level (0-3)
            themes_dir: Directory containing themes (default: packaged themes)
            registry: Component registry (default: built-in components)
        """
        from ..config import appsettings

        self.page = page
        self.output_dir = Path(output_dir)
        self.verbosity = verbosity

        resolved_theme = theme_name or page.meta.get('theme') or appsettings.default_theme
        self.theme = Theme(str(resolved_theme), themes_dir)
        LOG(f"Loaded theme: {self.theme.name}", level=2)

        self.context = RenderContext.context_createFromMeta(page.meta, self.theme.name, verbosity)
        state_connectToLogger(self.context)
        self.renderer = ComponentRenderer(registry=registry, theme=self.theme, context=self.context)
        self.component_count = 0

    def compile(self) -> Dict[str, Any]:
        """
        Compile the page to index.html

        Returns:
            dict with compilation results and statistics
        """
        LOG("Starting compilation...", level=2)

        self.output_dir.mkdir(parents=True, exist_ok=True)

        content = self.nodes_compile(self.page.nodes)
        document = self.htmlDocument_build(content)

        output_file = self.output_dir / "index.html"
        output_file.write_text(document, encoding='utf-8')
        LOG(f"Wrote {output_file}", level=2)

        self.assets_copy()

        return {
            'status': True,
            'output_file': str(output_file),
            'component_count': self.component_count,
        }

    def nodes_compile(self, nodes: List[ComponentNode]) -> str:
        """Compile a list of top-level nodes, one fragment per line"""
        from ..config import appsettings

        fragments = [fragment for fragment in (self.node_compile(node) for node in nodes) if fragment]
        separator = "\n" if appsettings.minify_output else "\n\n"
        return separator.join(fragments)

    def slot_compile(self, content: Any) -> str:
        """Slot content to markup: strings verbatim, nested nodes rendered"""
        if isinstance(content, list):
            return "\n".join(
                item if isinstance(item, str) else self.node_compile(item)
                for item in content
            )
        return "" if content is None else str(content)

    def node_compile(self, node: ComponentNode) -> str:
        """
        Compile a single node to HTML

        Uses inside-out compilation: slot components are rendered first and
        their markup is passed to the parent as plain slot content.
        """
        slots = {name: self.slot_compile(content) for name, content in node.slots.items()}
        rendered = self.renderer.render(node.component, node.options, slots)
        self.component_count += 1
        LOG(f"{node.path or node.component} -> {rendered.id}", level=3)
        return rendered.html

    def htmlDocument_build(self, content: str) -> str:
        """
        Build complete HTML document around the rendered components

        Args:
            content: Rendered page fragments

        Returns:
            Complete HTML document
        """
        from ..config import appsettings

        title = html.escape(self.page.title_get())
        lang = html.escape(str(self.page.meta.get('lang') or 'en'))
        body_class = html.escape(self.theme.bodyClass_get(self.context.dark))

        head_links = []
        for href in self.page.meta.get('stylesheets') or []:
            head_links.append(f'    <link rel="stylesheet" href="{html.escape(str(href))}">')
        if self.theme.css_has():
            head_links.append('    <link rel="stylesheet" href="css/theme.css">')
        links_html = "\n".join(head_links)

        return f"""<!DOCTYPE html>
<html lang="{lang}">
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>{title}</title>
    <script src="{html.escape(appsettings.tailwind_src)}"></script>
{links_html}
    <script defer src="{html.escape(appsettings.alpine_src)}"></script>
</head>
<body class="{body_class}">
    <main class="zu-page">
{content}
    </main>
</body>
</html>
"""

    def assets_copy(self) -> None:
        """Copy theme CSS to the output directory"""
        theme_css_path = self.theme.cssPath_get()
        if theme_css_path:
            dst_css = self.output_dir / "css" / "theme.css"
            dst_css.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(theme_css_path, dst_css)
            LOG(f"Copied theme CSS: {self.theme.name}", level=2)
