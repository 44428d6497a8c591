"""
Parser for zenaui page files

Transforms a YAML page description into a tree of ComponentNodes.

Page file layout:

    meta:
      title: Projects
      theme: admin
      context:
        user: {first_name: Ana}
        strings: {Dismiss: Đóng}
        breadcrumbs: [{label: Dashboard, url: /app}, {label: Projects}]
    components:
      - alert: {type: warning, dismissible: true, message: Low disk space}
      - modal:
          title: New project
          slots:
            body: "<form>...</form>"
            footer:
              - button: {label: Cancel, variant: secondary}
              - button: {label: Save}

Each entry of `components` (and of a slot list) is a single-key mapping
from component name to its options, or a plain string of markup inside a
slot list. The reserved `slots` option holds nested slot content.

Example:
    >>> page = PageParser("components:\\n  - badge: {label: Active}").parse()
    >>> page.nodes[0].component
    'badge'
"""

from typing import Any, Dict, List, Optional, Union

import yaml

from ..models.parser import ComponentNode, Page
from .log import LOG


class PageSyntaxError(SyntaxError):
    """Raised when a page file is not valid YAML or has the wrong structure"""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class PageParser:
    """
    Parser for zenaui page descriptions

    Handles:
    - Page metadata (title, theme, render context data)
    - Component invocations with flat options
    - Nested slot content (markup strings and component lists)
    - Error reporting with the path of the offending node
    """

    def __init__(self, source: str, registry: Any = None):
        """
        Initialize parser with source text

        Args:
            source: Raw YAML page source
            registry: Optional ComponentRegistry; unknown component names are
                      reported (not rejected) when given
        """
        self.source = source
        self.registry = registry
        self.node_count = 0

    def parse(self) -> Page:
        """
        Parse the page source.

        Returns:
            Page with meta mapping and top-level component nodes

        Raises:
            PageSyntaxError: invalid YAML or unexpected structure
        """
        try:
            document = yaml.safe_load(self.source)
        except yaml.YAMLError as e:
            raise PageSyntaxError(f"invalid YAML: {e}")

        if document is None:
            return Page(meta={}, nodes=[])

        # A bare list is shorthand for a page without meta
        if isinstance(document, list):
            document = {'components': document}

        if not isinstance(document, dict):
            raise PageSyntaxError("page must be a mapping with 'meta' and 'components'")

        unknown = set(document) - {'meta', 'components'}
        if unknown:
            raise PageSyntaxError(f"unknown top-level keys {sorted(unknown)}")

        meta = document.get('meta') or {}
        if not isinstance(meta, dict):
            raise PageSyntaxError("'meta' must be a mapping", 'meta')

        nodes = self.nodes_parse(document.get('components') or [], 'components')
        LOG(f"Parsed {self.node_count} component nodes", level=2)
        return Page(meta=meta, nodes=nodes)

    def nodes_parse(self, entries: Any, path: str) -> List[ComponentNode]:
        """Parse a list of component entries"""
        if not isinstance(entries, list):
            raise PageSyntaxError("expected a list of components", path)
        nodes = []
        for index, entry in enumerate(entries):
            node = self.node_parse(entry, f"{path}[{index}]")
            nodes.append(node)
        return nodes

    def node_parse(self, entry: Any, path: str) -> ComponentNode:
        """
        Parse one `{name: options}` entry.

        Raises:
            PageSyntaxError: entry is not a single-key mapping, or its
                             options or slots are malformed
        """
        if not isinstance(entry, dict) or len(entry) != 1:
            raise PageSyntaxError("component entry must be a single-key mapping {name: options}", path)

        (name, options), = entry.items()
        if not isinstance(name, str) or not name:
            raise PageSyntaxError(f"component name must be a string, got {name!r}", path)
        path = f"{path}.{name}"

        if options is None:
            options = {}
        if not isinstance(options, dict):
            raise PageSyntaxError(f"options must be a mapping, got {type(options).__name__}", path)

        options = dict(options)
        slots = self.slots_parse(options.pop('slots', None), f"{path}.slots")

        if self.registry is not None and self.registry.get(name) is None:
            LOG(f"Warning: {path}: unknown component '{name}'", level=1, warning=True)

        self.node_count += 1
        LOG(f"Parsed {path} ({len(options)} options, slots={sorted(slots)})", level=3)
        return ComponentNode(component=name, options=options, slots=slots, path=path)

    def slots_parse(self, slots: Any, path: str) -> Dict[str, Union[str, List[Any]]]:
        """
        Parse the reserved `slots` option.

        Slot values are markup strings, lists mixing markup strings and
        component entries, or null (empty slot).
        """
        if slots is None:
            return {}
        if not isinstance(slots, dict):
            raise PageSyntaxError("'slots' must be a mapping of slot name to content", path)

        parsed: Dict[str, Union[str, List[Any]]] = {}
        for slot_name, content in slots.items():
            slot_path = f"{path}.{slot_name}"
            if content is None:
                parsed[str(slot_name)] = ""
            elif isinstance(content, (str, int, float)) and not isinstance(content, bool):
                parsed[str(slot_name)] = str(content)
            elif isinstance(content, list):
                items: List[Union[str, ComponentNode]] = []
                for index, item in enumerate(content):
                    if isinstance(item, str):
                        items.append(item)
                    else:
                        items.append(self.node_parse(item, f"{slot_path}[{index}]"))
                parsed[str(slot_name)] = items
            else:
                raise PageSyntaxError(
                    f"slot content must be markup or a list of components, got {type(content).__name__}",
                    slot_path,
                )
        return parsed


def page_load(source: str, registry: Optional[Any] = None) -> Page:
    """Parse page source in one call"""
    return PageParser(source, registry=registry).parse()
