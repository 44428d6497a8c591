"""
Component renderer

Renders one component instance from a flat option mapping and named slots:

1. Look up the ComponentSpec (unknown names degrade to a plain wrapper)
2. Resolve options against the schema (defaults, type check, pass-through)
3. Allocate the instance id (explicit `id` option, else from the context)
4. Merge theme overrides into the component's variant tables
5. Derive computed values and decide which sections are present
6. Create the instance's toggle state
7. Call the component handler

Example:
    >>> renderer = ComponentRenderer()
    >>> alert = renderer.render("alert", {"type": "warning", "dismissible": True,
    ...                                   "message": "Low disk space"})
    >>> alert.state.event_handle("dismiss").name
    'dismissed'
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..models.components import ComponentSpec
from ..models.context import RenderContext
from ..models.options import ResolvedOptions, UNSET
from ..models.variants import VariantTable
from .components import ComponentRegistry
from .markup import attributes_merge, element, sections_decide, text_escape
from .options import options_resolve, value_isBlank
from .theme import Theme
from .toggle import ToggleState
from .variants import classes_join, variant_map
from .log import LOG


@dataclass
class ComponentInstance:
    """
    Everything a component handler needs to produce its markup

    Attributes:
        spec: Component declaration
        id: Opaque instance id
        options: Resolved options (values + pass-through attributes)
        slots: Slot name -> pre-rendered markup
        derived: Values computed by the spec's derive hook
        sections: Section name -> present
        variants: Table role -> theme-merged variant table
        state: Toggle state, for stateful components
        context: Render context of the page
    """
    spec: ComponentSpec
    id: str
    options: ResolvedOptions
    slots: Dict[str, str]
    derived: Dict[str, Any]
    sections: Dict[str, bool]
    variants: Dict[str, VariantTable]
    state: Optional[ToggleState]
    context: RenderContext

    def opt(self, name: str) -> Any:
        """Derived value if present, else the resolved option value"""
        if name in self.derived:
            return self.derived[name]
        return self.options.values.get(name)

    def has(self, section: str) -> bool:
        return self.sections.get(section, False)

    def slot(self, name: str) -> str:
        """Slot markup, "" when the slot is absent or blank"""
        content = self.slots.get(name)
        return "" if value_isBlank(content) else str(content)

    def text(self, name: str) -> str:
        """Escaped option text"""
        return text_escape(self.opt(name))

    def string(self, key: str) -> str:
        """Localized UI string from the render context, escaped"""
        return text_escape(self.context.string_get(key))

    def classes(self, role: str, key: Any = UNSET) -> str:
        """
        Class string for a variant table.

        Args:
            role: Table role as declared in spec.variants (e.g., "type", "size")
            key: Variant key; defaults to the option named like the role
        """
        if key is UNSET:
            key = self.opt(role)
        return classes_join(variant_map(self.variants[role], key))

    def root(self, tag: str, semantic: Mapping[str, Any], *children: Optional[str]) -> str:
        """
        Root element of the instance: id, semantic attributes, then caller
        pass-through attributes merged last.
        """
        from ..config import appsettings

        attrs: Dict[str, Any] = {'id': self.id, **semantic}
        if appsettings.debug_mode:
            attrs['data-component'] = self.spec.name
        return element(tag, attributes_merge(attrs, self.options.attributes), *children)


@dataclass
class RenderedComponent:
    """
    Result of rendering one component instance

    Attributes:
        name: Component name as requested
        id: Instance id (None for unknown components)
        html: Rendered fragment ("" when the component omitted itself)
        options: Resolved option values
        attributes: Pass-through attributes applied to the root element
        sections: Section presence decisions
        state: Toggle state owned by this instance, if any
    """
    name: str
    id: Optional[str]
    html: str
    options: Dict[str, Any] = field(default_factory=dict)
    attributes: Dict[str, Any] = field(default_factory=dict)
    sections: Dict[str, bool] = field(default_factory=dict)
    state: Optional[ToggleState] = None

    def __str__(self) -> str:
        return self.html


class ComponentRenderer:
    """
    Renders component instances against a registry, theme and context

    Each render produces a fresh instance with its own toggle state; the
    renderer holds no per-instance state besides the context's id counters.
    """

    def __init__(
        self,
        registry: Optional[ComponentRegistry] = None,
        theme: Optional[Theme] = None,
        context: Optional[RenderContext] = None,
        strict: Optional[bool] = None,
    ) -> None:
        """
        Args:
            registry: Component registry (default: built-in components)
            theme: Theme whose variant overrides apply (default: none)
            context: Render context (default: empty context)
            strict: Reject mistyped options (default: ZENAUI_STRICT_OPTIONS)
        """
        from ..config import appsettings

        self.registry = registry or ComponentRegistry()
        self.theme = theme
        self.context = context or RenderContext(theme=theme.name if theme else "default")
        self.strict = appsettings.strict_options if strict is None else strict
        self._tables: Dict[str, VariantTable] = {}

    def variantTable_get(self, table: VariantTable) -> VariantTable:
        """Table with this renderer's theme overrides applied (cached by table name)"""
        if self.theme is None:
            return table
        if table.name not in self._tables:
            overrides = self.theme.variantOverrides_get(table.name)
            if overrides:
                LOG(f"Theme '{self.theme.name}' overrides {table.name}: {sorted(overrides)}", level=3)
            self._tables[table.name] = table.merged(overrides)
        return self._tables[table.name]

    def render(
        self,
        name: str,
        options: Optional[Mapping[str, Any]] = None,
        slots: Optional[Mapping[str, Any]] = None,
    ) -> RenderedComponent:
        """
        Render one component instance.

        Args:
            name: Component name or alias
            options: Flat caller options; unknown keys become root attributes
            slots: Slot name -> pre-rendered markup

        Returns:
            RenderedComponent with the fragment and the instance's state

        Raises:
            InvalidOptionType: strict mode and an option of the wrong type
        """
        options = dict(options or {})
        slot_content: Dict[str, str] = {
            key: "" if value_isBlank(value) else str(value) for key, value in (slots or {}).items()
        }

        spec = self.registry.get(name)
        if spec is None:
            LOG(f"Warning: Unknown component '{name}'", level=1, warning=True)
            inner = "".join(slot_content.values())
            return RenderedComponent(name=name, id=None, html=element('div', {'class': f'component-{name}'}, inner))

        # Undeclared slots never reach sections or handlers
        if '*' not in spec.slots:
            for slot_name in [key for key in slot_content if key not in spec.slots]:
                LOG(f"{spec.name}: ignoring unknown slot '{slot_name}'", level=2)
                del slot_content[slot_name]

        # An explicit id is a caller attribute, not a declared option
        explicit_id = options.get('id')
        instance_id = str(explicit_id) if not value_isBlank(explicit_id) else self.context.id_next(spec.name)
        options.pop('id', None)

        resolved = options_resolve(spec.schema, options, strict=self.strict)
        derived = spec.derive(dict(resolved.values), self.context) if spec.derive else {}
        decision_values = {**resolved.values, **derived}
        sections = sections_decide(spec.sections, decision_values, slot_content)

        state = None
        if spec.toggle is not None:
            choices = decision_values.get(spec.toggle.choices_option) if spec.toggle.choices_option else None
            state = ToggleState.state_createFromConfig(
                spec.toggle, {**decision_values, 'id': instance_id}, choices=choices
            )

        instance = ComponentInstance(
            spec=spec,
            id=instance_id,
            options=resolved,
            slots=slot_content,
            derived=derived,
            sections=sections,
            variants={role: self.variantTable_get(table) for role, table in spec.variants.items()},
            state=state,
            context=self.context,
        )

        LOG(f"Rendering {instance_id} sections={[k for k, v in sections.items() if v]}", level=3)
        html = spec.handler(instance, self)

        return RenderedComponent(
            name=spec.name,
            id=instance_id,
            html=html,
            options=dict(resolved.values),
            attributes=dict(resolved.attributes),
            sections=sections,
            state=state,
        )

    def fragment(
        self,
        name: str,
        options: Optional[Mapping[str, Any]] = None,
        slots: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Render and return only the HTML fragment"""
        return self.render(name, options, slots).html
