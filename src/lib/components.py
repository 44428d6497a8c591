"""
Component implementations for zenaui

Each component turns a ComponentInstance (resolved options, slots, section
decisions, variant tables, toggle state) into one self-contained HTML
fragment. Declarations live in ComponentSpec; handlers only assemble markup.
"""

import json
from typing import Any, Dict, List, Optional

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, TextLexer
from pygments.util import ClassNotFound

from ..models.components import ComponentCategory, ComponentSpec, Section
from ..models.options import OptionSchema, OptionSpec
from ..models.toggle import ToggleConfig, ToggleKind
from ..models.variants import VariantTable
from .markup import element, icon, text_escape
from .options import value_isBlank
from .variants import classes_join
from .log import LOG


def _items(value: Any, owner: str) -> List[Dict[str, Any]]:
    """List items given as caller data; non-mapping entries are skipped"""
    items = []
    for item in value or []:
        if isinstance(item, dict):
            items.append(item)
        else:
            LOG(f"{owner}: skipping non-mapping item {item!r}", level=2)
    return items


def _item_url(item: Dict[str, Any], context: Any) -> Optional[str]:
    """Explicit `url` of a list item, else its named `route` from the render context"""
    if not value_isBlank(item.get('url')):
        return str(item['url'])
    if not value_isBlank(item.get('route')) and context is not None:
        return context.route_get(str(item['route']))
    return None


class ComponentRegistry:
    """
    Registry of component specifications and handlers

    Maps component names (and aliases) to ComponentSpec objects.
    """

    def __init__(self) -> None:
        """Initialize the registry and register all built-in components"""
        self.specs: Dict[str, ComponentSpec] = {}
        self.feedbackComponents_register()
        self.actionComponents_register()
        self.overlayComponents_register()
        self.navigationComponents_register()
        self.dataComponents_register()

    def register(self, spec: ComponentSpec) -> None:
        """Register a component specification under its name and aliases"""
        self.specs[spec.name] = spec
        for alias in spec.aliases:
            self.specs[alias] = spec

    def get(self, name: str) -> Optional[ComponentSpec]:
        """Get component spec by name or alias, None if unknown"""
        return self.specs.get(name)

    def names(self) -> List[str]:
        """Canonical component names (aliases excluded), sorted"""
        return sorted({spec.name for spec in self.specs.values()})

    def components_listByCategory(self, category: ComponentCategory) -> List[ComponentSpec]:
        """Get all components in a category"""
        unique = {spec.name: spec for spec in self.specs.values()}
        return [spec for spec in unique.values() if spec.category == category]

    def catalog_build(self) -> List[Dict[str, Any]]:
        """
        Inventory of every registered component.

        Returns:
            One entry per component with its options (defaults, types,
            choices), variant tables, slots, sections and toggle events.
            Suitable for yaml.safe_dump().
        """
        catalog = []
        for name in self.names():
            spec = self.specs[name]
            entry: Dict[str, Any] = {
                'name': spec.name,
                'category': spec.category.value,
                'description': spec.description,
                'aliases': list(spec.aliases),
                'options': [
                    {
                        'name': opt.name,
                        'default': list(opt.default) if isinstance(opt.default, tuple) else opt.default,
                        'types': [t.__name__ for t in opt.types],
                        **({'choices': list(opt.choices)} if opt.choices else {}),
                    }
                    for opt in spec.schema
                ],
                'variants': {
                    role: {'table': table.name, 'keys': list(table.keys()), 'fallback': table.fallback}
                    for role, table in spec.variants.items()
                },
                'slots': list(spec.slots),
                'sections': [section.name for section in spec.sections],
            }
            if spec.toggle:
                entry['toggle'] = {
                    'kind': spec.toggle.kind.value,
                    'option': spec.toggle.option,
                    'events': [e for e in (spec.toggle.on_true, spec.toggle.on_false, spec.toggle.on_select) if e],
                }
            catalog.append(entry)
        return catalog

    def feedbackComponents_register(self) -> None:
        """Register alert, badge and empty_state"""

        alert_types = ('success', 'info', 'warning', 'error')

        def alert_handler(inst: Any, renderer: Any) -> str:
            """Handle alert - status message with optional dismiss control"""
            state = inst.state

            icon_html = ""
            if inst.has('icon'):
                icon_classes = inst.opt('icon') or inst.classes('icon', inst.opt('type'))
                icon_html = element('div', {'class': 'flex-shrink-0'}, icon(icon_classes))

            body_parts = []
            if inst.has('title'):
                body_parts.append(element('h3', {'class': 'text-sm font-medium'}, inst.text('title')))
            if inst.has('message'):
                message = inst.slot('body') or element('p', None, inst.text('message'))
                spacing = 'mt-2 text-sm' if inst.has('title') else 'text-sm'
                body_parts.append(element('div', {'class': spacing}, message))
            if inst.has('actions'):
                body_parts.append(element('div', {'class': 'mt-4 flex space-x-3'}, inst.slot('actions')))

            content = element('div', {'class': 'ml-3 flex-1' if icon_html else 'flex-1'}, *body_parts)

            dismiss_html = ""
            if inst.has('dismiss'):
                button = element(
                    'button',
                    {
                        'type': 'button',
                        'class': 'inline-flex rounded-md p-1.5 opacity-70 hover:opacity-100 '
                                 'focus:outline-none focus:ring-2 focus:ring-offset-2',
                        'aria-label': inst.string('Dismiss'),
                        '@click': state.alpine_dispatch(False),
                    },
                    icon('fas fa-times'),
                )
                dismiss_html = element('div', {'class': 'ml-auto pl-3'}, button)

            return inst.root(
                'div',
                {
                    'class': classes_join('rounded-md border p-4', inst.classes('type')),
                    'role': 'alert',
                    'x-data': state.alpine_data(),
                    'x-show': state.var,
                    'x-cloak': not state.value,
                },
                element('div', {'class': 'flex'}, icon_html, content, dismiss_html),
            )

        self.register(ComponentSpec(
            name='alert',
            category=ComponentCategory.FEEDBACK,
            description='Status message block, optionally dismissible',
            schema=OptionSchema('alert', (
                OptionSpec('type', 'info', (str,), choices=alert_types),
                OptionSpec('title', None),
                OptionSpec('message', None),
                OptionSpec('icon', None, description='Icon classes; defaults to the type icon'),
                OptionSpec('show_icon', True, (bool,)),
                OptionSpec('dismissible', False, (bool,)),
                OptionSpec('visible', True, (bool,)),
            )),
            handler=alert_handler,
            variants={
                'type': VariantTable('alert.type', {
                    'success': 'bg-green-50 border-green-200 text-green-800',
                    'info': 'bg-blue-50 border-blue-200 text-blue-800',
                    'warning': 'bg-yellow-50 border-yellow-200 text-yellow-800',
                    'error': 'bg-red-50 border-red-200 text-red-800',
                }, fallback='info'),
                'icon': VariantTable('alert.icon', {
                    'success': 'fas fa-check-circle text-green-400',
                    'info': 'fas fa-info-circle text-blue-400',
                    'warning': 'fas fa-exclamation-triangle text-yellow-400',
                    'error': 'fas fa-times-circle text-red-400',
                }, fallback='info'),
            },
            sections=(
                Section('icon', ('show_icon',)),
                Section('title', ('title',)),
                Section('message', ('message', 'body')),
                Section('actions', ('actions',)),
                Section('dismiss', ('dismissible',)),
            ),
            slots=('body', 'actions'),
            toggle=ToggleConfig(
                kind=ToggleKind.VISIBILITY,
                option='visible',
                var='visible',
                on_true='shown',
                on_false='dismissed',
                detail_options=('type',),
            ),
            examples=[
                'alert: {type: warning, dismissible: true, message: Low disk space}',
                'alert: {type: success, title: Saved, message: Project updated}',
            ],
        ))

        def badge_handler(inst: Any, renderer: Any) -> str:
            """Handle badge - small status label"""
            if not inst.has('label'):
                return ""
            shape = 'rounded-full' if inst.opt('pill') else 'rounded'
            icon_html = icon(inst.opt('icon'), 'mr-1') if inst.has('icon') else ""
            label = inst.slot('body') or inst.text('label')
            return inst.root(
                'span',
                {'class': classes_join('inline-flex items-center font-medium', shape,
                                       inst.classes('variant'), inst.classes('size'))},
                icon_html,
                label,
            )

        self.register(ComponentSpec(
            name='badge',
            category=ComponentCategory.FEEDBACK,
            description='Inline status label',
            schema=OptionSchema('badge', (
                OptionSpec('label', None, (str, int, float)),
                OptionSpec('variant', 'default', (str,),
                           choices=('default', 'primary', 'success', 'warning', 'danger', 'info')),
                OptionSpec('size', 'md', (str,), choices=('sm', 'md', 'lg')),
                OptionSpec('icon', None),
                OptionSpec('pill', True, (bool,)),
            )),
            handler=badge_handler,
            variants={
                'variant': VariantTable('badge.variant', {
                    'default': 'bg-gray-100 text-gray-800',
                    'primary': 'bg-blue-100 text-blue-800',
                    'success': 'bg-green-100 text-green-800',
                    'warning': 'bg-yellow-100 text-yellow-800',
                    'danger': 'bg-red-100 text-red-800',
                    'info': 'bg-indigo-100 text-indigo-800',
                }, fallback='default'),
                'size': VariantTable('badge.size', {
                    'sm': 'px-2 py-0.5 text-xs',
                    'md': 'px-2.5 py-0.5 text-sm',
                    'lg': 'px-3 py-1 text-base',
                }, fallback='md'),
            },
            sections=(
                Section('label', ('label', 'body')),
                Section('icon', ('icon',)),
            ),
            slots=('body',),
            examples=['badge: {label: Active, variant: success}'],
            aliases=['status_badge'],
        ))

        def empty_state_handler(inst: Any, renderer: Any) -> str:
            """Handle empty_state - placeholder for lists without items"""
            parts = []
            if inst.has('icon'):
                parts.append(element('div', {'class': 'mx-auto mb-4 text-4xl text-gray-400'}, icon(inst.opt('icon'))))
            if inst.has('title'):
                parts.append(element('h3', {'class': 'text-sm font-medium text-gray-900'}, inst.text('title')))
            if inst.has('description'):
                parts.append(element('p', {'class': 'mt-1 text-sm text-gray-500'}, inst.text('description')))
            if inst.has('actions'):
                parts.append(element('div', {'class': 'mt-6'}, inst.slot('actions')))
            return inst.root('div', {'class': 'text-center py-12'}, *parts)

        self.register(ComponentSpec(
            name='empty_state',
            category=ComponentCategory.FEEDBACK,
            description='Placeholder shown when a list or table has no items',
            schema=OptionSchema('empty_state', (
                OptionSpec('icon', 'fas fa-inbox'),
                OptionSpec('title', 'No items found'),
                OptionSpec('description', 'There are no items to display at the moment.'),
            )),
            handler=empty_state_handler,
            sections=(
                Section('icon', ('icon',)),
                Section('title', ('title',)),
                Section('description', ('description',)),
                Section('actions', ('actions',)),
            ),
            slots=('actions',),
            examples=['empty_state: {title: No projects yet}'],
        ))

    def actionComponents_register(self) -> None:
        """Register button"""

        def button_handler(inst: Any, renderer: Any) -> str:
            """Handle button - <button>, or <a> when href is given"""
            disabled = bool(inst.opt('disabled')) or bool(inst.opt('loading'))

            icon_html = ""
            if inst.has('icon'):
                if inst.opt('loading'):
                    icon_html = icon('fas fa-spinner fa-spin')
                else:
                    icon_html = icon(inst.opt('icon'))

            label_html = ""
            if inst.has('label'):
                label_html = inst.slot('body') or inst.text('label')

            if icon_html and label_html:
                spacing = 'ml-2' if inst.opt('icon_position') == 'right' else 'mr-2'
                icon_html = element('span', {'class': spacing}, icon_html)
            children = [label_html, icon_html] if inst.opt('icon_position') == 'right' else [icon_html, label_html]

            classes = classes_join(
                'inline-flex items-center border font-medium rounded-md shadow-sm '
                'focus:outline-none focus:ring-2 focus:ring-offset-2',
                inst.classes('variant'),
                inst.classes('size'),
                'opacity-50 cursor-not-allowed' if disabled else '',
            )

            if inst.has('href') and not disabled:
                return inst.root('a', {'href': inst.opt('href'), 'class': classes}, *children)
            return inst.root(
                'button',
                {
                    'type': inst.opt('type') or 'button',
                    'class': classes,
                    'disabled': disabled,
                    'aria-busy': 'true' if inst.opt('loading') else None,
                },
                *children,
            )

        self.register(ComponentSpec(
            name='button',
            category=ComponentCategory.ACTION,
            description='Action button or link styled as a button',
            schema=OptionSchema('button', (
                OptionSpec('label', None),
                OptionSpec('variant', 'primary', (str,),
                           choices=('primary', 'secondary', 'danger', 'ghost', 'link')),
                OptionSpec('size', 'md', (str,), choices=('xs', 'sm', 'md', 'lg')),
                OptionSpec('href', None),
                OptionSpec('type', 'button', (str,), choices=('button', 'submit', 'reset')),
                OptionSpec('icon', None),
                OptionSpec('icon_position', 'left', (str,), choices=('left', 'right')),
                OptionSpec('disabled', False, (bool,)),
                OptionSpec('loading', False, (bool,)),
            )),
            handler=button_handler,
            variants={
                'variant': VariantTable('button.variant', {
                    'primary': 'bg-blue-600 hover:bg-blue-700 text-white border-transparent focus:ring-blue-500',
                    'secondary': 'bg-white hover:bg-gray-50 text-gray-700 border-gray-300 focus:ring-blue-500',
                    'danger': 'bg-red-600 hover:bg-red-700 text-white border-transparent focus:ring-red-500',
                    'ghost': 'bg-transparent hover:bg-gray-100 text-gray-700 border-transparent shadow-none',
                    'link': 'bg-transparent text-blue-600 hover:text-blue-500 border-transparent shadow-none',
                }, fallback='primary'),
                'size': VariantTable('button.size', {
                    'xs': 'px-2.5 py-1.5 text-xs',
                    'sm': 'px-3 py-2 text-sm leading-4',
                    'md': 'px-4 py-2 text-sm',
                    'lg': 'px-6 py-3 text-base',
                }, fallback='md'),
            },
            sections=(
                Section('icon', ('icon', 'loading')),
                Section('label', ('label', 'body')),
                Section('href', ('href',)),
            ),
            slots=('body',),
            examples=[
                'button: {label: New Project, icon: fas fa-plus, href: /app/projects/create}',
                'button: {label: Delete, variant: danger, size: sm}',
            ],
        ))

    def overlayComponents_register(self) -> None:
        """Register modal, sheet and dropdown"""

        def close_button(inst: Any) -> str:
            return element(
                'button',
                {
                    'type': 'button',
                    'class': 'text-gray-400 hover:text-gray-500 focus:outline-none',
                    'aria-label': inst.string('Close'),
                    '@click': inst.state.alpine_dispatch(False),
                },
                icon('fas fa-times'),
            )

        def overlay_trigger(inst: Any) -> str:
            if not inst.has('trigger'):
                return ""
            return element('div', {'@click': inst.state.alpine_dispatch(True)}, inst.slot('trigger'))

        def overlay_closeHandlers(inst: Any) -> Dict[str, Any]:
            if not inst.opt('closable'):
                return {}
            return {'@keydown.escape.window': f"if ({inst.state.var}) {{ {inst.state.alpine_dispatch(False)} }}"}

        def modal_handler(inst: Any, renderer: Any) -> str:
            """Handle modal - dialog overlay with header/body/footer"""
            state = inst.state
            title_id = f"{inst.id}-title"

            header_html = ""
            if inst.has('header'):
                heading = inst.slot('header') or element(
                    'h3', {'id': title_id, 'class': 'text-lg font-medium text-gray-900'}, inst.text('title')
                )
                header_html = element(
                    'div',
                    {'class': 'flex items-center justify-between px-6 py-4 border-b border-gray-200'},
                    heading,
                    close_button(inst) if inst.opt('closable') else "",
                )

            body_html = element('div', {'class': 'px-6 py-4'}, inst.slot('body')) if inst.has('body') else ""

            footer_html = ""
            if inst.has('footer'):
                footer_html = element(
                    'div',
                    {'class': 'flex justify-end space-x-3 px-6 py-4 bg-gray-50 border-t border-gray-200'},
                    inst.slot('footer'),
                )

            backdrop_attrs: Dict[str, Any] = {'class': 'fixed inset-0 bg-gray-500 bg-opacity-75 transition-opacity'}
            if inst.opt('closable') and inst.opt('close_on_backdrop'):
                backdrop_attrs['@click'] = state.alpine_dispatch(False)

            panel = element(
                'div',
                {
                    'class': classes_join('relative w-full bg-white rounded-lg shadow-xl overflow-hidden',
                                          inst.classes('size')),
                    'role': 'dialog',
                    'aria-modal': 'true',
                    'aria-labelledby': title_id if inst.has('title') else None,
                },
                header_html,
                body_html,
                footer_html,
            )

            overlay = element(
                'div',
                {
                    'class': 'fixed inset-0 z-50 flex items-center justify-center p-4',
                    'x-show': state.var,
                    'x-transition.opacity': True,
                    'x-cloak': not state.value,
                },
                element('div', backdrop_attrs),
                panel,
            )

            return inst.root(
                'div',
                {'x-data': state.alpine_data(), **overlay_closeHandlers(inst)},
                overlay_trigger(inst),
                overlay,
            )

        self.register(ComponentSpec(
            name='modal',
            category=ComponentCategory.OVERLAY,
            description='Dialog overlay with optional header, body and footer',
            schema=OptionSchema('modal', (
                OptionSpec('title', None),
                OptionSpec('size', 'md', (str,), choices=('sm', 'md', 'lg', 'xl', 'full')),
                OptionSpec('open', False, (bool,)),
                OptionSpec('closable', True, (bool,)),
                OptionSpec('close_on_backdrop', True, (bool,)),
            )),
            handler=modal_handler,
            variants={
                'size': VariantTable('modal.size', {
                    'sm': 'max-w-sm',
                    'md': 'max-w-lg',
                    'lg': 'max-w-2xl',
                    'xl': 'max-w-4xl',
                    'full': 'max-w-full h-full',
                }, fallback='md'),
            },
            sections=(
                Section('trigger', ('trigger',)),
                Section('header', ('title', 'header', 'closable')),
                Section('title', ('title',)),
                Section('body', ('body',)),
                Section('footer', ('footer',)),
            ),
            slots=('trigger', 'header', 'body', 'footer'),
            toggle=ToggleConfig(
                kind=ToggleKind.DISCLOSURE,
                option='open',
                var='open',
                on_true='opened',
                on_false='closed',
                detail_options=('id',),
            ),
            examples=['modal: {title: Edit policy, size: lg, slots: {body: "<form>...</form>"}}'],
            aliases=['dialog'],
        ))

        def sheet_handler(inst: Any, renderer: Any) -> str:
            """Handle sheet - bottom sheet panel"""
            state = inst.state

            header_html = ""
            if inst.has('header'):
                header_html = element(
                    'div',
                    {'class': 'flex items-center justify-between px-4 py-3 border-b border-gray-200'},
                    element('h3', {'class': 'text-base font-semibold text-gray-900'}, inst.text('title')),
                    close_button(inst) if inst.opt('closable') else "",
                )

            panel = element(
                'div',
                {
                    'class': classes_join('fixed inset-x-0 bottom-0 z-50 bg-white rounded-t-2xl shadow-2xl '
                                          'flex flex-col', inst.classes('height')),
                    'x-show': state.var,
                    'x-transition': True,
                    'x-cloak': not state.value,
                    'role': 'dialog',
                    'aria-modal': 'true',
                },
                element('div', {'class': 'mx-auto mt-2 h-1.5 w-12 rounded-full bg-gray-300'}),
                header_html,
                element('div', {'class': 'flex-1 overflow-y-auto p-4'}, inst.slot('body')) if inst.has('body') else "",
                element('div', {'class': 'border-t border-gray-200 p-4'}, inst.slot('footer')) if inst.has('footer') else "",
            )

            backdrop = element('div', {
                'class': 'fixed inset-0 z-40 bg-black bg-opacity-40',
                'x-show': state.var,
                'x-cloak': not state.value,
                '@click': state.alpine_dispatch(False) if inst.opt('closable') else None,
            })

            return inst.root(
                'div',
                {'x-data': state.alpine_data(), **overlay_closeHandlers(inst)},
                overlay_trigger(inst),
                backdrop,
                panel,
            )

        self.register(ComponentSpec(
            name='sheet',
            category=ComponentCategory.OVERLAY,
            description='Bottom sheet panel for mobile-first forms and details',
            schema=OptionSchema('sheet', (
                OptionSpec('title', None),
                OptionSpec('height', 'md', (str,), choices=('sm', 'md', 'lg', 'full')),
                OptionSpec('open', False, (bool,)),
                OptionSpec('closable', True, (bool,)),
            )),
            handler=sheet_handler,
            variants={
                'height': VariantTable('sheet.height', {
                    'sm': 'h-1/3',
                    'md': 'h-1/2',
                    'lg': 'h-2/3',
                    'full': 'h-full',
                }, fallback='md'),
            },
            sections=(
                Section('trigger', ('trigger',)),
                Section('header', ('title', 'closable')),
                Section('body', ('body',)),
                Section('footer', ('footer',)),
            ),
            slots=('trigger', 'body', 'footer'),
            toggle=ToggleConfig(
                kind=ToggleKind.DISCLOSURE,
                option='open',
                var='open',
                on_true='opened',
                on_false='closed',
                detail_options=('id',),
            ),
            examples=['sheet: {title: Filters, height: sm}'],
            aliases=['bottom_sheet'],
        ))

        def dropdown_handler(inst: Any, renderer: Any) -> str:
            """Handle dropdown - menu button with a list of links"""
            state = inst.state

            if inst.has('trigger'):
                trigger = element('div', {'@click': state.alpine_toggle()}, inst.slot('trigger'))
            else:
                trigger = element(
                    'button',
                    {
                        'type': 'button',
                        'class': 'inline-flex items-center px-3 py-2 text-sm font-medium text-gray-700 '
                                 'bg-white border border-gray-300 rounded-md hover:bg-gray-50',
                        'aria-haspopup': 'true',
                        ':aria-expanded': state.var,
                        '@click': state.alpine_toggle(),
                    },
                    inst.text('label'),
                    icon('fas fa-chevron-down', 'ml-2 text-xs'),
                )

            menu_html = ""
            if inst.has('menu'):
                entries = []
                for item in _items(inst.opt('items'), 'dropdown'):
                    if item.get('divider'):
                        entries.append(element('div', {'class': 'my-1 border-t border-gray-100', 'role': 'separator'}))
                        continue
                    color = 'text-red-600 hover:bg-red-50' if item.get('danger') else 'text-gray-700 hover:bg-gray-100'
                    entries.append(element(
                        'a',
                        {
                            'href': _item_url(item, inst.context) or '#',
                            'class': classes_join('flex items-center px-4 py-2 text-sm', color),
                            'role': 'menuitem',
                        },
                        icon(item.get('icon'), 'mr-3 w-4'),
                        text_escape(item.get('label')),
                    ))
                menu_html = element(
                    'div',
                    {
                        'class': classes_join('absolute z-20 mt-2 w-56 rounded-md bg-white shadow-lg '
                                              'ring-1 ring-black ring-opacity-5 py-1', inst.classes('align')),
                        'role': 'menu',
                        'x-show': state.var,
                        'x-transition': True,
                        'x-cloak': not state.value,
                    },
                    "".join(entries),
                    inst.slot('body'),
                )

            return inst.root(
                'div',
                {
                    'class': 'relative inline-block text-left',
                    'x-data': state.alpine_data(),
                    '@click.outside': f"if ({state.var}) {{ {state.alpine_dispatch(False)} }}",
                },
                trigger,
                menu_html,
            )

        self.register(ComponentSpec(
            name='dropdown',
            category=ComponentCategory.OVERLAY,
            description='Menu button revealing a list of actions',
            schema=OptionSchema('dropdown', (
                OptionSpec('label', 'Options'),
                OptionSpec('items', (), (list, tuple)),
                OptionSpec('align', 'right', (str,), choices=('left', 'right')),
                OptionSpec('open', False, (bool,)),
            )),
            handler=dropdown_handler,
            variants={
                'align': VariantTable('dropdown.align', {
                    'left': 'left-0 origin-top-left',
                    'right': 'right-0 origin-top-right',
                }, fallback='right'),
            },
            sections=(
                Section('trigger', ('trigger',)),
                Section('menu', ('items', 'body')),
            ),
            slots=('trigger', 'body'),
            toggle=ToggleConfig(
                kind=ToggleKind.DISCLOSURE,
                option='open',
                var='open',
                on_true='opened',
                on_false='closed',
                detail_options=('id',),
            ),
            examples=['dropdown: {label: Actions, items: [{label: Edit, url: /edit}, {divider: true}, {label: Delete, danger: true}]}'],
            aliases=['menu'],
        ))

    def navigationComponents_register(self) -> None:
        """Register tabs, breadcrumbs and pagination"""

        def tabs_derive(values: Dict[str, Any], context: Any) -> Dict[str, Any]:
            tabs = [tab for tab in _items(values.get('tabs'), 'tabs') if not value_isBlank(tab.get('key'))]
            return {'tab_keys': [str(tab['key']) for tab in tabs], 'tab_items': tabs}

        def tabs_handler(inst: Any, renderer: Any) -> str:
            """Handle tabs - tab strip with one panel per tab key slot"""
            if not inst.has('tabs'):
                return ""
            state = inst.state

            buttons = []
            panels = []
            for tab in inst.opt('tab_items'):
                key = str(tab['key'])
                is_active = key == state.value
                selector = f"{state.var} === {json.dumps(key)}"
                badge_html = ""
                if not value_isBlank(tab.get('badge')):
                    badge_html = element(
                        'span', {'class': 'ml-2 rounded-full bg-gray-100 px-2 py-0.5 text-xs text-gray-600'},
                        text_escape(tab.get('badge')),
                    )
                buttons.append(element(
                    'button',
                    {
                        'type': 'button',
                        'role': 'tab',
                        'class': classes_join('inline-flex items-center whitespace-nowrap border-b-2 px-1 py-4 '
                                              'text-sm font-medium',
                                              inst.classes('style', 'active' if is_active else 'inactive')),
                        ':class': f"{selector} ? {json.dumps(inst.classes('style', 'active'))} "
                                  f": {json.dumps(inst.classes('style', 'inactive'))}",
                        ':aria-selected': selector,
                        '@click': state.alpine_dispatch(key),
                    },
                    icon(tab.get('icon'), 'mr-2'),
                    text_escape(tab.get('label') or key),
                    badge_html,
                ))
                # Tabs without panel content get no panel element at all
                if not value_isBlank(inst.slots.get(key)):
                    panels.append(element(
                        'div',
                        {'role': 'tabpanel', 'x-show': selector, 'x-cloak': not is_active},
                        inst.slots[key],
                    ))

            nav = element(
                'div', {'class': 'border-b border-gray-200'},
                element('nav', {'class': '-mb-px flex space-x-8', 'role': 'tablist'}, *buttons),
            )
            panels_html = element('div', {'class': 'pt-4'}, *panels) if panels else ""
            return inst.root('div', {'x-data': state.alpine_data()}, nav, panels_html)

        self.register(ComponentSpec(
            name='tabs',
            category=ComponentCategory.NAVIGATION,
            description='Tab strip switching between panels supplied as slots named by tab key',
            schema=OptionSchema('tabs', (
                OptionSpec('tabs', (), (list, tuple)),
                OptionSpec('active', None),
            )),
            handler=tabs_handler,
            derive=tabs_derive,
            variants={
                'style': VariantTable('tabs.style', {
                    'active': 'border-blue-500 text-blue-600',
                    'inactive': 'border-transparent text-gray-500 hover:text-gray-700 hover:border-gray-300',
                }, fallback='inactive'),
            },
            sections=(Section('tabs', ('tab_keys',)),),
            slots=('*',),
            toggle=ToggleConfig(
                kind=ToggleKind.SELECTION,
                option='active',
                var='tab',
                on_select='tab-changed',
                detail_options=('id',),
                choices_option='tab_keys',
            ),
            examples=['tabs: {tabs: [{key: overview, label: Overview}, {key: tasks, label: Tasks}], slots: {overview: "...", tasks: "..."}}'],
        ))

        def breadcrumbs_derive(values: Dict[str, Any], context: Any) -> Dict[str, Any]:
            items = values.get('items')
            if value_isBlank(items) and context is not None:
                items = context.breadcrumbs
            return {'trail': _items(items, 'breadcrumbs')}

        def breadcrumbs_handler(inst: Any, renderer: Any) -> str:
            """Handle breadcrumbs - navigation trail, last item is the current page"""
            if not inst.has('trail'):
                return ""
            trail = inst.opt('trail')
            entries = []
            for index, item in enumerate(trail):
                is_last = index == len(trail) - 1
                label = text_escape(item.get('label'))
                url = _item_url(item, inst.context)
                if is_last or value_isBlank(url):
                    crumb = element('span', {
                        'class': 'text-sm font-medium text-gray-500',
                        'aria-current': 'page' if is_last else None,
                    }, label)
                else:
                    crumb = element('a', {'href': url, 'class': 'text-sm font-medium text-gray-500 hover:text-gray-700'}, label)
                separator = icon(inst.opt('separator'), 'mx-2 text-xs text-gray-400') if index > 0 else ""
                entries.append(element('li', {'class': 'flex items-center'}, separator, crumb))
            return inst.root(
                'nav', {'class': 'flex', 'aria-label': inst.string('Breadcrumb')},
                element('ol', {'class': 'flex items-center'}, *entries),
            )

        self.register(ComponentSpec(
            name='breadcrumbs',
            category=ComponentCategory.NAVIGATION,
            description='Navigation trail; defaults to the breadcrumbs of the render context',
            schema=OptionSchema('breadcrumbs', (
                OptionSpec('items', None, (list, tuple)),
                OptionSpec('separator', 'fas fa-chevron-right'),
            )),
            handler=breadcrumbs_handler,
            derive=breadcrumbs_derive,
            sections=(Section('trail', ('trail',)),),
            examples=['breadcrumbs: {items: [{label: Projects, url: /app/projects}, {label: Tower A}]}'],
        ))

        def pagination_derive(values: Dict[str, Any], context: Any) -> Dict[str, Any]:
            last = max(int(values.get('last_page') or 1), 1)
            current = min(max(int(values.get('current_page') or 1), 1), last)
            url = values.get('url') or '?page={page}'

            def page_url(page: int) -> str:
                return url.replace('{page}', str(page))

            window = max(int(values.get('window') or 0), 0)
            low, high = max(1, current - window), min(last, current + window)
            pages: List[Optional[int]] = []
            if low > 1:
                pages.append(1)
                if low > 2:
                    pages.append(None)
            pages.extend(range(low, high + 1))
            if high < last:
                if high < last - 1:
                    pages.append(None)
                pages.append(last)

            summary = None
            total = values.get('total')
            per_page = values.get('per_page')
            # No summary without a positive page size
            if not value_isBlank(total) and isinstance(per_page, int) and per_page > 0:
                first_item = (current - 1) * per_page + 1 if total else 0
                summary = {'from': first_item, 'to': min(current * per_page, total), 'total': total}

            return {
                'pages': pages if last > 1 else [],
                'current': current,
                'prev_url': page_url(current - 1) if current > 1 else None,
                'next_url': page_url(current + 1) if current < last else None,
                'page_url': page_url,
                'summary': summary,
            }

        def pagination_handler(inst: Any, renderer: Any) -> str:
            """Handle pagination - page links with prev/next at the edges only when usable"""
            if not inst.has('pages'):
                return ""
            link = 'relative inline-flex items-center px-4 py-2 border text-sm font-medium'

            parts = []
            if inst.has('prev'):
                parts.append(element('a', {
                    'href': inst.opt('prev_url'),
                    'rel': 'prev',
                    'class': classes_join(link, 'rounded-l-md', inst.classes('state', 'default')),
                    'aria-label': inst.string('Previous'),
                }, icon('fas fa-chevron-left')))
            for page in inst.opt('pages'):
                if page is None:
                    parts.append(element('span', {'class': classes_join(link, inst.classes('state', 'gap'))}, '&hellip;'))
                elif page == inst.opt('current'):
                    parts.append(element('span', {
                        'class': classes_join(link, inst.classes('state', 'current')),
                        'aria-current': 'page',
                    }, str(page)))
                else:
                    parts.append(element('a', {
                        'href': inst.opt('page_url')(page),
                        'class': classes_join(link, inst.classes('state', 'default')),
                    }, str(page)))
            if inst.has('next'):
                parts.append(element('a', {
                    'href': inst.opt('next_url'),
                    'rel': 'next',
                    'class': classes_join(link, 'rounded-r-md', inst.classes('state', 'default')),
                    'aria-label': inst.string('Next'),
                }, icon('fas fa-chevron-right')))

            summary_html = ""
            if inst.has('summary'):
                summary = inst.opt('summary')
                summary_html = element(
                    'p', {'class': 'text-sm text-gray-700'},
                    f"{inst.string('Showing')} {summary['from']} {inst.string('to')} {summary['to']} "
                    f"{inst.string('of')} {summary['total']} {inst.string('results')}",
                )

            nav = element('nav', {'class': 'relative z-0 inline-flex -space-x-px rounded-md shadow-sm',
                                  'aria-label': inst.string('Pagination')}, *parts)
            return inst.root('div', {'class': 'flex items-center justify-between'}, summary_html, nav)

        self.register(ComponentSpec(
            name='pagination',
            category=ComponentCategory.NAVIGATION,
            description='Page links with a sliding window; omitted entirely for a single page',
            schema=OptionSchema('pagination', (
                OptionSpec('current_page', 1, (int,)),
                OptionSpec('last_page', 1, (int,)),
                OptionSpec('url', '?page={page}'),
                OptionSpec('window', 2, (int,)),
                OptionSpec('total', None, (int,)),
                OptionSpec('per_page', None, (int,)),
            )),
            handler=pagination_handler,
            derive=pagination_derive,
            variants={
                'state': VariantTable('pagination.state', {
                    'default': 'bg-white border-gray-300 text-gray-500 hover:bg-gray-50',
                    'current': 'z-10 bg-blue-50 border-blue-500 text-blue-600',
                    'gap': 'bg-white border-gray-300 text-gray-700',
                }, fallback='default'),
            },
            sections=(
                Section('pages', ('pages',)),
                Section('prev', ('prev_url',)),
                Section('next', ('next_url',)),
                Section('summary', ('summary',)),
            ),
            examples=['pagination: {current_page: 3, last_page: 12, url: "/app/tasks?page={page}"}'],
        ))

    def dataComponents_register(self) -> None:
        """Register card, kpi_strip, table and code"""

        def card_handler(inst: Any, renderer: Any) -> str:
            """Handle card - panel with optional header and footer"""
            padding = inst.classes('padding', inst.opt('variant'))

            header_html = ""
            if inst.has('header'):
                heading_parts = []
                if inst.has('title'):
                    heading_parts.append(element('h2', {'class': 'text-lg font-semibold text-gray-900'}, inst.text('title')))
                if inst.has('subtitle'):
                    heading_parts.append(element('p', {'class': 'mt-1 text-sm text-gray-500'}, inst.text('subtitle')))
                heading = inst.slot('header') or element('div', None, *heading_parts)
                actions = element('div', {'class': 'flex items-center space-x-3'}, inst.slot('actions')) if inst.has('actions') else ""
                header_html = element(
                    'div',
                    {'class': classes_join('flex items-center justify-between border-b border-gray-200', padding)},
                    heading,
                    actions,
                )

            body_html = element('div', {'class': padding}, inst.slot('body')) if inst.has('body') else ""
            footer_html = ""
            if inst.has('footer'):
                footer_html = element('div', {'class': classes_join('border-t border-gray-200 bg-gray-50', padding)},
                                      inst.slot('footer'))

            return inst.root('div', {'class': classes_join('overflow-hidden', inst.classes('variant'))},
                             header_html, body_html, footer_html)

        self.register(ComponentSpec(
            name='card',
            category=ComponentCategory.DATA,
            description='Content panel with optional header, actions and footer',
            schema=OptionSchema('card', (
                OptionSpec('title', None),
                OptionSpec('subtitle', None),
                OptionSpec('variant', 'default', (str,), choices=('default', 'bordered', 'compact', 'flat')),
            )),
            handler=card_handler,
            variants={
                'variant': VariantTable('card.variant', {
                    'default': 'bg-white shadow-sm rounded-lg border border-gray-200',
                    'bordered': 'bg-white rounded-lg border-2 border-gray-300',
                    'compact': 'bg-white shadow-sm rounded-md border border-gray-200',
                    'flat': 'bg-white rounded-lg',
                }, fallback='default'),
                'padding': VariantTable('card.padding', {
                    'default': 'px-6 py-4',
                    'compact': 'px-4 py-2',
                }, fallback='default'),
            },
            sections=(
                Section('header', ('title', 'subtitle', 'header', 'actions')),
                Section('title', ('title',)),
                Section('subtitle', ('subtitle',)),
                Section('actions', ('actions',)),
                Section('body', ('body',)),
                Section('footer', ('footer',)),
            ),
            slots=('header', 'body', 'footer', 'actions'),
            examples=['card: {title: Recent Projects, slots: {body: "<ul>...</ul>"}}'],
            aliases=['panel'],
        ))

        def kpi_strip_handler(inst: Any, renderer: Any) -> str:
            """Handle kpi_strip - grid of KPI cards with optional change indicators"""
            if not inst.has('items'):
                return ""

            cards = []
            for item in _items(inst.opt('items'), 'kpi_strip'):
                tile = element(
                    'div',
                    {'class': classes_join('w-12 h-12 rounded-lg flex items-center justify-center',
                                           inst.classes('color', item.get('color')))},
                    icon(item.get('icon'), 'text-lg'),
                ) if not value_isBlank(item.get('icon')) else ""

                value = item.get('value')
                summary = element(
                    'div', {'class': 'ml-4' if tile else None},
                    element('p', {'class': 'text-sm font-medium text-gray-500'}, text_escape(item.get('label'))),
                    element('p', {
                        'class': 'text-2xl font-bold text-gray-900',
                        'id': f"kpi-{item['key']}-count" if not value_isBlank(item.get('key')) else None,
                    }, text_escape(value) if not value_isBlank(value) else '&mdash;'),
                )

                change_html = ""
                change = item.get('change')
                if isinstance(change, (int, float)) and not isinstance(change, bool):
                    trend = 'up' if change > 0 else 'down' if change < 0 else 'flat'
                    arrow = {'up': 'fas fa-arrow-up', 'down': 'fas fa-arrow-down', 'flat': 'fas fa-minus'}[trend]
                    change_html = element(
                        'div', {'class': classes_join('mt-4 flex items-center text-sm', inst.classes('trend', trend))},
                        icon(arrow, 'mr-1'),
                        f"{abs(change):g}%",
                        element('span', {'class': 'ml-2 text-gray-500'}, text_escape(item.get('period') or inst.string('vs last month'))),
                    )

                cards.append(element(
                    'div',
                    {'class': 'bg-white overflow-hidden shadow-sm rounded-lg border border-gray-200 '
                              'hover:shadow-md transition-shadow duration-200'},
                    element('div', {'class': 'p-6'},
                            element('div', {'class': 'flex items-center'}, tile, summary),
                            change_html),
                ))

            return inst.root(
                'div',
                {'class': classes_join('grid grid-cols-1 gap-6', inst.classes('columns', str(inst.opt('columns'))))},
                *cards,
            )

        self.register(ComponentSpec(
            name='kpi_strip',
            category=ComponentCategory.DATA,
            description='Row of KPI cards (label, value, icon, change vs previous period)',
            schema=OptionSchema('kpi_strip', (
                OptionSpec('items', (), (list, tuple)),
                OptionSpec('columns', 4, (int,)),
            )),
            handler=kpi_strip_handler,
            variants={
                'color': VariantTable('kpi_strip.color', {
                    'blue': 'bg-blue-100 text-blue-600',
                    'green': 'bg-green-100 text-green-600',
                    'purple': 'bg-purple-100 text-purple-600',
                    'yellow': 'bg-yellow-100 text-yellow-600',
                    'red': 'bg-red-100 text-red-600',
                    'gray': 'bg-gray-100 text-gray-600',
                }, fallback='blue'),
                'trend': VariantTable('kpi_strip.trend', {
                    'up': 'text-green-600',
                    'down': 'text-red-600',
                    'flat': 'text-gray-500',
                }, fallback='flat'),
                'columns': VariantTable('kpi_strip.columns', {
                    '1': '',
                    '2': 'md:grid-cols-2',
                    '3': 'md:grid-cols-3',
                    '4': 'md:grid-cols-2 lg:grid-cols-4',
                }, fallback='4'),
            },
            sections=(Section('items', ('items',)),),
            examples=['kpi_strip: {items: [{key: projects, label: Total Projects, value: 12, change: 8.5, icon: fas fa-project-diagram, color: blue}]}'],
            aliases=['kpis'],
        ))

        def table_derive(values: Dict[str, Any], context: Any) -> Dict[str, Any]:
            rows = _items(values.get('items'), 'table')
            row_actions = _items(values.get('actions'), 'table') if values.get('show_actions') else []
            return {
                'columns': _items(values.get('columns'), 'table'),
                'rows': rows,
                'is_empty': not rows,
                'row_actions': row_actions,
                'bulk_enabled': bool(values.get('bulk')) and bool(rows),
            }

        def table_cell(renderer: Any, column: Dict[str, Any], row: Dict[str, Any]) -> str:
            """Cell text, or a badge when the column maps values to badge variants"""
            value = row.get(column.get('key'))
            badges = column.get('badge')
            if isinstance(badges, dict) and not value_isBlank(value):
                return renderer.fragment('badge', {'label': str(value), 'variant': badges.get(str(value), 'default'),
                                                   'size': 'sm'})
            return text_escape(value) if not value_isBlank(value) else text_escape(column.get('empty', ''))

        def table_rowActions(inst: Any, row: Dict[str, Any]) -> str:
            """Per-row action links; `{id}` in a url is replaced with the row id"""
            row_id = str(row.get('id', ''))
            links = []
            for action in inst.opt('row_actions'):
                url = (_item_url(action, inst.context) or '#').replace('{id}', row_id)
                label = text_escape(action.get('label'))
                links.append(element(
                    'a',
                    {
                        'href': url,
                        'class': classes_join('inline-flex items-center text-sm',
                                              'text-red-600 hover:text-red-800' if action.get('danger')
                                              else 'text-blue-600 hover:text-blue-800'),
                        'title': action.get('title') or action.get('label'),
                    },
                    icon(action.get('icon')),
                    element('span', {'class': 'ml-1'}, label) if inst.opt('variant') != 'compact' else "",
                ))
            return element('div', {'class': 'flex items-center justify-end space-x-3'}, *links)

        def table_handler(inst: Any, renderer: Any) -> str:
            """Handle table - columns and rows with row actions, bulk selection, empty state and pagination"""
            cell = inst.classes('cell', inst.opt('variant'))
            columns = inst.opt('columns')
            rows = inst.opt('rows')
            th = 'text-left text-xs font-medium uppercase tracking-wider text-gray-500'

            header_html = ""
            if inst.has('header'):
                heading_parts = []
                if inst.has('title'):
                    heading_parts.append(element('h3', {'class': 'text-lg font-medium text-gray-900'}, inst.text('title')))
                if inst.has('subtitle'):
                    heading_parts.append(element('p', {'class': 'mt-1 text-sm text-gray-500'}, inst.text('subtitle')))
                toolbar = [inst.slot('toolbar')]
                if inst.has('bulk'):
                    toolbar.append(element(
                        'div',
                        {'class': 'flex items-center space-x-2', 'x-show': 'selected.length > 0', 'x-cloak': True},
                        element('span', {'class': 'text-sm text-gray-600',
                                         'x-text': f"selected.length + ' ' + {json.dumps(inst.context.string_get('selected'))}"}),
                        element('button', {
                            'type': 'button',
                            'class': 'inline-flex items-center px-3 py-1.5 text-sm font-medium text-red-700 '
                                     'bg-red-50 rounded-md hover:bg-red-100',
                            '@click': f"$dispatch('bulk-action', {{ id: {json.dumps(inst.id)}, ids: selected }})",
                        }, icon('fas fa-trash', 'mr-1'), inst.string('Delete Selected')),
                    ))
                header_html = element(
                    'div', {'class': 'flex items-center justify-between border-b border-gray-200 px-6 py-4'},
                    element('div', {'class': 'flex-1 min-w-0'}, *heading_parts),
                    element('div', {'class': 'flex items-center space-x-3'}, *toolbar),
                )

            head_cells = []
            if inst.has('bulk'):
                all_ids = json.dumps([str(row.get('id', '')) for row in rows])
                head_cells.append(element('th', {'class': classes_join(cell, 'w-12')}, element('input', {
                    'type': 'checkbox',
                    'class': 'rounded border-gray-300',
                    'aria-label': inst.string('Select all'),
                    '@change': f"selected = $event.target.checked ? {all_ids} : []",
                    ':checked': f"selected.length === {len(rows)}",
                })))
            for column in columns:
                head_cells.append(element('th', {'scope': 'col', 'class': classes_join(cell, th, column.get('class') or '')},
                                          text_escape(column.get('label') or column.get('key'))))
            if inst.has('actions'):
                head_cells.append(element('th', {'scope': 'col', 'class': classes_join(cell, th, 'text-right')},
                                          inst.string('Actions')))
            thead = element('thead', {'class': classes_join('bg-gray-50', 'sticky top-0' if inst.opt('sticky') else '')},
                            element('tr', None, *head_cells))

            body_rows = []
            for row in rows:
                cells = []
                row_id = str(row.get('id', ''))
                if inst.has('bulk'):
                    cells.append(element('td', {'class': cell}, element('input', {
                        'type': 'checkbox',
                        'class': 'rounded border-gray-300',
                        'value': row_id,
                        'x-model': 'selected',
                    })))
                for column in columns:
                    cells.append(element('td', {'class': classes_join(cell, 'text-sm text-gray-900', column.get('class') or '')},
                                         table_cell(renderer, column, row)))
                if inst.has('actions'):
                    cells.append(element('td', {'class': classes_join(cell, 'text-right')}, table_rowActions(inst, row)))
                body_rows.append(element('tr', {'class': 'hover:bg-gray-50'}, *cells))

            if inst.has('empty'):
                span = len(columns) + (1 if inst.has('actions') else 0)
                empty = inst.slot('empty') or renderer.fragment('empty_state', dict(inst.opt('empty_state') or {}))
                body_rows.append(element('tr', None, element('td', {'colspan': max(span, 1)}, empty)))

            table_html = element(
                'div', {'class': 'overflow-x-auto'},
                element('table', {'class': 'min-w-full divide-y divide-gray-200'},
                        thead, element('tbody', {'class': 'bg-white divide-y divide-gray-200'}, *body_rows)),
            )

            pagination_html = ""
            if inst.has('pagination'):
                links = renderer.fragment('pagination', dict(inst.opt('pagination')))
                if links:
                    pagination_html = element('div', {'class': 'border-t border-gray-200 px-6 py-3'}, links)

            return inst.root(
                'div',
                {
                    'class': classes_join('overflow-hidden', inst.classes('variant')),
                    'x-data': '{ selected: [] }' if inst.has('bulk') else None,
                },
                header_html,
                table_html,
                pagination_html,
            )

        self.register(ComponentSpec(
            name='table',
            category=ComponentCategory.DATA,
            description='Data table with row actions, bulk selection, empty state and pagination',
            schema=OptionSchema('table', (
                OptionSpec('title', None),
                OptionSpec('subtitle', None),
                OptionSpec('columns', (), (list, tuple),
                           description='[{key, label, class, badge: {value: badge variant}}]'),
                OptionSpec('items', (), (list, tuple)),
                OptionSpec('actions', (), (list, tuple),
                           description='[{label, icon, url or route, danger}]; "{id}" in url is the row id'),
                OptionSpec('show_actions', True, (bool,)),
                OptionSpec('bulk', False, (bool,)),
                OptionSpec('sticky', False, (bool,)),
                OptionSpec('empty_state', None, (dict,), description='Options of the embedded empty_state'),
                OptionSpec('pagination', None, (dict,), description='Options of the embedded pagination'),
                OptionSpec('variant', 'default', (str,), choices=('default', 'compact', 'bordered')),
            )),
            handler=table_handler,
            derive=table_derive,
            variants={
                'variant': VariantTable('table.variant', {
                    'default': 'bg-white shadow-sm rounded-lg border border-gray-200',
                    'compact': 'bg-white shadow-sm rounded-md border border-gray-200',
                    'bordered': 'bg-white rounded-lg border-2 border-gray-300',
                }, fallback='default'),
                'cell': VariantTable('table.cell', {
                    'default': 'px-6 py-4 whitespace-nowrap',
                    'compact': 'px-3 py-2 whitespace-nowrap',
                    'bordered': 'px-6 py-4 whitespace-nowrap border border-gray-200',
                }, fallback='default'),
            },
            sections=(
                Section('header', ('title', 'subtitle', 'toolbar', 'bulk_enabled')),
                Section('title', ('title',)),
                Section('subtitle', ('subtitle',)),
                Section('bulk', ('bulk_enabled',)),
                Section('actions', ('row_actions',)),
                Section('empty', ('is_empty',)),
                Section('pagination', ('pagination',)),
            ),
            slots=('toolbar', 'empty'),
            examples=['table: {title: Projects, columns: [{key: name, label: Name}, {key: status, label: Status, '
                      'badge: {active: success, on_hold: warning}}], items: [{id: 1, name: Tower A, status: active}], '
                      'actions: [{label: Edit, icon: fas fa-edit, url: "/app/projects/{id}/edit"}]}'],
            aliases=['data_table'],
        ))

        def code_handler(inst: Any, renderer: Any) -> str:
            """Handle code - syntax highlighted block with inline styles"""
            if not inst.has('code'):
                return ""
            language = inst.opt('language') or 'text'

            lexer: Lexer
            try:
                lexer = get_lexer_by_name(language)
            except ClassNotFound:
                LOG(f"code: no lexer for '{language}', using plain text", level=2)
                lexer = TextLexer()

            theme = getattr(renderer, 'theme', None)
            style = theme.config_get('code.pygments_style', 'monokai') if theme else 'monokai'
            linenos = 'inline' if inst.opt('line_numbers') else False
            try:
                formatter = HtmlFormatter(style=style, noclasses=True, linenos=linenos)
            except ClassNotFound:
                LOG(f"code: no pygments style '{style}', using monokai", level=1, warning=True)
                formatter = HtmlFormatter(style='monokai', noclasses=True, linenos=linenos)
            highlighted = highlight(inst.opt('code'), lexer, formatter)

            header_html = ""
            if inst.has('header'):
                header_html = element(
                    'div',
                    {'class': 'flex items-center justify-between px-4 py-2 text-xs text-gray-400 bg-gray-800'},
                    element('span', None, inst.text('title')),
                    element('span', {'class': 'uppercase'}, text_escape(language)),
                )
            return inst.root('div', {'class': 'rounded-lg overflow-hidden text-sm'}, header_html, highlighted)

        self.register(ComponentSpec(
            name='code',
            category=ComponentCategory.DATA,
            description='Syntax highlighted code block (API docs, log excerpts)',
            schema=OptionSchema('code', (
                OptionSpec('code', None),
                OptionSpec('language', 'text'),
                OptionSpec('title', None),
                OptionSpec('line_numbers', False, (bool,)),
            )),
            handler=code_handler,
            sections=(
                Section('code', ('code',)),
                Section('header', ('title',)),
            ),
            examples=['code: {language: json, title: Response, code: "{\\"status\\": \\"ok\\"}"}'],
        ))
