"""
Render context model

Explicit, passed-down context for a page render. Everything a component
needs from the surrounding application (user, tenant, localized strings,
routes, breadcrumbs, theme flags) arrives here as plain data.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class RenderContext:
    """
    Per-page render context

    Attributes:
        theme: Theme name in effect
        dark: Dark mode flag (applied to the document root, not per component)
        user: Authenticated user data (e.g., {"first_name": "Ana"})
        tenant: Tenant data (e.g., {"name": "Acme Builders"})
        strings: Localized string table, key -> text
        routes: Route table, route name -> URL
        breadcrumbs: Default breadcrumb trail [{"label": ..., "url": ...}]
        verbosity: Logging verbosity for LOG() while rendering with this context
        counters: Per-component instance counters for id generation
    """
    theme: str = "default"
    dark: bool = False
    user: Dict[str, Any] = field(default_factory=dict)
    tenant: Dict[str, Any] = field(default_factory=dict)
    strings: Dict[str, str] = field(default_factory=dict)
    routes: Dict[str, str] = field(default_factory=dict)
    breadcrumbs: List[Dict[str, Any]] = field(default_factory=list)
    verbosity: int = 1
    counters: Dict[str, int] = field(default_factory=dict)

    def string_get(self, key: str, default: Optional[str] = None) -> str:
        """Localized string lookup; falls back to default, then to the key itself"""
        if key in self.strings:
            return self.strings[key]
        return default if default is not None else key

    def route_get(self, name: str, default: str = "#") -> str:
        """URL for a named route, or default when the route is unknown"""
        return self.routes.get(name, default)

    def id_next(self, component: str) -> str:
        """
        Allocate the next opaque instance id for a component.

        Ids are deterministic for a given context: the n-th alert rendered
        with this context is always "<prefix>-alert-n".
        """
        from ..config import appsettings

        self.counters[component] = self.counters.get(component, 0) + 1
        return appsettings.instanceId_make(component, self.counters[component])

    @classmethod
    def context_createFromMeta(cls, meta: Dict[str, Any], theme: str, verbosity: int = 1) -> "RenderContext":
        """
        Build a context from the `meta.context` block of a page file.

        Unknown keys in the block are ignored.
        """
        data = meta.get('context') or {}
        return cls(
            theme=theme,
            dark=bool(meta.get('dark', False)),
            user=dict(data.get('user') or {}),
            tenant=dict(data.get('tenant') or {}),
            strings=dict(data.get('strings') or {}),
            routes=dict(data.get('routes') or {}),
            breadcrumbs=list(data.get('breadcrumbs') or []),
            verbosity=verbosity,
        )
