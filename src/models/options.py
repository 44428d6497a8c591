"""
Option schema models

Typed declarations of the named parameters a component accepts, plus the
result of merging caller overrides into them.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, Tuple


class _Unset:
    """Sentinel type for "caller did not supply this option"."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


# The one canonical "not supplied" marker. None and "" are real values.
UNSET: Any = _Unset()


@dataclass(frozen=True)
class OptionSpec:
    """
    Declaration of a single component option

    Attributes:
        name: Option name as supplied by callers (e.g., "dismissible")
        default: Value used when the caller does not supply the option
        types: Accepted Python types; None is always accepted
        choices: Known values for enumerated options (variant keys). Values
                 outside this set are not rejected; they degrade later.
        description: Human-readable description for the component catalog

    Example:
        OptionSpec("type", "info", (str,), choices=("success", "info", "warning", "error"))
    """
    name: str
    default: Any
    types: Tuple[type, ...] = (str,)
    choices: Optional[Tuple[str, ...]] = None
    description: str = ""


@dataclass(frozen=True)
class OptionSchema:
    """
    The fixed set of options a component declares

    Attributes:
        component: Owning component name (used in error messages)
        options: Declared option specs, in declaration order
    """
    component: str
    options: Tuple[OptionSpec, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self.options)

    def __contains__(self, name: object) -> bool:
        return any(spec.name == name for spec in self.options)

    def names(self) -> Tuple[str, ...]:
        return tuple(spec.name for spec in self.options)

    def defaults(self) -> Dict[str, Any]:
        return {spec.name: spec.default for spec in self.options}


@dataclass
class ResolvedOptions:
    """
    Fully populated option set for one component instance

    Attributes:
        values: Every declared option, exactly once (caller value or default)
        attributes: Unknown caller keys, kept as pass-through HTML attributes
    """
    values: Dict[str, Any]
    attributes: Dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, name: str) -> Any:
        return self.values[name]

    def get(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)
