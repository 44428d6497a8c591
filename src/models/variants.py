"""
Variant table model

A variant table maps a caller-supplied key ("success", "lg", "bordered") to a
bundle of class tokens, with one entry designated as the fallback.
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Sequence, Tuple, Union

ClassBundle = Tuple[str, ...]


def bundle_normalize(value: Union[str, Sequence[str], None]) -> ClassBundle:
    """Turn "a b c" or ["a", "b c"] into ("a", "b", "c")"""
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(value.split())
    tokens: list[str] = []
    for part in value:
        tokens.extend(str(part).split())
    return tuple(tokens)


@dataclass(frozen=True)
class VariantTable:
    """
    Mapping from variant key to class bundle with a declared fallback

    Attributes:
        name: Table name, also the key themes use to override it
              (e.g., "alert.type", "modal.size")
        entries: Variant key -> class bundle
        fallback: Key whose bundle is used for unknown lookups

    Raises:
        ValueError: if the fallback key has no entry

    Example:
        >>> table = VariantTable("sheet.height", {"sm": "h-1/3", "md": "h-1/2"}, "md")
        >>> table.entries["sm"]
        ('h-1/3',)
    """
    name: str
    entries: Mapping[str, Union[str, Sequence[str]]]
    fallback: str
    _bundles: Dict[str, ClassBundle] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        bundles = {str(key): bundle_normalize(value) for key, value in self.entries.items()}
        if self.fallback not in bundles:
            raise ValueError(
                f"Variant table '{self.name}' has no entry for its fallback '{self.fallback}'"
            )
        object.__setattr__(self, "entries", bundles)
        object.__setattr__(self, "_bundles", bundles)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._bundles

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._bundles)

    def bundle_get(self, key: str) -> Optional[ClassBundle]:
        return self._bundles.get(key)

    def merged(self, overrides: Optional[Mapping[str, Union[str, Sequence[str]]]]) -> "VariantTable":
        """
        Layer theme entries over this table.

        Args:
            overrides: Variant key -> class bundle from a theme

        Returns:
            New table with the same name and fallback
        """
        if not overrides:
            return self
        entries: Dict[str, Union[str, Sequence[str]]] = dict(self._bundles)
        entries.update({str(key): value for key, value in overrides.items()})
        return VariantTable(self.name, entries, self.fallback)
