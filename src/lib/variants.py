"""
Variant mapping for zenaui components

Looks up the class bundle for a variant key. Unknown keys never raise: they
degrade to the table's fallback bundle.
"""

from typing import Any, Iterable, List

from ..models.variants import ClassBundle, VariantTable
from .log import LOG


def variant_map(table: VariantTable, key: Any) -> ClassBundle:
    """
    Return the class bundle for a variant key.

    Args:
        table: Variant table to look in
        key: Caller-supplied variant key (any value; non-strings never match)

    Returns:
        table[key] if present, else table[fallback]

    Example:
        >>> table = VariantTable("sheet.height", {"sm": "h-1/3", "md": "h-1/2"}, "md")
        >>> variant_map(table, "lg")
        ('h-1/2',)
    """
    if isinstance(key, str):
        bundle = table.bundle_get(key)
        if bundle is not None:
            return bundle
    LOG(f"{table.name}: unknown variant {key!r}, using '{table.fallback}'", level=2)
    return table.bundle_get(table.fallback) or ()


def variant_key(table: VariantTable, key: Any) -> str:
    """The key variant_map() actually used: key itself, or the fallback"""
    return key if key in table else table.fallback


def classes_join(*bundles: Iterable[str]) -> str:
    """
    Join class bundles into one class attribute value.

    Order is preserved and repeated tokens are dropped; blank tokens are
    skipped so callers can pass "" for absent modifiers.
    """
    seen: set[str] = set()
    tokens: List[str] = []
    for bundle in bundles:
        if isinstance(bundle, str):
            bundle = bundle.split()
        for token in bundle:
            if token and token not in seen:
                seen.add(token)
                tokens.append(token)
    return " ".join(tokens)
