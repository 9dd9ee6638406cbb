"""String normalisation utilities used by the content renderer."""

from __future__ import annotations

__all__ = ["to_symbol_case"]


_SEPARATOR = "_"


def _capitalize_first(segment: str) -> str:
    # ``str.capitalize`` would lowercase the remainder, which must be kept.
    return segment[:1].upper() + segment[1:]


def to_symbol_case(identifier: str) -> str:
    """Return the PascalCase style symbol generated from ``identifier``.

    The value is split on underscores and every non-empty segment has its
    first character uppercased. Empty segments produced by leading, trailing
    or doubled underscores are dropped and the remaining segments are joined
    without a separator.

    >>> to_symbol_case("my_cool_mod")
    'MyCoolMod'
    """

    return "".join(
        _capitalize_first(segment) for segment in identifier.split(_SEPARATOR) if segment
    )
