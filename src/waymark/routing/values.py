"""Ordered, read-only value bags attached to routes and matches.

``Metadata`` carries arbitrary framework annotations (templates, ACL tags).
``ParameterValues`` carries placeholder values bound by a successful match;
its order follows the pattern so handlers can be invoked positionally.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any


def _ordered(values: Mapping[str, Any] | Iterable[tuple[str, Any]] | None) -> dict[str, Any]:
    if values is None:
        return {}
    if isinstance(values, Mapping):
        return dict(values.items())
    return dict(values)


class Metadata(Mapping[str, Any]):
    """Immutable, insertion-ordered route annotations."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None) -> None:
        object.__setattr__(self, "_values", _ordered(values))

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Metadata({self._values!r})"

    def get(self, name: str, default: Any = None) -> Any:
        """Return the value for *name*, or *default* if missing."""
        return self._values.get(name, default)

    def get_all(self) -> dict[str, Any]:
        return dict(self._values)


class ParameterValues(Mapping[str, str]):
    """Immutable, ordered placeholder values.

    Order is significant: ``get_all()`` returns values in the order they
    were bound, which is the order of the placeholders in the pattern.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, str] | Iterable[tuple[str, str]] | None = None) -> None:
        object.__setattr__(self, "_values", _ordered(values))

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        # Unlike plain mappings, order is part of the value
        if isinstance(other, ParameterValues):
            return list(self._values.items()) == list(other._values.items())
        return super().__eq__(other)

    def __repr__(self) -> str:
        return f"ParameterValues({self._values!r})"

    def get(self, name: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the value for *name*, or *default* if missing."""
        return self._values.get(name, default)

    def get_all(self) -> list[str]:
        """Return the values in binding order, for positional invocation."""
        return list(self._values.values())

    def get_names(self) -> list[str]:
        return list(self._values)

    def as_dict(self) -> dict[str, str]:
        return dict(self._values)
