"""URL pattern parsing.

Patterns are ``/``-delimited. A segment written ``{name}`` is a placeholder
bound to exactly one path segment; a final ``*`` segment is the catch-all,
bound to zero or more trailing segments.
"""

from dataclasses import dataclass

from waymark.errors import RoutingError, RoutingErrorReason

SEPARATOR = "/"
CATCH_ALL = "*"
PLACEHOLDER_START = "{"
PLACEHOLDER_END = "}"


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a URL pattern.

    Static:     ``/users``  (is_param=False)
    Param:      ``/{id}``   (is_param=True, param_name="id")
    Catch-all:  ``/*``      (is_catch_all=True)
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    is_catch_all: bool = False


def normalize_path(path: str) -> str:
    """Return *path* with exactly one leading ``/`` and no trailing ``/``.

    ::

        "simple"    -> "/simple"
        "/simple/"  -> "/simple"
        ""          -> "/"
    """
    return SEPARATOR + path.strip(SEPARATOR)


def split_path(path: str) -> list[str]:
    """Split a path into segments. The root path has none."""
    stripped = path.strip(SEPARATOR)
    if not stripped:
        return []
    return stripped.split(SEPARATOR)


def is_placeholder(part: str) -> bool:
    return len(part) > 2 and part.startswith(PLACEHOLDER_START) and part.endswith(PLACEHOLDER_END)


def parse_pattern(url: str) -> tuple[PathSegment, ...]:
    """Parse a URL pattern into segments, validating catch-all placement.

    Examples::

        "/users"          -> (PathSegment("users"),)
        "/users/{id}"     -> (PathSegment("users"), PathSegment("{id}", is_param=True, param_name="id"))
        "/files/*"        -> (PathSegment("files"), PathSegment("*", is_catch_all=True))

    Raises ``RoutingError`` (``INVALID_CATCH_ALL``) when ``*`` appears
    anywhere but as the whole final segment, and (``DUPLICATE_PARAMETER``)
    when a placeholder name repeats.
    """
    normalized = normalize_path(url)
    parts = split_path(normalized)
    last = len(parts) - 1
    segments: list[PathSegment] = []
    seen: set[str] = set()

    for index, part in enumerate(parts):
        if CATCH_ALL in part:
            if part != CATCH_ALL:
                msg = f"Catch-all '*' must be a whole segment, got {part!r} in {normalized!r}"
                raise RoutingError(RoutingErrorReason.INVALID_CATCH_ALL, msg)
            if index != last:
                msg = f"Catch-all '*' must be the final segment of {normalized!r}"
                raise RoutingError(RoutingErrorReason.INVALID_CATCH_ALL, msg)
            segments.append(PathSegment(value=part, is_catch_all=True))
        elif is_placeholder(part):
            name = part[1:-1]
            if name in seen:
                msg = f"Placeholder {part!r} appears more than once in {normalized!r}"
                raise RoutingError(RoutingErrorReason.DUPLICATE_PARAMETER, msg)
            seen.add(name)
            segments.append(PathSegment(value=part, is_param=True, param_name=name))
        else:
            segments.append(PathSegment(value=part))

    return tuple(segments)
