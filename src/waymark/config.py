"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from waymark.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(strict_segments=False)

    Raises ``ConfigurationError`` for a blank ``logger_name``.
    """

    # A path longer than a pattern without a catch-all fails the candidate.
    # False skips the surplus segments instead.
    strict_segments: bool = True

    # An empty segment ("/users//posts") binds a placeholder as "".
    # False makes such a path fail the candidate.
    allow_empty_segments: bool = True

    # Logger used for registration and match diagnostics
    logger_name: str = "waymark.routing"

    def __post_init__(self) -> None:
        if not self.logger_name.strip():
            msg = "RouterConfig.logger_name must be a non-empty logger name"
            raise ConfigurationError(msg)
