"""ContextVar-based render configuration for incodoc-html.

The only setting is the default output variant used by the top-level
``render()`` function when no variant is passed explicitly.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from incodoc_html import render
    from incodoc_html.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(variant="css")):
        html = render(doc)  # class-annotated output

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Literal, TypeAlias

Variant: TypeAlias = Literal["semantic", "css"]

VARIANTS: tuple[str, ...] = ("semantic", "css")


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        variant: Output variant, "semantic" (native HTML elements) or
            "css" (class-annotated containers, navigation suppressed)

    """

    variant: Variant = "semantic"

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from a dictionary.

        Unknown keys are silently ignored.

        Example:
            >>> RenderConfig.from_dict({"variant": "css", "other": 1}).variant
            'css'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for the current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the module-level default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(variant="css")):
        ...     get_render_config().variant
        'css'
        >>> get_render_config().variant
        'semantic'

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "VARIANTS",
    "RenderConfig",
    "Variant",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
]
