"""
Scrolling style registry and factory.

Maps case-insensitive style names to strategy classes so the paginator can
resolve a style from a plain string such as ``"Jumping"``.
"""

from typing import Callable

from paginator.constants import (
    SCROLLING_STYLE_ALL,
    SCROLLING_STYLE_ELASTIC,
    SCROLLING_STYLE_JUMPING,
    SCROLLING_STYLE_SLIDING,
)
from paginator.exceptions import ScrollingStyleNotFoundError
from paginator.logging import logger
from paginator.protocols import ScrollingStyle
from paginator.scrolling_styles.all import AllScrollingStyle
from paginator.scrolling_styles.elastic import ElasticScrollingStyle
from paginator.scrolling_styles.jumping import JumpingScrollingStyle
from paginator.scrolling_styles.sliding import SlidingScrollingStyle


class ScrollingStyleRegistry:
    """
    Registry of named scrolling styles.

    Strategies are stateless, so one instance per name is created lazily
    and reused.

    Example:
        ```python
        registry = ScrollingStyleRegistry()
        registry.register("Window", MyWindowStyle)

        style = registry.get("window")
        window = style.get_pages(3, 20, 5)
        ```
    """

    def __init__(
        self,
        factories: dict[str, Callable[[], ScrollingStyle]] | None = None,
    ):
        """
        Initialize the registry.

        Args:
            factories: Name to factory mapping. Defaults to the built-in
                All, Elastic, Jumping and Sliding styles.
        """
        self._factories: dict[str, Callable[[], ScrollingStyle]] = {}
        self._instances: dict[str, ScrollingStyle] = {}

        if factories is None:
            factories = {
                SCROLLING_STYLE_ALL: AllScrollingStyle,
                SCROLLING_STYLE_ELASTIC: ElasticScrollingStyle,
                SCROLLING_STYLE_JUMPING: JumpingScrollingStyle,
                SCROLLING_STYLE_SLIDING: SlidingScrollingStyle,
            }
        for name, factory in factories.items():
            self.register(name, factory)

    @staticmethod
    def _normalize(name: str) -> str:
        return name.strip().lower()

    def register(
        self, name: str, factory: Callable[[], ScrollingStyle]
    ) -> None:
        """
        Register (or replace) a scrolling style under ``name``.

        Args:
            name: Style name, matched case-insensitively.
            factory: Zero-argument callable returning the strategy,
                usually the strategy class itself.
        """
        key = self._normalize(name)
        self._factories[key] = factory
        self._instances.pop(key, None)

    def has(self, name: str) -> bool:
        return self._normalize(name) in self._factories

    def names(self) -> list[str]:
        return sorted(self._factories)

    def get(self, name: str) -> ScrollingStyle:
        """
        Resolve a scrolling style by name.

        Args:
            name: Style name such as ``"Sliding"`` or ``"jumping"``.

        Returns:
            The shared strategy instance for that name.

        Raises:
            ScrollingStyleNotFoundError: If no style is registered under
                the name.
        """
        key = self._normalize(name)
        if key not in self._factories:
            raise ScrollingStyleNotFoundError(
                f"Scrolling style '{name}' not found, "
                f"available: {', '.join(self.names())}"
            )

        if key not in self._instances:
            logger.debug(f"Creating scrolling style '{key}'")
            self._instances[key] = self._factories[key]()

        return self._instances[key]


# Shared registry used by Paginator unless another one is injected
scrolling_styles = ScrollingStyleRegistry()


def select_scrolling_style(
    style: str | ScrollingStyle,
    registry: ScrollingStyleRegistry | None = None,
) -> ScrollingStyle:
    """
    Select a scrolling style from a name or pass a strategy through.

    Decision logic:
    - If ``style`` is a string → look it up in the registry
    - Otherwise → it must already implement ScrollingStyle

    Args:
        style: Style name or strategy instance.
        registry: Registry to resolve names in. Defaults to the shared one.

    Returns:
        The scrolling style strategy.

    Raises:
        ScrollingStyleNotFoundError: If a name cannot be resolved or the
            object does not implement get_pages().
    """
    if isinstance(style, str):
        return (registry or scrolling_styles).get(style)

    if not isinstance(style, ScrollingStyle):
        raise ScrollingStyleNotFoundError(
            f"{type(style).__name__} does not implement get_pages()"
        )
    return style
