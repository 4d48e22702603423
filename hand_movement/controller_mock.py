"""
Mock controller implementation for testing recognized movements.
"""
import logging

from .types import ScrollLabel, SlideLabel, ZoomLabel

logger = logging.getLogger(__name__)


class MockController:
    """Mock controller that logs actions instead of executing them."""

    def __init__(self):
        """Initialize the mock controller."""
        self.scroll_count = 0
        self.zoom_count = 0
        self.slide_count = 0

    async def scroll(self, label: ScrollLabel) -> None:
        """Log scroll command instead of executing it."""
        self.scroll_count += 1
        logger.info("[MockController] %s (call #%d)", label.value, self.scroll_count)

    async def zoom(self, label: ZoomLabel) -> None:
        """Log zoom command instead of executing it."""
        self.zoom_count += 1
        logger.info("[MockController] %s (call #%d)", label.value, self.zoom_count)

    async def slide(self, label: SlideLabel) -> None:
        """Log slide command instead of executing it."""
        self.slide_count += 1
        logger.info("[MockController] %s (call #%d)", label.value, self.slide_count)

    def reset_counters(self) -> None:
        """Reset action counters for testing."""
        self.scroll_count = 0
        self.zoom_count = 0
        self.slide_count = 0
