"""
Type definitions for hand movement recognition.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol, Sequence, runtime_checkable


class ScrollLabel(str, Enum):
    """Direction of the hand rectangle's movement between two frames."""
    NONE = "___"
    RIGHT = "Scrolling right"
    UP = "Scrolling up"
    LEFT = "Scrolling left"
    DOWN = "Scrolling down"


class ZoomLabel(str, Enum):
    """Change of the hand rectangle's height between two frames."""
    NONE = "___"
    IN = "Zoom in"
    OUT = "Zoom out"


class SlideLabel(str, Enum):
    """Rotation of the hand's long axis away from the upright pose."""
    NONE = "___"
    LEFT = "Slide left"
    RIGHT = "Slide right"


@dataclass(frozen=True)
class HandRect:
    """Bounding rectangle of a hand reduced to its center and height, normalized to [0..1]."""
    x_center: float
    y_center: float
    height: float


@dataclass(frozen=True)
class FrameInput:
    """One frame of hand measurements."""
    rect_center_x: float
    rect_center_y: float
    rect_height: float
    landmarks: Sequence[Any]  # (x, y) tuples or objects with .x/.y

    @property
    def rect(self) -> HandRect:
        return HandRect(self.rect_center_x, self.rect_center_y, self.rect_height)


@dataclass(frozen=True)
class MovementLabels:
    """Labels recognized for a single frame."""
    scroll: ScrollLabel = ScrollLabel.NONE
    zoom: ZoomLabel = ZoomLabel.NONE
    slide: SlideLabel = SlideLabel.NONE


@dataclass(frozen=True)
class ClassifierState:
    """Snapshot of what the classifier remembers from previous frames."""
    has_prev_center: bool
    prev_center_x: float
    prev_center_y: float
    has_prev_height: bool
    prev_height: float
    has_prev_angle: bool
    prev_angle_deg: int
    frame_index: int


class InvalidInput(ValueError):
    """Raised when a frame violates the classifier's input contract.

    When only the slide feature could not be evaluated, ``labels`` holds the
    scroll and zoom results that were still computed for the frame.
    """

    def __init__(self, message: str, labels: Optional[MovementLabels] = None):
        super().__init__(message)
        self.labels = labels


@runtime_checkable
class ControllerProto(Protocol):
    """Abstract protocol for controllers that act on recognized movements."""

    async def scroll(self, label: ScrollLabel) -> None:
        """Execute a scroll in the direction of the label."""
        ...

    async def zoom(self, label: ZoomLabel) -> None:
        """Zoom in or out."""
        ...

    async def slide(self, label: SlideLabel) -> None:
        """Slide to the previous or next page."""
        ...
