"""
Hand Movement Recognition

Turns a stream of hand rectangles and landmarks into scroll, zoom and slide
labels, one set per frame.
"""

__version__ = "0.1.0"

from .types import (
    ScrollLabel,
    ZoomLabel,
    SlideLabel,
    HandRect,
    FrameInput,
    MovementLabels,
    ClassifierState,
    InvalidInput,
    ControllerProto,
)
from .config import load_config, Cfg, ClassifierConfig
from .controller_mock import MockController
from .dispatch import dispatch_labels
from .geometry import distance, signed_angle_degrees, radian_to_degree, hand_rect
from .gestures import MovementClassifier, ScrollDetector, ZoomDetector, SlideDetector

__all__ = [
    "ScrollLabel",
    "ZoomLabel",
    "SlideLabel",
    "HandRect",
    "FrameInput",
    "MovementLabels",
    "ClassifierState",
    "InvalidInput",
    "ControllerProto",
    "load_config",
    "Cfg",
    "ClassifierConfig",
    "MockController",
    "dispatch_labels",
    "distance",
    "signed_angle_degrees",
    "radian_to_degree",
    "hand_rect",
    "MovementClassifier",
    "ScrollDetector",
    "ZoomDetector",
    "SlideDetector",
]
