"""
Geometry helpers for normalized hand landmarks.
"""
import math
from typing import Any, Sequence, Tuple

import numpy as np

from .types import HandRect, InvalidInput

Point = Tuple[float, float]

# Landmark indices (MediaPipe hand model)
WRIST = 0
MIDDLE_FINGER_MCP = 9


def point_xy(entry: Any) -> Point:
    """
    Extract an (x, y) pair from a landmark.

    Args:
        entry: (x, y) or (x, y, z) sequence, mapping with x/y keys,
            or an object with x/y attributes

    Returns:
        (x, y) as floats
    """
    if hasattr(entry, "x") and hasattr(entry, "y"):
        return (float(entry.x), float(entry.y))
    if isinstance(entry, dict) and "x" in entry and "y" in entry:
        return (float(entry["x"]), float(entry["y"]))
    if isinstance(entry, (list, tuple, np.ndarray)) and len(entry) >= 2:
        return (float(entry[0]), float(entry[1]))
    raise InvalidInput(f"Unsupported landmark format: {entry!r}")


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between 2D points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def radian_to_degree(radian: float) -> int:
    """Convert radians to whole degrees, rounding halves up."""
    return int(math.floor(radian * 180.0 / math.pi + 0.5))


def signed_angle_degrees(a: Point, b: Point, c: Point) -> int:
    """
    Signed angle at vertex B between the vectors B-A and B-C.

    With C placed to the right of B, a point A to the right of B gives 0,
    a point A above B (smaller y in image coordinates) gives +90 and a
    point A below B gives -90.

    Args:
        a: First point
        b: Vertex
        c: Reference point

    Returns:
        Angle in whole degrees, in [-180, 180]
    """
    v1 = (b[0] - a[0], b[1] - a[1])
    v2 = (b[0] - c[0], b[1] - c[1])

    dot = v1[0] * v2[0] + v1[1] * v2[1]
    cross = v1[0] * v2[1] - v1[1] * v2[0]

    return radian_to_degree(math.atan2(cross, dot))


def hand_rect(landmarks: Sequence[Any]) -> HandRect:
    """
    Summarize landmarks as the center and height of their bounding box.

    Args:
        landmarks: Hand landmarks in [0..1] range

    Returns:
        HandRect of the tightest axis-aligned box around the landmarks
    """
    if len(landmarks) == 0:
        raise InvalidInput("Input landmark list is empty.")

    points = np.array([point_xy(lm) for lm in landmarks], dtype=float)
    mins = points.min(axis=0)
    maxs = points.max(axis=0)

    return HandRect(
        x_center=float((mins[0] + maxs[0]) / 2.0),
        y_center=float((mins[1] + maxs[1]) / 2.0),
        height=float(maxs[1] - mins[1]),
    )
