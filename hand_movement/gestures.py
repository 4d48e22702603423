"""
Movement recognition classes that turn hand measurements into labels.
"""
import logging
import math
from typing import Any, Optional, Sequence

from .config import ClassifierConfig
from .geometry import MIDDLE_FINGER_MCP, WRIST, distance, point_xy, signed_angle_degrees
from .types import (
    ClassifierState,
    FrameInput,
    HandRect,
    InvalidInput,
    MovementLabels,
    ScrollLabel,
    SlideLabel,
    ZoomLabel,
)

logger = logging.getLogger(__name__)

# Offset of the synthetic horizontal reference point used for angles
REFERENCE_OFFSET = 0.1


class ScrollDetector:
    """
    Classifies the movement of the rectangle center between two frames.

    Only movements longer than a fraction of the rectangle height count, so a
    hand near the camera needs to travel as far (relative to its size) as a
    hand far from it.
    """

    def __init__(self, cfg: ClassifierConfig):
        self.cfg = cfg
        self.has_prev_center = False
        self.prev_center_x = 0.0
        self.prev_center_y = 0.0

    def update(self, rect: HandRect) -> ScrollLabel:
        """
        Compare the rectangle center to the previous one and remember it.

        Args:
            rect: Current hand rectangle

        Returns:
            Direction of the movement, or ScrollLabel.NONE
        """
        label = ScrollLabel.NONE
        current = (rect.x_center, rect.y_center)

        if self.has_prev_center:
            prev = (self.prev_center_x, self.prev_center_y)
            movement = distance(current, prev)
            threshold = self.cfg.scroll_distance_factor * rect.height

            if movement > threshold:
                reference = (prev[0] + REFERENCE_OFFSET, prev[1])
                label = self._classify(signed_angle_degrees(current, prev, reference))
                logger.info("recognized scrolling: %s (distance=%.4f, threshold=%.4f)",
                            label.value, movement, threshold)

        self.prev_center_x, self.prev_center_y = current
        self.has_prev_center = True
        return label

    @staticmethod
    def _classify(angle: int) -> ScrollLabel:
        if -45 <= angle < 45:
            return ScrollLabel.RIGHT
        if 45 <= angle < 135:
            return ScrollLabel.UP
        if -135 <= angle < -45:
            return ScrollLabel.DOWN
        # [135, 180] and [-180, -135)
        return ScrollLabel.LEFT

    def reset(self) -> None:
        self.has_prev_center = False
        self.prev_center_x = 0.0
        self.prev_center_y = 0.0


class ZoomDetector:
    """Classifies growth or shrinkage of the rectangle height."""

    def __init__(self, cfg: ClassifierConfig):
        self.cfg = cfg
        self.has_prev_height = False
        self.prev_height = 0.0

    def update(self, rect: HandRect) -> ZoomLabel:
        label = ZoomLabel.NONE
        height = rect.height

        if self.has_prev_height:
            threshold = self.cfg.zoom_height_factor * height
            if height < self.prev_height - threshold:
                label = ZoomLabel.OUT
            elif height > self.prev_height + threshold:
                label = ZoomLabel.IN

            if label is not ZoomLabel.NONE:
                logger.info("recognized zooming: %s (height %.4f -> %.4f)",
                            label.value, self.prev_height, height)

        self.prev_height = height
        self.has_prev_height = True
        return label

    def reset(self) -> None:
        self.has_prev_height = False
        self.prev_height = 0.0


class SlideDetector:
    """
    Detects the hand tilting left or right out of an upright pose.

    The hand's long axis (wrist to middle finger MCP) is measured against the
    horizontal. A slide is only recognized when the previous angle was close
    to vertical, i.e. the palm was facing the camera.
    """

    def __init__(self, cfg: ClassifierConfig):
        self.cfg = cfg
        self.has_prev_angle = False
        self.prev_angle_deg = 0
        self.min_landmarks = max(cfg.min_landmarks_for_slide, MIDDLE_FINGER_MCP + 1)

    def hand_angle(self, landmarks: Sequence[Any]) -> int:
        """
        Angle between the hand's long axis and the x-axis.

        Args:
            landmarks: Hand landmarks in [0..1] range

        Returns:
            Angle in whole degrees, 90 for an upright hand
        """
        if len(landmarks) < self.min_landmarks:
            raise InvalidInput(
                f"Slide detection needs at least {self.min_landmarks} landmarks, got {len(landmarks)}"
            )
        wrist = point_xy(landmarks[WRIST])
        mcp = point_xy(landmarks[MIDDLE_FINGER_MCP])
        return signed_angle_degrees(mcp, wrist, (wrist[0] + REFERENCE_OFFSET, wrist[1]))

    def update(self, landmarks: Sequence[Any]) -> SlideLabel:
        angle = self.hand_angle(landmarks)

        if not self.has_prev_angle:
            self.prev_angle_deg = angle
            self.has_prev_angle = True
            logger.debug("slide angle seeded at %d deg", angle)
            return SlideLabel.NONE

        label = SlideLabel.NONE
        if self.is_upright(self.prev_angle_deg):
            if angle > self.prev_angle_deg + self.cfg.slide_angle_threshold_deg:
                label = SlideLabel.LEFT
            elif angle < self.prev_angle_deg - self.cfg.slide_angle_threshold_deg:
                label = SlideLabel.RIGHT

        if label is not SlideLabel.NONE:
            logger.info("recognized sliding: %s (angle %d -> %d)",
                        label.value, self.prev_angle_deg, angle)

        self.prev_angle_deg = angle
        return label

    def is_upright(self, angle: int) -> bool:
        return self.cfg.slide_gate_min_deg <= angle <= self.cfg.slide_gate_max_deg

    def reset(self) -> None:
        self.has_prev_angle = False
        self.prev_angle_deg = 0


class MovementClassifier:
    """
    Per-hand classifier that coordinates scroll, zoom and slide detection.

    One instance belongs to one tracked hand. Calls must be made once per
    frame, in timestamp order, from a single thread.
    """

    def __init__(self, cfg: Optional[ClassifierConfig] = None):
        """Initialize the classifier with thresholds (defaults if None)."""
        self.cfg = cfg if cfg is not None else ClassifierConfig()
        if self.cfg.slide_frame_stride < 1:
            raise ValueError(f"slide_frame_stride must be >= 1, got {self.cfg.slide_frame_stride}")

        self.scroll_detector = ScrollDetector(self.cfg)
        self.zoom_detector = ZoomDetector(self.cfg)
        self.slide_detector = SlideDetector(self.cfg)
        self.frame_index = 0

    def process_frame(self, rect: HandRect, landmarks: Sequence[Any]) -> MovementLabels:
        """
        Classify one frame and update the remembered state.

        Args:
            rect: Hand rectangle summary, normalized to [0..1]
            landmarks: Hand landmarks, wrist at index 0

        Returns:
            MovementLabels with a label for each feature

        Raises:
            InvalidInput: If the landmarks are empty or the height is not
                positive (nothing is updated), or if slide detection is due
                and there are too few landmarks (scroll and zoom are still
                updated and returned on the exception's ``labels``)
        """
        if len(landmarks) == 0:
            raise InvalidInput("Input landmark list is empty.")
        if not math.isfinite(rect.height) or rect.height <= 0:
            raise InvalidInput(f"Rectangle height must be positive, got {rect.height}")

        evaluate_slide = self.frame_index % self.cfg.slide_frame_stride == 0
        self.frame_index += 1

        scroll = self.scroll_detector.update(rect)
        zoom = self.zoom_detector.update(rect)

        slide = SlideLabel.NONE
        if evaluate_slide:
            try:
                slide = self.slide_detector.update(landmarks)
            except InvalidInput as e:
                logger.warning("frame %d: slide detection skipped: %s", self.frame_index - 1, e)
                raise InvalidInput(str(e), labels=MovementLabels(scroll=scroll, zoom=zoom)) from e

        return MovementLabels(scroll=scroll, zoom=zoom, slide=slide)

    def process(self, frame: FrameInput) -> MovementLabels:
        """Classify a FrameInput."""
        return self.process_frame(frame.rect, frame.landmarks)

    @property
    def state(self) -> ClassifierState:
        """Snapshot of the remembered values."""
        return ClassifierState(
            has_prev_center=self.scroll_detector.has_prev_center,
            prev_center_x=self.scroll_detector.prev_center_x,
            prev_center_y=self.scroll_detector.prev_center_y,
            has_prev_height=self.zoom_detector.has_prev_height,
            prev_height=self.zoom_detector.prev_height,
            has_prev_angle=self.slide_detector.has_prev_angle,
            prev_angle_deg=self.slide_detector.prev_angle_deg,
            frame_index=self.frame_index,
        )

    def reset(self) -> None:
        """Forget all previous frames, e.g. when the hand is lost."""
        self.scroll_detector.reset()
        self.zoom_detector.reset()
        self.slide_detector.reset()
        self.frame_index = 0
