"""
Hand landmark detection using MediaPipe.
"""
import cv2
import mediapipe as mp
import numpy as np
from typing import Optional, List, Tuple

from .types import HandRect


class HandsTracker:
    """Hand landmark tracker using MediaPipe Hands."""

    def __init__(self, max_num_hands: int = 1, min_detection_conf: float = 0.6, min_tracking_conf: float = 0.6):
        """
        Initialize the hands tracker.

        Args:
            max_num_hands: Maximum number of hands to detect
            min_detection_conf: Minimum confidence for hand detection
            min_tracking_conf: Minimum confidence for hand tracking
        """
        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=max_num_hands,
            min_detection_confidence=min_detection_conf,
            min_tracking_confidence=min_tracking_conf
        )

    def process(self, frame_bgr: np.ndarray) -> Optional[List[Tuple[float, float]]]:
        """
        Process a frame and return hand landmarks.

        Args:
            frame_bgr: Input frame in BGR format

        Returns:
            List of 21 (x, y) coordinates in [0..1] range, or None if no hand detected
        """
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        results = self.hands.process(frame_rgb)

        if results.multi_hand_landmarks:
            # Only the first hand is tracked
            hand_landmarks = results.multi_hand_landmarks[0]
            return [(landmark.x, landmark.y) for landmark in hand_landmarks.landmark]

        return None

    def close(self) -> None:
        self.hands.close()

    @staticmethod
    def draw_landmarks(frame: np.ndarray, landmarks: List[Tuple[float, float]]) -> np.ndarray:
        """Draw hand landmarks with their indices on the frame."""
        height, width = frame.shape[:2]

        for i, (x, y) in enumerate(landmarks):
            px = int(x * width)
            py = int(y * height)
            cv2.circle(frame, (px, py), 3, (0, 255, 0), -1)
            cv2.putText(frame, str(i), (px + 5, py - 5), cv2.FONT_HERSHEY_SIMPLEX, 0.3, (255, 255, 255), 1)

        return frame

    @staticmethod
    def draw_rect(frame: np.ndarray, rect: HandRect, landmarks: List[Tuple[float, float]]) -> np.ndarray:
        """Draw the bounding box the classifier sees and its center."""
        height, width = frame.shape[:2]
        xs = [x for x, _ in landmarks]
        top = int((rect.y_center - rect.height / 2) * height)
        bottom = int((rect.y_center + rect.height / 2) * height)
        left = int(min(xs) * width)
        right = int(max(xs) * width)

        cv2.rectangle(frame, (left, top), (right, bottom), (0, 0, 255), 2)
        cv2.circle(frame, (int(rect.x_center * width), int(rect.y_center * height)), 6, (0, 0, 255), -1)
        return frame
