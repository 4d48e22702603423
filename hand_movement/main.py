"""
Webcam demo for hand movement recognition.
"""
import asyncio
import logging
import sys
from typing import Optional

import cv2

from .config import load_config
from .controller_mock import MockController
from .dispatch import dispatch_labels
from .geometry import hand_rect
from .gestures import MovementClassifier
from .landmarks import HandsTracker
from .types import InvalidInput, MovementLabels

logger = logging.getLogger(__name__)


class GestureRecognitionApp:
    """Main application class for hand movement recognition."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize the application with configuration."""
        self.config = load_config(config_path)
        self.tracker = HandsTracker(
            max_num_hands=self.config.mediapipe.max_num_hands,
            min_detection_conf=self.config.mediapipe.min_detection_confidence,
            min_tracking_conf=self.config.mediapipe.min_tracking_confidence
        )
        self.controller = MockController()
        self.classifier = MovementClassifier(self.config.classifier)
        self.last_labels = MovementLabels()

        self.cap = cv2.VideoCapture(self.config.camera.index)
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.config.camera.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.config.camera.height)
        self.cap.set(cv2.CAP_PROP_FPS, self.config.camera.fps)

        if not self.cap.isOpened():
            raise RuntimeError(f"Failed to open camera {self.config.camera.index}")

    async def run(self):
        """Run the main application loop."""
        logger.info("Starting %s, press 'q' to quit", self.config.display.window_name)
        hand_present = False

        while True:
            ret, frame = self.cap.read()
            if not ret:
                logger.error("Failed to read frame from camera")
                break

            landmarks = self.tracker.process(frame)

            if landmarks is None:
                if hand_present:
                    logger.info("Hand lost, resetting classifier")
                    self.classifier.reset()
                hand_present = False
                self.last_labels = MovementLabels()
            else:
                hand_present = True
                rect = hand_rect(landmarks)
                try:
                    self.last_labels = self.classifier.process_frame(rect, landmarks)
                except InvalidInput as e:
                    logger.warning("Frame rejected: %s", e)
                    self.last_labels = e.labels or MovementLabels()

                await dispatch_labels(self.controller, self.last_labels)

                if self.config.display.show_landmarks:
                    frame = self.tracker.draw_landmarks(frame, landmarks)
                if self.config.display.show_hand_rect:
                    frame = self.tracker.draw_rect(frame, rect, landmarks)

            self._draw_status(frame, hand_present)
            cv2.imshow(self.config.display.window_name, frame)

            if cv2.waitKey(1) & 0xFF == ord('q'):
                break

        self.close()

    def _draw_status(self, frame, hand_present: bool) -> None:
        if not hand_present:
            cv2.putText(frame, "No hand detected", (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.7, (255, 255, 255), 2)
            return

        lines = [
            f"Scroll: {self.last_labels.scroll.value}",
            f"Zoom:   {self.last_labels.zoom.value}",
            f"Slide:  {self.last_labels.slide.value}",
        ]
        for i, text in enumerate(lines):
            cv2.putText(frame, text, (10, 30 + i * 30), cv2.FONT_HERSHEY_SIMPLEX, 0.7, (0, 255, 0), 2)

    def close(self) -> None:
        """Release camera and windows."""
        if self.cap.isOpened():
            self.cap.release()
        self.tracker.close()
        cv2.destroyAllWindows()


async def run_app(config_path: Optional[str] = None):
    app = GestureRecognitionApp(config_path)
    try:
        await app.run()
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        app.close()


def main():
    """Console entry point: hand-movement-demo [config.yaml]"""
    logging.basicConfig(level=logging.INFO)
    config_path = sys.argv[1] if len(sys.argv) > 1 else None
    asyncio.run(run_app(config_path))


if __name__ == "__main__":
    main()
