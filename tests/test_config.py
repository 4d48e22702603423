"""
Test cases for configuration loading.
"""
import tempfile
import unittest
import sys
from pathlib import Path

import yaml

sys.path.insert(0, str(Path(__file__).parent.parent))

from hand_movement.config import ClassifierConfig, load_config
from hand_movement.gestures import MovementClassifier
from hand_movement.types import HandRect, ZoomLabel


class TestLoadConfig(unittest.TestCase):
    """Test YAML configuration loading."""

    def write_config(self, data: dict) -> str:
        tmp = tempfile.NamedTemporaryFile("w", suffix=".yaml", delete=False)
        with tmp:
            yaml.safe_dump(data, tmp)
        self.addCleanup(Path(tmp.name).unlink)
        return tmp.name

    def base_data(self) -> dict:
        return {
            "camera": {"index": 1, "width": 320, "height": 240, "fps": 15},
            "mediapipe": {"max_num_hands": 1, "min_detection_confidence": 0.5, "min_tracking_confidence": 0.5},
            "display": {"show_landmarks": False, "show_hand_rect": True, "window_name": "test"},
        }

    def test_default_config(self):
        """The packaged config carries the tuned thresholds."""
        cfg = load_config()
        self.assertEqual(cfg.classifier, ClassifierConfig())
        self.assertEqual(cfg.camera.width, 640)
        self.assertEqual(cfg.mediapipe.max_num_hands, 1)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_config("/nonexistent/config.yaml")

    def test_missing_section(self):
        data = self.base_data()
        del data["camera"]
        with self.assertRaises(KeyError):
            load_config(self.write_config(data))

    def test_classifier_section_optional(self):
        cfg = load_config(self.write_config(self.base_data()))
        self.assertEqual(cfg.classifier, ClassifierConfig())
        self.assertEqual(cfg.camera.index, 1)

    def test_partial_classifier_section(self):
        data = self.base_data()
        data["classifier"] = {"zoom_height_factor": 0.5}
        cfg = load_config(self.write_config(data))
        self.assertEqual(cfg.classifier.zoom_height_factor, 0.5)
        self.assertEqual(cfg.classifier.slide_angle_threshold_deg, 12)

    def test_thresholds_reach_classifier(self):
        data = self.base_data()
        data["classifier"] = {"zoom_height_factor": 0.5}
        classifier = MovementClassifier(load_config(self.write_config(data)).classifier)
        landmarks = [(0.5, 0.5)] * 21

        classifier.process_frame(HandRect(0.5, 0.5, 0.3), landmarks)
        labels = classifier.process_frame(HandRect(0.5, 0.5, 0.28), landmarks)
        self.assertEqual(labels.zoom, ZoomLabel.NONE)

    def test_unknown_classifier_key(self):
        data = self.base_data()
        data["classifier"] = {"no_such_threshold": 1}
        with self.assertRaises(TypeError):
            load_config(self.write_config(data))


if __name__ == '__main__':
    unittest.main()
