"""
Configuration management for hand movement recognition.
"""
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, field


@dataclass
class ClassifierConfig:
    """Movement classifier thresholds."""
    scroll_distance_factor: float = 0.02  # of the rectangle height
    zoom_height_factor: float = 0.03  # of the current height
    slide_angle_threshold_deg: int = 12
    slide_gate_min_deg: int = 80
    slide_gate_max_deg: int = 100
    slide_frame_stride: int = 2  # evaluate slide on every n-th frame
    min_landmarks_for_slide: int = 10


@dataclass
class CameraConfig:
    """Camera configuration settings."""
    index: int
    width: int
    height: int
    fps: int


@dataclass
class MediaPipeConfig:
    """MediaPipe Hands configuration settings."""
    max_num_hands: int
    min_detection_confidence: float
    min_tracking_confidence: float


@dataclass
class DisplayConfig:
    """Display configuration settings."""
    show_landmarks: bool
    show_hand_rect: bool
    window_name: str


@dataclass
class Cfg:
    """Main configuration class."""
    camera: CameraConfig
    mediapipe: MediaPipeConfig
    display: DisplayConfig
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)


DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.default.yaml"


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses the packaged config.default.yaml

    Returns:
        Configuration object with all settings
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)

    return _dict_to_config(data)


def _dict_to_config(data: Dict[str, Any]) -> Cfg:
    """Convert dictionary to configuration object."""
    camera_data = data['camera']
    camera = CameraConfig(
        index=camera_data['index'],
        width=camera_data['width'],
        height=camera_data['height'],
        fps=camera_data['fps']
    )

    mp_data = data['mediapipe']
    mediapipe = MediaPipeConfig(
        max_num_hands=mp_data['max_num_hands'],
        min_detection_confidence=mp_data['min_detection_confidence'],
        min_tracking_confidence=mp_data['min_tracking_confidence']
    )

    display_data = data['display']
    display = DisplayConfig(
        show_landmarks=display_data['show_landmarks'],
        show_hand_rect=display_data['show_hand_rect'],
        window_name=display_data['window_name']
    )

    # Missing keys fall back to the tuned defaults
    classifier = ClassifierConfig(**(data.get('classifier') or {}))

    return Cfg(
        camera=camera,
        mediapipe=mediapipe,
        display=display,
        classifier=classifier
    )
