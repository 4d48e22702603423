"""
Forwarding of recognized movements to a controller.
"""
from .types import ControllerProto, MovementLabels, ScrollLabel, SlideLabel, ZoomLabel


async def dispatch_labels(controller: ControllerProto, labels: MovementLabels) -> int:
    """
    Send every recognized movement of a frame to the controller.

    Args:
        controller: Controller executing the commands
        labels: Labels of the current frame

    Returns:
        Number of commands sent
    """
    sent = 0
    if labels.scroll is not ScrollLabel.NONE:
        await controller.scroll(labels.scroll)
        sent += 1
    if labels.zoom is not ZoomLabel.NONE:
        await controller.zoom(labels.zoom)
        sent += 1
    if labels.slide is not SlideLabel.NONE:
        await controller.slide(labels.slide)
        sent += 1
    return sent
