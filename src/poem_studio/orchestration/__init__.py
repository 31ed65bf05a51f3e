"""
Orchestration of the creation session.

These components own every mutation of the session: the presentation
layer only triggers them and reads snapshots.
"""

from .generation_coordinator import GenerationCoordinator
from .style_coordinator import StyleAdjustmentCoordinator
from .upload_controller import UploadController

__all__ = ["GenerationCoordinator", "StyleAdjustmentCoordinator", "UploadController"]
