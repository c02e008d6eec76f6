"""stickpose data models - pure Pydantic, no I/O."""

from stickpose.models.enums import (
    ALL_JOINTS,
    CENTRAL_JOINTS,
    MIRROR_PAIRS,
    JointName,
    PoseGender,
    PoseView,
    ViewMode,
)
from stickpose.models.figure import Figure, UIState
from stickpose.models.pose import (
    DEFAULT_LIMBS,
    REST_POSITIONS,
    JointMap,
    Limb,
    Pose,
    Vec2,
    create_default_pose,
    find_limb,
    rest_joints,
)

__all__ = [
    "ALL_JOINTS",
    "CENTRAL_JOINTS",
    "DEFAULT_LIMBS",
    "Figure",
    "JointMap",
    "JointName",
    "Limb",
    "MIRROR_PAIRS",
    "Pose",
    "PoseGender",
    "PoseView",
    "REST_POSITIONS",
    "UIState",
    "Vec2",
    "ViewMode",
    "create_default_pose",
    "find_limb",
    "rest_joints",
]
