"""Enumerations used throughout stickpose."""

from enum import StrEnum


class JointName(StrEnum):
    # Declaration order is canonical: every parent precedes its children.
    PELVIS = "pelvis"
    CHEST = "chest"
    NECK = "neck"
    HEAD = "head"
    LEFT_SHOULDER = "left_shoulder"
    LEFT_ELBOW = "left_elbow"
    LEFT_WRIST = "left_wrist"
    RIGHT_SHOULDER = "right_shoulder"
    RIGHT_ELBOW = "right_elbow"
    RIGHT_WRIST = "right_wrist"
    LEFT_HIP = "left_hip"
    LEFT_KNEE = "left_knee"
    LEFT_ANKLE = "left_ankle"
    RIGHT_HIP = "right_hip"
    RIGHT_KNEE = "right_knee"
    RIGHT_ANKLE = "right_ankle"


class PoseGender(StrEnum):
    FEMALE = "female"
    MALE = "male"
    NEUTRAL = "neutral"


class PoseView(StrEnum):
    FRONT = "front"
    SIDE = "side"


class ViewMode(StrEnum):
    FLAT = "2d"
    PSEUDO_3D = "3d"


ALL_JOINTS: tuple[JointName, ...] = tuple(JointName)

CENTRAL_JOINTS: tuple[JointName, ...] = (
    JointName.PELVIS,
    JointName.CHEST,
    JointName.NECK,
    JointName.HEAD,
)

MIRROR_PAIRS: tuple[tuple[JointName, JointName], ...] = (
    (JointName.LEFT_SHOULDER, JointName.RIGHT_SHOULDER),
    (JointName.LEFT_ELBOW, JointName.RIGHT_ELBOW),
    (JointName.LEFT_WRIST, JointName.RIGHT_WRIST),
    (JointName.LEFT_HIP, JointName.RIGHT_HIP),
    (JointName.LEFT_KNEE, JointName.RIGHT_KNEE),
    (JointName.LEFT_ANKLE, JointName.RIGHT_ANKLE),
)
