"""Pose models: points, limbs, and the canonical rest pose."""

from __future__ import annotations

from typing import TypeAlias
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stickpose.models.enums import ALL_JOINTS, JointName, PoseGender, PoseView


class Vec2(BaseModel):
    """A point or vector in pose-space (unit-less, not pixels)."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


JointMap: TypeAlias = dict[JointName, Vec2]


class Limb(BaseModel):
    """A rendering/selection edge between two joints."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, serialize_by_alias=True)

    name: str
    from_joint: JointName = Field(alias="from")
    to_joint: JointName = Field(alias="to")


def _limb(name: str, a: JointName, b: JointName) -> Limb:
    return Limb(name=name, from_joint=a, to_joint=b)


DEFAULT_LIMBS: tuple[Limb, ...] = (
    _limb("spine", JointName.PELVIS, JointName.CHEST),
    _limb("neck", JointName.CHEST, JointName.NECK),
    _limb("head", JointName.NECK, JointName.HEAD),
    _limb("left_upper_arm", JointName.LEFT_SHOULDER, JointName.LEFT_ELBOW),
    _limb("left_lower_arm", JointName.LEFT_ELBOW, JointName.LEFT_WRIST),
    _limb("right_upper_arm", JointName.RIGHT_SHOULDER, JointName.RIGHT_ELBOW),
    _limb("right_lower_arm", JointName.RIGHT_ELBOW, JointName.RIGHT_WRIST),
    _limb("left_side", JointName.CHEST, JointName.LEFT_SHOULDER),
    _limb("right_side", JointName.CHEST, JointName.RIGHT_SHOULDER),
    _limb("left_hip", JointName.PELVIS, JointName.LEFT_HIP),
    _limb("left_thigh", JointName.LEFT_HIP, JointName.LEFT_KNEE),
    _limb("left_calf", JointName.LEFT_KNEE, JointName.LEFT_ANKLE),
    _limb("right_hip", JointName.PELVIS, JointName.RIGHT_HIP),
    _limb("right_thigh", JointName.RIGHT_HIP, JointName.RIGHT_KNEE),
    _limb("right_calf", JointName.RIGHT_KNEE, JointName.RIGHT_ANKLE),
)

# Canonical "T-pose" coordinates. y grows downward; the pelvis is the origin.
# Bone lengths and angle ranges are derived from this exact geometry.
REST_POSITIONS: dict[JointName, Vec2] = {
    JointName.PELVIS: Vec2(x=0, y=0),
    JointName.CHEST: Vec2(x=0, y=-1.2),
    JointName.NECK: Vec2(x=0, y=-1.6),
    JointName.HEAD: Vec2(x=0, y=-2.2),
    JointName.LEFT_SHOULDER: Vec2(x=-0.5, y=-1.3),
    JointName.LEFT_ELBOW: Vec2(x=-0.9, y=-0.6),
    JointName.LEFT_WRIST: Vec2(x=-0.9, y=0.1),
    JointName.RIGHT_SHOULDER: Vec2(x=0.5, y=-1.3),
    JointName.RIGHT_ELBOW: Vec2(x=0.9, y=-0.6),
    JointName.RIGHT_WRIST: Vec2(x=0.9, y=0.1),
    JointName.LEFT_HIP: Vec2(x=-0.4, y=0),
    JointName.LEFT_KNEE: Vec2(x=-0.4, y=1.2),
    JointName.LEFT_ANKLE: Vec2(x=-0.4, y=2.4),
    JointName.RIGHT_HIP: Vec2(x=0.4, y=0),
    JointName.RIGHT_KNEE: Vec2(x=0.4, y=1.2),
    JointName.RIGHT_ANKLE: Vec2(x=0.4, y=2.4),
}


def rest_joints() -> JointMap:
    """Return a fresh copy of the rest-pose joint map in canonical order."""
    return {joint: REST_POSITIONS[joint] for joint in ALL_JOINTS}


def find_limb(limbs: list[Limb] | tuple[Limb, ...], name: str) -> Limb | None:
    return next((limb for limb in limbs if limb.name == name), None)


class Pose(BaseModel):
    """A complete, named pose of one stick figure."""

    id: UUID = Field(default_factory=uuid4)
    name: str = "Default Pose"
    gender: PoseGender = PoseGender.NEUTRAL
    view: PoseView = PoseView.FRONT
    joints: JointMap = Field(default_factory=rest_joints)
    limbs: list[Limb] = Field(default_factory=lambda: list(DEFAULT_LIMBS))

    @field_validator("joints")
    @classmethod
    def _joints_complete(cls, value: JointMap) -> JointMap:
        missing = [joint for joint in ALL_JOINTS if joint not in value]
        if missing:
            msg = f"pose is missing joints: {', '.join(missing)}"
            raise ValueError(msg)
        return {joint: value[joint] for joint in ALL_JOINTS}


def create_default_pose(name: str = "Default Pose") -> Pose:
    """Create a new pose seeded from the rest pose."""
    return Pose(name=name)
