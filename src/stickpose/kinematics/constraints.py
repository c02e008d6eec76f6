"""Per-joint skeleton constraints derived from the rest pose.

The tables here are built once at import time and never mutated:
``JOINT_CONSTRAINTS`` maps every joint to its parent, bone length and
absolute angle window, and ``JOINT_CHILDREN`` is the inverse parent index.
"""

from __future__ import annotations

from collections import deque
from types import MappingProxyType
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from stickpose.kinematics.vector import angle_of, distance, subtract
from stickpose.models.enums import ALL_JOINTS, JointName
from stickpose.models.pose import REST_POSITIONS

if TYPE_CHECKING:
    from collections.abc import Mapping

    from stickpose.models.pose import JointMap

ROOT_JOINT = JointName.PELVIS


class JointConstraint(BaseModel):
    """Immutable constraint between a joint and its parent."""

    model_config = ConfigDict(frozen=True)

    parent: JointName | None = None
    length: float = Field(default=0.0, ge=0.0)
    # Absolute (min, max) bone direction in degrees; may wrap across +/-180.
    angle_range: tuple[float, float] | None = None

    @property
    def min_angle(self) -> float | None:
        return self.angle_range[0] if self.angle_range else None

    @property
    def max_angle(self) -> float | None:
        return self.angle_range[1] if self.angle_range else None


# (parent, min angle, max angle) authored against REST_POSITIONS.
_TOPOLOGY: dict[JointName, tuple[JointName, float, float]] = {
    JointName.CHEST: (JointName.PELVIS, -150, -30),
    JointName.NECK: (JointName.CHEST, -150, -30),
    JointName.HEAD: (JointName.NECK, -140, -40),
    JointName.LEFT_SHOULDER: (JointName.CHEST, 120, 220),
    JointName.LEFT_ELBOW: (JointName.LEFT_SHOULDER, 40, 180),
    JointName.LEFT_WRIST: (JointName.LEFT_ELBOW, 10, 190),
    JointName.RIGHT_SHOULDER: (JointName.CHEST, -40, 60),
    JointName.RIGHT_ELBOW: (JointName.RIGHT_SHOULDER, -10, 140),
    JointName.RIGHT_WRIST: (JointName.RIGHT_ELBOW, -100, 100),
    JointName.LEFT_HIP: (JointName.PELVIS, 150, 210),
    JointName.LEFT_KNEE: (JointName.LEFT_HIP, 70, 180),
    JointName.LEFT_ANKLE: (JointName.LEFT_KNEE, 70, 180),
    JointName.RIGHT_HIP: (JointName.PELVIS, -30, 30),
    JointName.RIGHT_KNEE: (JointName.RIGHT_HIP, 0, 110),
    JointName.RIGHT_ANKLE: (JointName.RIGHT_KNEE, -10, 110),
}


def _build_constraints() -> dict[JointName, JointConstraint]:
    constraints: dict[JointName, JointConstraint] = {}
    for joint in ALL_JOINTS:
        if joint == ROOT_JOINT:
            constraints[joint] = JointConstraint()
            continue
        parent, low, high = _TOPOLOGY[joint]
        constraints[joint] = JointConstraint(
            parent=parent,
            length=distance(REST_POSITIONS[parent], REST_POSITIONS[joint]),
            angle_range=(low, high),
        )
    return constraints


def _build_children(
    constraints: Mapping[JointName, JointConstraint],
) -> dict[JointName, tuple[JointName, ...]]:
    children: dict[JointName, list[JointName]] = {joint: [] for joint in ALL_JOINTS}
    for joint, constraint in constraints.items():
        if constraint.parent is not None:
            children[constraint.parent].append(joint)
    return {joint: tuple(kids) for joint, kids in children.items()}


JOINT_CONSTRAINTS: Mapping[JointName, JointConstraint] = MappingProxyType(_build_constraints())

JOINT_CHILDREN: Mapping[JointName, tuple[JointName, ...]] = MappingProxyType(
    _build_children(JOINT_CONSTRAINTS)
)


def parent_of(joint: JointName) -> JointName | None:
    return JOINT_CONSTRAINTS[joint].parent


def bone_length(joint: JointName) -> float:
    return JOINT_CONSTRAINTS[joint].length


def descendants(joint: JointName) -> list[JointName]:
    """All joints below *joint*, breadth-first, each parent before its children."""
    order: list[JointName] = []
    queue = deque(JOINT_CHILDREN[joint])
    while queue:
        current = queue.popleft()
        order.append(current)
        queue.extend(JOINT_CHILDREN[current])
    return order


def ancestors(joint: JointName) -> list[JointName]:
    """Parent chain of *joint* up to and including the root."""
    chain: list[JointName] = []
    parent = parent_of(joint)
    while parent is not None:
        chain.append(parent)
        parent = parent_of(parent)
    return chain


def bone_angle(joints: JointMap, joint: JointName) -> float | None:
    """Absolute direction of the bone from the parent to *joint*, or None for the root."""
    parent = parent_of(joint)
    if parent is None:
        return None
    return angle_of(subtract(joints[joint], joints[parent]))
