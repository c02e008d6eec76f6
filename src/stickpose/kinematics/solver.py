"""Single-pass constraint solver for moving joints of a stick figure.

A move resolves the requested joint against its parent's bone length and
angle window, then walks the joint's subtree parent-first and re-projects
every descendant so the subtree follows at its previous orientation.  No
joint is visited twice and nothing is iterated to convergence.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, TypeAlias

from stickpose.kinematics.constraints import JOINT_CHILDREN, JOINT_CONSTRAINTS, JointConstraint
from stickpose.kinematics.vector import (
    add,
    angle_of,
    clamp_angle,
    from_polar,
    magnitude,
    normalize,
    scale,
    subtract,
)
from stickpose.models.enums import ALL_JOINTS, JointName
from stickpose.models.pose import Vec2

if TYPE_CHECKING:
    from stickpose.models.pose import JointMap, Limb

logger = logging.getLogger(__name__)

JointUpdates: TypeAlias = Iterable[tuple[JointName | str, Vec2]] | Mapping[JointName | str, Vec2]


class KinematicsError(ValueError):
    """Raised when the solver is called with a malformed precondition."""


class UnknownJointError(KinematicsError):
    """Raised for a joint name outside the skeleton."""


class IncompletePoseError(KinematicsError):
    """Raised when a joint map does not cover every joint."""


def resolve_joint(name: JointName | str) -> JointName:
    """Coerce *name* to a :class:`JointName`, failing fast on unknown names."""
    if isinstance(name, JointName):
        return name
    try:
        return JointName(name)
    except ValueError:
        msg = f"unknown joint: {name!r}"
        raise UnknownJointError(msg) from None


def check_joint_map(joints: Mapping[JointName, Vec2]) -> None:
    missing = [joint for joint in ALL_JOINTS if joint not in joints]
    if missing:
        msg = f"joint map is missing: {', '.join(missing)}"
        raise IncompletePoseError(msg)


def project_to_constraint(
    parent_position: Vec2,
    target: Vec2,
    constraint: JointConstraint,
) -> Vec2:
    """Place a joint on its parent's bone circle, as close to *target* as allowed."""
    if constraint.length == 0:
        return parent_position

    direction = subtract(target, parent_position)
    if magnitude(direction) == 0:
        direction = Vec2(x=constraint.length, y=0.0)

    angle = angle_of(direction)
    if constraint.angle_range is not None:
        angle = clamp_angle(angle, *constraint.angle_range)

    return add(parent_position, from_polar(angle, constraint.length))


def move_joint(joints: JointMap, joint: JointName | str, target: Vec2) -> JointMap:
    """Move *joint* toward *target* and carry its subtree along.

    Returns a new joint map; *joints* is left untouched.
    """
    joint = resolve_joint(joint)
    check_joint_map(joints)

    reference = {name: joints[name] for name in ALL_JOINTS}
    result = dict(reference)

    constraint = JOINT_CONSTRAINTS[joint]
    resolved = target
    if constraint.parent is not None:
        resolved = project_to_constraint(result[constraint.parent], target, constraint)
    result[joint] = resolved

    queue = deque(JOINT_CHILDREN[joint])
    while queue:
        child = queue.popleft()
        child_constraint = JOINT_CONSTRAINTS[child]
        parent = child_constraint.parent
        # Keep the child's pre-move offset so the subtree follows rigidly.
        offset = subtract(reference[child], reference[parent])
        desired = add(result[parent], offset)
        result[child] = project_to_constraint(result[parent], desired, child_constraint)
        queue.extend(JOINT_CHILDREN[child])

    logger.debug("Moved %s to (%.4f, %.4f)", joint, resolved.x, resolved.y)
    return result


def move_joints(joints: JointMap, updates: JointUpdates) -> JointMap:
    """Apply :func:`move_joint` for each ``(joint, target)`` pair in order.

    Later moves see the result of earlier ones, so a batch that touches a
    joint and one of its descendants depends on the order given.
    """
    check_joint_map(joints)
    pairs = updates.items() if isinstance(updates, Mapping) else updates
    result = dict(joints)
    for joint, target in pairs:
        result = move_joint(result, joint, target)
    return result


def drag_limb(joints: JointMap, limb: Limb, target: Vec2) -> JointMap:
    """Rotate *limb* about its ``from`` joint so it points at *target*.

    Only the pointer's direction matters: the child end is placed at its
    fixed bone length, so a handle drag never stretches a limb.
    """
    check_joint_map(joints)
    anchor = joints[limb.from_joint]
    length = JOINT_CONSTRAINTS[limb.to_joint].length
    direction = normalize(subtract(target, anchor))
    return move_joint(joints, limb.to_joint, add(anchor, scale(direction, length)))
