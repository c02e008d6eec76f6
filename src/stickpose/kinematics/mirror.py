"""Left/right mirroring of a pose about the pelvis."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stickpose.kinematics.constraints import ROOT_JOINT
from stickpose.kinematics.solver import check_joint_map
from stickpose.models.enums import CENTRAL_JOINTS, MIRROR_PAIRS
from stickpose.models.pose import Vec2

if TYPE_CHECKING:
    from stickpose.models.pose import JointMap


def mirror_point(origin_x: float, point: Vec2) -> Vec2:
    return Vec2(x=origin_x - (point.x - origin_x), y=point.y)


def mirror_joints(joints: JointMap) -> JointMap:
    """Reflect every joint about the pelvis x and swap left/right counterparts.

    The returned map lists the central chain first and then each pair, so
    feeding it to :func:`~stickpose.kinematics.solver.move_joints` always
    resolves a parent before its children.  Bone lengths survive the
    reflection but asymmetric angle windows may not; re-resolve the result
    through the solver when those must hold.
    """
    check_joint_map(joints)
    origin_x = joints[ROOT_JOINT].x
    mirrored: JointMap = {}

    for joint in CENTRAL_JOINTS:
        mirrored[joint] = mirror_point(origin_x, joints[joint])

    for left, right in MIRROR_PAIRS:
        mirrored[left] = mirror_point(origin_x, joints[right])
        mirrored[right] = mirror_point(origin_x, joints[left])

    return mirrored
