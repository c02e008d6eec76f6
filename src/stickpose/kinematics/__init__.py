"""stickpose kinematic constraint engine - pure functions over joint maps."""

from stickpose.kinematics.constraints import (
    JOINT_CHILDREN,
    JOINT_CONSTRAINTS,
    ROOT_JOINT,
    JointConstraint,
    bone_angle,
    bone_length,
    descendants,
)
from stickpose.kinematics.mirror import mirror_joints
from stickpose.kinematics.projection import ViewTransform, to_pose, to_presentation, view_transform
from stickpose.kinematics.solver import (
    IncompletePoseError,
    KinematicsError,
    UnknownJointError,
    drag_limb,
    move_joint,
    move_joints,
)

__all__ = [
    "IncompletePoseError",
    "JOINT_CHILDREN",
    "JOINT_CONSTRAINTS",
    "JointConstraint",
    "KinematicsError",
    "ROOT_JOINT",
    "UnknownJointError",
    "ViewTransform",
    "bone_angle",
    "bone_length",
    "descendants",
    "drag_limb",
    "mirror_joints",
    "move_joint",
    "move_joints",
    "to_pose",
    "to_presentation",
    "view_transform",
]
