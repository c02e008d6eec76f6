"""Shared fixtures for stickpose tests."""

from collections.abc import Callable

import pytest

from stickpose.kinematics.constraints import JOINT_CONSTRAINTS, bone_angle
from stickpose.kinematics.vector import angle_in_range, distance
from stickpose.models import ALL_JOINTS, JointMap, rest_joints
from stickpose.store import PoseStore

EPS = 1e-9


@pytest.fixture
def rest() -> JointMap:
    return rest_joints()


@pytest.fixture
def store() -> PoseStore:
    return PoseStore()


@pytest.fixture
def assert_valid_pose() -> Callable[[JointMap], None]:
    """Check completeness, bone lengths and angle windows of a joint map."""

    def check(joints: JointMap) -> None:
        assert set(joints) == set(ALL_JOINTS)
        for joint, constraint in JOINT_CONSTRAINTS.items():
            if constraint.parent is None:
                continue
            length = distance(joints[constraint.parent], joints[joint])
            assert length == pytest.approx(constraint.length, abs=EPS), joint
            angle = bone_angle(joints, joint)
            assert angle_in_range(angle, *constraint.angle_range, tolerance=1e-6), (joint, angle)

    return check
