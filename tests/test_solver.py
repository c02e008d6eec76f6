"""Tests for the constraint solver."""

import math

import pytest

from stickpose.kinematics.constraints import JOINT_CONSTRAINTS, bone_angle, bone_length, descendants
from stickpose.kinematics.solver import (
    IncompletePoseError,
    UnknownJointError,
    drag_limb,
    move_joint,
    move_joints,
    project_to_constraint,
)
from stickpose.kinematics.vector import distance, normalize, subtract
from stickpose.models import ALL_JOINTS, DEFAULT_LIMBS, JointName, Vec2, find_limb

TARGETS = [
    Vec2(x=-5, y=0),
    Vec2(x=3, y=-4),
    Vec2(x=0.1, y=0.1),
    Vec2(x=0, y=10),
    Vec2(x=-0.9, y=-0.6),
]


def _moved(before, after) -> set[JointName]:
    return {j for j in ALL_JOINTS if after[j].as_tuple() != pytest.approx(before[j].as_tuple())}


@pytest.mark.parametrize("joint", list(JointName))
@pytest.mark.parametrize("target", TARGETS)
def test_move_keeps_lengths_and_ranges(rest, assert_valid_pose, joint, target):
    assert_valid_pose(move_joint(rest, joint, target))


@pytest.mark.parametrize("joint", list(JointName))
def test_move_to_current_position_is_noop(rest, joint):
    result = move_joint(rest, joint, rest[joint])
    for name in ALL_JOINTS:
        assert result[name].as_tuple() == pytest.approx(rest[name].as_tuple(), abs=1e-9)


def test_move_does_not_mutate_input(rest):
    snapshot = dict(rest)
    move_joint(rest, JointName.CHEST, Vec2(x=1, y=-1))
    assert rest == snapshot


def test_move_is_deterministic(rest):
    a = move_joint(rest, JointName.LEFT_ELBOW, Vec2(x=-2, y=0.3))
    b = move_joint(rest, JointName.LEFT_ELBOW, Vec2(x=-2, y=0.3))
    assert a == b


def test_left_wrist_scenario(rest):
    result = move_joint(rest, "left_wrist", Vec2(x=-5, y=0))
    elbow = rest[JointName.LEFT_ELBOW]
    wrist = result[JointName.LEFT_WRIST]

    assert distance(elbow, wrist) == pytest.approx(bone_length(JointName.LEFT_WRIST))
    # The pointer direction (about 171.7 deg) is inside the wrist window.
    expected = normalize(subtract(Vec2(x=-5, y=0), elbow))
    actual = normalize(subtract(wrist, elbow))
    assert actual.as_tuple() == pytest.approx(expected.as_tuple())
    assert _moved(rest, result) == {JointName.LEFT_WRIST}


def test_chest_move_carries_full_subtree(rest, assert_valid_pose):
    result = move_joint(rest, JointName.CHEST, Vec2(x=0.2, y=-1.15))
    assert_valid_pose(result)

    delta = subtract(result[JointName.CHEST], rest[JointName.CHEST])
    assert delta != Vec2(x=0, y=0)
    for joint in descendants(JointName.CHEST):
        shifted = subtract(result[joint], rest[joint])
        assert shifted.as_tuple() == pytest.approx(delta.as_tuple()), joint

    assert _moved(rest, result) == {JointName.CHEST, *descendants(JointName.CHEST)}
    for joint in (JointName.PELVIS, JointName.LEFT_HIP, JointName.RIGHT_KNEE, JointName.LEFT_ANKLE):
        assert result[joint] == rest[joint]


@pytest.mark.parametrize("target", [Vec2(x=3.5, y=-2), Vec2(x=-100, y=250), Vec2(x=0, y=0)])
def test_root_move_translates_whole_figure(rest, assert_valid_pose, target):
    result = move_joint(rest, JointName.PELVIS, target)
    assert result[JointName.PELVIS] == target
    assert_valid_pose(result)
    for joint in ALL_JOINTS:
        if joint == JointName.PELVIS:
            continue
        assert bone_angle(result, joint) == pytest.approx(bone_angle(rest, joint), abs=1e-9)
        offset = subtract(result[joint], target)
        assert offset.as_tuple() == pytest.approx(rest[joint].as_tuple(), abs=1e-9)


def test_angle_outside_plain_range_is_clamped(rest):
    hip = rest[JointName.LEFT_HIP]
    # Straight up is -90 deg; the knee window is [70, 180].
    result = move_joint(rest, JointName.LEFT_KNEE, Vec2(x=hip.x, y=hip.y - 5))
    length = bone_length(JointName.LEFT_KNEE)
    expected = (hip.x + length * math.cos(math.radians(70)), hip.y + length * math.sin(math.radians(70)))
    assert result[JointName.LEFT_KNEE].as_tuple() == pytest.approx(expected)


def test_wrapping_range_tie_resolves_to_min(rest):
    # Pointing right (0 deg) is equidistant from 150 and -150 for the left hip.
    result = move_joint(rest, JointName.LEFT_HIP, Vec2(x=1, y=0))
    assert bone_angle(result, JointName.LEFT_HIP) == pytest.approx(150)


def test_target_on_parent_uses_fallback_direction(rest):
    shoulder = rest[JointName.LEFT_SHOULDER]
    result = move_joint(rest, JointName.LEFT_ELBOW, shoulder)
    # Fallback direction is 0 deg, clamped into the elbow window [40, 180].
    assert bone_angle(result, JointName.LEFT_ELBOW) == pytest.approx(40)
    assert distance(shoulder, result[JointName.LEFT_ELBOW]) == pytest.approx(
        bone_length(JointName.LEFT_ELBOW)
    )


def test_project_to_zero_length_constraint_returns_parent():
    parent = Vec2(x=2, y=3)
    assert project_to_constraint(parent, Vec2(x=9, y=9), JOINT_CONSTRAINTS[JointName.PELVIS]) == parent


def test_unknown_joint_rejected(rest):
    with pytest.raises(UnknownJointError, match="elbow_3"):
        move_joint(rest, "elbow_3", Vec2(x=0, y=0))


def test_incomplete_map_rejected(rest):
    del rest[JointName.RIGHT_ANKLE]
    with pytest.raises(IncompletePoseError, match="right_ankle"):
        move_joint(rest, JointName.HEAD, Vec2(x=0, y=-3))


def test_move_joints_applies_in_order(rest, assert_valid_pose):
    updates = [
        (JointName.LEFT_ELBOW, Vec2(x=-1.3, y=-1.3)),
        (JointName.RIGHT_KNEE, Vec2(x=1.5, y=0.5)),
    ]
    result = move_joints(rest, updates)
    expected = move_joint(move_joint(rest, *updates[0]), *updates[1])
    assert result == expected
    assert_valid_pose(result)


def test_move_joints_accepts_mapping(rest):
    updates = {"left_elbow": Vec2(x=-1.3, y=-1.3), "head": Vec2(x=0.3, y=-3)}
    assert move_joints(rest, updates) == move_joints(rest, list(updates.items()))


def test_move_joints_is_order_sensitive(rest, assert_valid_pose):
    elbow = (JointName.LEFT_ELBOW, Vec2(x=-1.3, y=-1.3))
    shoulder = (JointName.LEFT_SHOULDER, Vec2(x=-0.6, y=-1.8))
    child_first = move_joints(rest, [elbow, shoulder])
    parent_first = move_joints(rest, [shoulder, elbow])
    assert_valid_pose(child_first)
    assert_valid_pose(parent_first)
    assert child_first[JointName.LEFT_ELBOW].as_tuple() != pytest.approx(
        parent_first[JointName.LEFT_ELBOW].as_tuple()
    )


def test_move_joints_empty_batch_returns_copy(rest):
    result = move_joints(rest, [])
    assert result == rest
    assert result is not rest


def test_drag_limb_is_pure_rotation(rest):
    limb = find_limb(DEFAULT_LIMBS, "right_upper_arm")
    shoulder = rest[JointName.RIGHT_SHOULDER]
    result = drag_limb(rest, limb, Vec2(x=shoulder.x + 10, y=shoulder.y + 10))

    elbow = result[JointName.RIGHT_ELBOW]
    assert distance(shoulder, elbow) == pytest.approx(bone_length(JointName.RIGHT_ELBOW))
    assert bone_angle(result, JointName.RIGHT_ELBOW) == pytest.approx(45)
    # The forearm follows at its previous orientation.
    forearm = subtract(result[JointName.RIGHT_WRIST], elbow)
    assert forearm.as_tuple() == pytest.approx((0.0, 0.7))


def test_drag_limb_ignores_pointer_distance(rest):
    limb = find_limb(DEFAULT_LIMBS, "left_lower_arm")
    near = drag_limb(rest, limb, Vec2(x=-0.8, y=-0.6))
    far = drag_limb(rest, limb, Vec2(x=50, y=-0.6))
    assert near[JointName.LEFT_WRIST].as_tuple() == pytest.approx(far[JointName.LEFT_WRIST].as_tuple())
    # 0 deg falls outside the wrist window and snaps to its 10 deg bound.
    assert bone_angle(far, JointName.LEFT_WRIST) == pytest.approx(10)
