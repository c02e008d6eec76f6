"""Tests for the CLI entry point."""

import json

import pytest
from typer.testing import CliRunner

from stickpose import __version__
from stickpose.cli import app
from stickpose.kinematics.constraints import bone_length
from stickpose.models import JointName

runner = CliRunner()


def _point(data: dict, joint: str) -> tuple[float, float]:
    return (data[joint]["x"], data[joint]["y"])


def test_version_flag():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == f"stickpose {__version__}"


def test_rest():
    result = runner.invoke(app, ["rest"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert len(data) == 16
    assert _point(data, "head") == (0, -2.2)


def test_constraints():
    result = runner.invoke(app, ["constraints"])
    assert result.exit_code == 0
    assert "pelvis" in result.output
    assert "root" in result.output
    assert "range=[10, 190]" in result.output


def test_move_left_wrist():
    result = runner.invoke(app, ["move", "left_wrist", "--", "-5", "0"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    ex, ey = _point(data, "left_elbow")
    wx, wy = _point(data, "left_wrist")
    assert ((wx - ex) ** 2 + (wy - ey) ** 2) ** 0.5 == pytest.approx(bone_length(JointName.LEFT_WRIST))
    assert _point(data, "left_elbow") == (-0.9, -0.6)


def test_move_unknown_joint():
    result = runner.invoke(app, ["move", "tail", "1", "1"])
    assert result.exit_code == 1
    assert "unknown joint" in result.output


def test_move_from_file(tmp_path):
    rest = json.loads(runner.invoke(app, ["rest"]).stdout)
    moved = runner.invoke(app, ["move", "pelvis", "1", "1"]).stdout
    path = tmp_path / "joints.json"
    path.write_text(moved)
    result = runner.invoke(app, ["move", "head", "--from", str(path), "--", "1", "-1.2"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert _point(data, "pelvis") == (1, 1)
    assert _point(data, "left_ankle") == pytest.approx((rest["left_ankle"]["x"] + 1, rest["left_ankle"]["y"] + 1))


def test_move_from_partial_file(tmp_path):
    path = tmp_path / "joints.json"
    path.write_text(json.dumps({"pelvis": {"x": 0, "y": 0}}))
    result = runner.invoke(app, ["move", "head", "--from", str(path), "--", "0", "-3"])
    assert result.exit_code == 1
    assert "invalid structure" in result.output


def test_drag():
    result = runner.invoke(app, ["drag", "right_thigh", "10", "0"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert _point(data, "right_knee") == pytest.approx((1.6, 0.0))


def test_drag_unknown_limb():
    result = runner.invoke(app, ["drag", "wing", "0", "0"])
    assert result.exit_code == 1
    assert "unknown limb" in result.output


def test_mirror_rest_is_unchanged():
    rest = json.loads(runner.invoke(app, ["rest"]).stdout)
    result = runner.invoke(app, ["mirror"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    for joint, point in rest.items():
        assert _point(data, joint) == pytest.approx((point["x"], point["y"]), abs=1e-9)


def test_project_side_3d():
    result = runner.invoke(app, ["project", "1", "2", "--view", "side", "--mode", "3d"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert (data["x"], data["y"]) == pytest.approx((1.25, 2.0))

    back = runner.invoke(app, ["project", "1.25", "2", "--view", "side", "--mode", "3d", "--inverse"])
    data = json.loads(back.stdout)
    assert (data["x"], data["y"]) == pytest.approx((1.0, 2.0))


def test_project_bad_view():
    result = runner.invoke(app, ["project", "1", "2", "--view", "top"])
    assert result.exit_code == 1


def test_render(tmp_path):
    out = tmp_path / "out" / "pose.png"
    result = runner.invoke(app, ["render", str(out), "--figures", "2", "--view", "side", "--mode", "3d"])
    assert result.exit_code == 0, result.output
    assert out.exists()
    assert "Saved" in result.output
