"""CLI entry point using Typer."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

if TYPE_CHECKING:
    from stickpose.models.pose import JointMap

app = typer.Typer(
    name="stickpose",
    help="Stick-figure pose editor with a 2D kinematic constraint engine.",
    no_args_is_help=True,
)

FromOption = Annotated[
    Path | None,
    typer.Option("--from", "-f", help="JSON joint map to start from (default: rest pose)"),
]


def _fail(message: str) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(1)


def _load_joints(path: Path | None) -> JointMap:
    from pydantic import ValidationError

    from stickpose.models.pose import Pose, rest_joints

    if path is None:
        return rest_joints()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise _fail(f"joint file not found: {path}") from None
    except json.JSONDecodeError as exc:
        raise _fail(f"joint file contains invalid JSON: {exc}") from None
    try:
        return Pose.model_validate({"joints": data}).joints
    except ValidationError as exc:
        raise _fail(f"joint file has invalid structure: {exc}") from None


def _dump_joints(joints: JointMap) -> str:
    return json.dumps(
        {joint.value: {"x": point.x, "y": point.y} for joint, point in joints.items()},
        indent=2,
    )


@app.command()
def rest() -> None:
    """Print the canonical rest pose as JSON."""
    from stickpose.models.pose import rest_joints

    typer.echo(_dump_joints(rest_joints()))


@app.command()
def constraints() -> None:
    """Print the joint constraint table."""
    from stickpose.kinematics.constraints import JOINT_CONSTRAINTS

    for joint, constraint in JOINT_CONSTRAINTS.items():
        if constraint.parent is None:
            typer.echo(f"{joint:<15} root")
            continue
        low, high = constraint.angle_range or (None, None)
        typer.echo(
            f"{joint:<15} parent={constraint.parent:<15} "
            f"length={constraint.length:.4f} range=[{low:g}, {high:g}]"
        )


@app.command()
def move(
    joint: Annotated[str, typer.Argument(help="Joint to move, e.g. left_wrist")],
    x: Annotated[float, typer.Argument(help="Target x in pose-space")],
    y: Annotated[float, typer.Argument(help="Target y in pose-space")],
    source: FromOption = None,
) -> None:
    """Move one joint within its constraints and print the resulting joint map."""
    from stickpose.kinematics.solver import KinematicsError, move_joint
    from stickpose.models.pose import Vec2

    joints = _load_joints(source)
    try:
        result = move_joint(joints, joint, Vec2(x=x, y=y))
    except KinematicsError as e:
        raise _fail(str(e)) from None
    typer.echo(_dump_joints(result))


@app.command()
def drag(
    limb: Annotated[str, typer.Argument(help="Limb to rotate, e.g. left_lower_arm")],
    x: Annotated[float, typer.Argument(help="Pointer x in pose-space")],
    y: Annotated[float, typer.Argument(help="Pointer y in pose-space")],
    source: FromOption = None,
) -> None:
    """Rotate a limb toward a pointer position and print the resulting joint map."""
    from stickpose.kinematics.solver import drag_limb
    from stickpose.models.pose import DEFAULT_LIMBS, Vec2, find_limb

    joints = _load_joints(source)
    found = find_limb(DEFAULT_LIMBS, limb)
    if found is None:
        raise _fail(f"unknown limb: {limb!r}")
    typer.echo(_dump_joints(drag_limb(joints, found, Vec2(x=x, y=y))))


@app.command()
def mirror(
    source: FromOption = None,
    resolve: Annotated[
        bool,
        typer.Option("--resolve/--no-resolve", help="Re-apply constraints after mirroring"),
    ] = True,
) -> None:
    """Mirror a pose left/right about the pelvis."""
    from stickpose.kinematics.mirror import mirror_joints
    from stickpose.kinematics.solver import move_joints

    joints = _load_joints(source)
    mirrored = mirror_joints(joints)
    if resolve:
        mirrored = move_joints(joints, mirrored)
    typer.echo(_dump_joints(mirrored))


@app.command()
def project(
    x: Annotated[float, typer.Argument(help="Point x")],
    y: Annotated[float, typer.Argument(help="Point y")],
    view: Annotated[str, typer.Option("--view", help="Pose view: front or side")] = "front",
    mode: Annotated[str, typer.Option("--mode", help="View mode: 2d or 3d")] = "2d",
    inverse: Annotated[
        bool, typer.Option("--inverse", help="Map presentation space back to pose-space")
    ] = False,
) -> None:
    """Project a point between pose-space and presentation space."""
    from stickpose.kinematics.projection import to_pose, to_presentation
    from stickpose.models.enums import PoseView, ViewMode
    from stickpose.models.pose import Vec2

    try:
        pose_view = PoseView(view)
        view_mode = ViewMode(mode)
    except ValueError as e:
        raise _fail(str(e)) from None
    convert = to_pose if inverse else to_presentation
    point = convert(Vec2(x=x, y=y), pose_view, view_mode)
    typer.echo(json.dumps({"x": point.x, "y": point.y}))


@app.command()
def render(
    output: Annotated[Path, typer.Argument(help="PNG file to write")],
    figures: Annotated[int, typer.Option("--figures", "-n", help="Number of figures", min=1)] = 1,
    view: Annotated[str, typer.Option("--view", help="Pose view: front or side")] = "front",
    mode: Annotated[
        str | None, typer.Option("--mode", help="View mode: 2d or 3d (default from config)")
    ] = None,
    source: FromOption = None,
    no_grid: Annotated[bool, typer.Option("--no-grid", help="Hide the background grid")] = False,
) -> None:
    """Render stick figures sharing one pose to a PNG image."""
    from stickpose.config import load_config
    from stickpose.models.enums import PoseView, ViewMode
    from stickpose.render import render_figures
    from stickpose.store import PoseStore

    config = load_config()
    try:
        pose_view = PoseView(view)
        view_mode = ViewMode(mode) if mode else config.default_view_mode
    except ValueError as e:
        raise _fail(str(e)) from None

    store = PoseStore()
    pose = store.poses[0]
    store.update_pose(pose.id, view=pose_view, joints=_load_joints(source))
    for _ in range(figures):
        store.new_figure()
    store.set_view_mode(view_mode)
    if no_grid:
        store.toggle_grid()

    output.parent.mkdir(parents=True, exist_ok=True)
    render_figures(store, output, config.canvas)
    typer.echo(f"Saved: {output}")


@app.callback(invoke_without_command=True)
def main(
    version: Annotated[
        bool, typer.Option("--version", "-v", help="Show version")
    ] = False,
) -> None:
    """stickpose - stick-figure pose editor engine."""
    if version:
        from stickpose import __version__

        typer.echo(f"stickpose {__version__}")
        raise typer.Exit()
