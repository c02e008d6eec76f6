"""Canvas layout and PNG rendering of stick figures with Pillow."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from PIL import Image, ImageDraw

from stickpose.config import CanvasSettings
from stickpose.kinematics.projection import view_transform
from stickpose.models.enums import ALL_JOINTS, JointName, PoseView, ViewMode
from stickpose.models.pose import Vec2

if TYPE_CHECKING:
    from pathlib import Path

    from stickpose.store import PoseStore

logger = logging.getLogger(__name__)

INACTIVE_HANDLE_COLOUR = "#9ca3af"
OUTLINE_COLOUR = "#111827"


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def compute_origins(count: int, canvas: CanvasSettings | None = None) -> list[Vec2]:
    """Return the canvas origin (pelvis anchor) of each of *count* figures.

    Figures are laid out in a row centred horizontally, slightly below the
    vertical middle of the canvas.
    """
    canvas = canvas or CanvasSettings()
    if count <= 0:
        return []
    center = canvas.width / 2
    start = center - (count - 1) * canvas.figure_spacing / 2
    return [
        Vec2(x=start + index * canvas.figure_spacing, y=canvas.height / 2 + 60)
        for index in range(count)
    ]


def pose_to_canvas(
    point: Vec2,
    view: PoseView,
    mode: ViewMode,
    origin: Vec2,
    unit_scale: float,
) -> Vec2:
    forward = view_transform(view, mode).forward(point)
    return Vec2(x=origin.x + forward.x * unit_scale, y=origin.y + forward.y * unit_scale)


def canvas_to_pose(
    point: Vec2,
    view: PoseView,
    mode: ViewMode,
    origin: Vec2,
    unit_scale: float,
) -> Vec2:
    """Map a canvas pixel back to pose-space, e.g. to interpret a pointer."""
    relative = Vec2(x=(point.x - origin.x) / unit_scale, y=(point.y - origin.y) / unit_scale)
    return view_transform(view, mode).backward(relative)


def limb_handle(start: Vec2, end: Vec2, offset: float) -> Vec2:
    """Position of a limb's rotate handle: its midpoint pushed along the normal."""
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.hypot(dx, dy) or 1.0
    return Vec2(
        x=(start.x + end.x) / 2 + (-dy / length) * offset,
        y=(start.y + end.y) / 2 + (dx / length) * offset,
    )


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render_figures(
    store: PoseStore,
    output_path: Path,
    canvas: CanvasSettings | None = None,
) -> Path:
    """Draw every figure in *store*, back to front, into a PNG at *output_path*."""
    canvas = canvas or CanvasSettings()
    img = Image.new("RGB", (canvas.width, canvas.height), canvas.background)
    draw = ImageDraw.Draw(img)

    if store.ui.show_grid:
        _draw_grid(draw, canvas)

    origins = compute_origins(len(store.figures), canvas)
    mode = store.ui.view_mode
    drawn = 0

    for figure, origin in zip(store.figures, origins, strict=True):
        pose = store.pose_for(figure)
        if pose is None:
            continue
        active = figure.id == store.ui.active_figure_id
        width = canvas.active_line_width if active else canvas.line_width

        def to_canvas(joint: JointName, _pose=pose, _origin=origin) -> tuple[float, float]:
            point = pose_to_canvas(_pose.joints[joint], _pose.view, mode, _origin, canvas.unit_scale)
            return point.as_tuple()

        head = to_canvas(JointName.HEAD)
        neck = to_canvas(JointName.NECK)
        r = math.hypot(head[0] - neck[0], head[1] - neck[1])
        draw.ellipse(
            [head[0] - r, head[1] - r, head[0] + r, head[1] + r],
            outline=figure.color,
            width=width,
        )

        for limb in pose.limbs:
            start = to_canvas(limb.from_joint)
            end = to_canvas(limb.to_joint)
            draw.line([start, end], fill=figure.color, width=width)
            hx, hy = limb_handle(
                Vec2(x=start[0], y=start[1]),
                Vec2(x=end[0], y=end[1]),
                canvas.rotate_handle_offset,
            ).as_tuple()
            hr = canvas.handle_radius
            draw.ellipse(
                [hx - hr, hy - hr, hx + hr, hy + hr],
                fill=figure.color if active else INACTIVE_HANDLE_COLOUR,
                outline=OUTLINE_COLOUR,
            )

        for joint in ALL_JOINTS:
            px, py = to_canvas(joint)
            jr = canvas.joint_radius
            draw.ellipse(
                [px - jr, py - jr, px + jr, py + jr],
                fill="#ffffff",
                outline=figure.color,
                width=2,
            )
        drawn += 1

    img.save(output_path, "PNG")
    logger.debug("Rendered %d figure(s) to %s", drawn, output_path)
    return output_path


def _draw_grid(draw: ImageDraw.ImageDraw, canvas: CanvasSettings) -> None:
    for x in range(0, canvas.width, canvas.grid_step):
        draw.line([(x, 0), (x, canvas.height)], fill=canvas.grid_color, width=1)
    for y in range(0, canvas.height, canvas.grid_step):
        draw.line([(0, y), (canvas.width, y)], fill=canvas.grid_color, width=1)
