"""In-memory figure/pose store for the editor.

The store owns the authoritative joint map of each pose.  Every joint edit
goes through the constraint solver, and each edit reads the map left by the
previous one, so callers only need to keep to one writer per store.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stickpose.kinematics.mirror import mirror_joints
from stickpose.kinematics.solver import drag_limb, move_joint, move_joints
from stickpose.models.enums import PoseGender, PoseView, ViewMode
from stickpose.models.figure import Figure, UIState
from stickpose.models.pose import DEFAULT_LIMBS, Limb, Pose, create_default_pose, find_limb, rest_joints

if TYPE_CHECKING:
    from uuid import UUID

    from stickpose.kinematics.solver import JointUpdates
    from stickpose.models.enums import JointName
    from stickpose.models.pose import Vec2

logger = logging.getLogger(__name__)


class StoreError(KeyError):
    """Raised when a figure, pose or limb id is not in the store."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class PoseStore:
    """Figures in z-order (first is drawn at the back), their poses, and UI flags."""

    def __init__(self, *, seed_default_pose: bool = True) -> None:
        self.figures: list[Figure] = []
        self.poses: list[Pose] = [create_default_pose()] if seed_default_pose else []
        self.ui = UIState()

    # -- figures -------------------------------------------------------------

    def add_figure(self, figure: Figure) -> Figure:
        self.figures.append(figure)
        self.ui.active_figure_id = figure.id
        logger.debug("Added figure %s (%s)", figure.label, figure.id)
        return figure

    def new_figure(self, color: str = "#2563eb") -> Figure:
        """Add a figure bound to the first pose, labelled by position."""
        pose_id = self.poses[0].id if self.poses else None
        figure = Figure(label=f"Figure {len(self.figures) + 1}", color=color, pose_id=pose_id)
        return self.add_figure(figure)

    def get_figure(self, figure_id: UUID) -> Figure:
        return self.figures[self._figure_index(figure_id)]

    def update_figure(self, figure_id: UUID, **updates: object) -> Figure:
        index = self._figure_index(figure_id)
        data = {**self.figures[index].model_dump(), **updates}
        self.figures[index] = Figure.model_validate(data)
        return self.figures[index]

    def remove_figure(self, figure_id: UUID) -> None:
        index = self._figure_index(figure_id)
        del self.figures[index]
        if self.ui.active_figure_id == figure_id:
            self.ui.active_figure_id = None

    def active_figure(self) -> Figure | None:
        if self.ui.active_figure_id is None:
            return None
        return next((f for f in self.figures if f.id == self.ui.active_figure_id), None)

    # -- z-order -------------------------------------------------------------

    def bring_figure_forward(self, figure_id: UUID) -> None:
        index = self._figure_index(figure_id)
        if index < len(self.figures) - 1:
            self._swap(index, index + 1)

    def send_figure_backward(self, figure_id: UUID) -> None:
        index = self._figure_index(figure_id)
        if index > 0:
            self._swap(index, index - 1)

    def bring_figure_to_front(self, figure_id: UUID) -> None:
        index = self._figure_index(figure_id)
        self.figures.append(self.figures.pop(index))

    def send_figure_to_back(self, figure_id: UUID) -> None:
        index = self._figure_index(figure_id)
        self.figures.insert(0, self.figures.pop(index))

    # -- poses ---------------------------------------------------------------

    def add_pose(self, pose: Pose) -> Pose:
        stored = pose.model_copy(deep=True)
        self.poses.append(stored)
        return stored

    def get_pose(self, pose_id: UUID) -> Pose:
        return self.poses[self._pose_index(pose_id)]

    def pose_for(self, figure: Figure) -> Pose | None:
        if figure.pose_id is None:
            return None
        return next((p for p in self.poses if p.id == figure.pose_id), None)

    def update_pose(
        self,
        pose_id: UUID,
        *,
        name: str | None = None,
        gender: PoseGender | None = None,
        view: PoseView | None = None,
        limbs: list[Limb] | None = None,
        joints: JointUpdates | None = None,
    ) -> Pose:
        """Update pose metadata; joint targets are resolved through the solver."""
        pose = self.get_pose(pose_id)
        if name is not None:
            pose.name = name
        if gender is not None:
            pose.gender = PoseGender(gender)
        if view is not None:
            pose.view = PoseView(view)
        if limbs is not None:
            pose.limbs = list(limbs)
        if joints is not None:
            pose.joints = move_joints(pose.joints, joints)
        return pose

    def move_pose_joint(self, pose_id: UUID, joint: JointName | str, target: Vec2) -> Pose:
        pose = self.get_pose(pose_id)
        pose.joints = move_joint(pose.joints, joint, target)
        return pose

    def move_pose_joints(self, pose_id: UUID, targets: JointUpdates) -> Pose:
        pose = self.get_pose(pose_id)
        pose.joints = move_joints(pose.joints, targets)
        return pose

    def drag_pose_limb(self, pose_id: UUID, limb_name: str, target: Vec2) -> Pose:
        pose = self.get_pose(pose_id)
        limb = find_limb(pose.limbs, limb_name)
        if limb is None:
            msg = f"unknown limb: {limb_name!r}"
            raise StoreError(msg)
        pose.joints = drag_limb(pose.joints, limb, target)
        return pose

    def mirror_pose(self, pose_id: UUID) -> Pose:
        """Swap the pose left/right and re-apply every joint constraint."""
        pose = self.get_pose(pose_id)
        pose.joints = move_joints(pose.joints, mirror_joints(pose.joints))
        logger.debug("Mirrored pose %s", pose_id)
        return pose

    def reset_pose(self, pose_id: UUID) -> Pose:
        pose = self.get_pose(pose_id)
        pose.joints = move_joints(pose.joints, rest_joints())
        pose.limbs = list(DEFAULT_LIMBS)
        logger.debug("Reset pose %s", pose_id)
        return pose

    def remove_pose(self, pose_id: UUID) -> None:
        del self.poses[self._pose_index(pose_id)]

    # -- UI ------------------------------------------------------------------

    def set_active_figure(self, figure_id: UUID | None) -> None:
        self.ui.active_figure_id = figure_id

    def toggle_grid(self) -> bool:
        self.ui.show_grid = not self.ui.show_grid
        return self.ui.show_grid

    def set_view_mode(self, mode: ViewMode | str) -> None:
        self.ui.view_mode = ViewMode(mode)

    # -- internals -----------------------------------------------------------

    def _figure_index(self, figure_id: UUID) -> int:
        for index, figure in enumerate(self.figures):
            if figure.id == figure_id:
                return index
        msg = f"unknown figure: {figure_id}"
        raise StoreError(msg)

    def _pose_index(self, pose_id: UUID) -> int:
        for index, pose in enumerate(self.poses):
            if pose.id == pose_id:
                return index
        msg = f"unknown pose: {pose_id}"
        raise StoreError(msg)

    def _swap(self, a: int, b: int) -> None:
        self.figures[a], self.figures[b] = self.figures[b], self.figures[a]
