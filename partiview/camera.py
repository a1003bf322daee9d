"""Orbiting camera looking at a focus point."""

from __future__ import annotations

from partiview.matrix import Matrix4x4
from partiview.vector import Vector3, Vector4, cross, dot, normalize


class Camera:
    """Camera orbiting, panning and zooming around a focus point."""

    FOV = 120.0
    Z_NEAR = 0.01
    Z_FAR = 6000.0
    INIT_CAMERA_POS = Vector3(32.0, -1.2, 0.0)
    INIT_FOCUS_POS = Vector3(0.0, 0.0, 0.0)

    def __init__(self, aspect_ratio: float) -> None:
        self._aspect_ratio = aspect_ratio
        self.auto_rotating = False
        self._camera_pos = self.INIT_CAMERA_POS
        self._focus_pos = self.INIT_FOCUS_POS
        self._proj_mat = Matrix4x4()
        self._view_mat = Matrix4x4()
        self._proj_view_mat = Matrix4x4()
        self.reset()

    @property
    def camera_pos(self) -> Vector3:
        return self._camera_pos

    @property
    def focus_pos(self) -> Vector3:
        return self._focus_pos

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    @property
    def proj_mat(self) -> Matrix4x4:
        return self._proj_mat

    @property
    def view_mat(self) -> Matrix4x4:
        return self._view_mat

    @property
    def proj_view_mat(self) -> Matrix4x4:
        return self._proj_view_mat

    def reset(self) -> None:
        """Return to the initial camera and focus positions."""
        self._camera_pos = self.INIT_CAMERA_POS
        self._focus_pos = self.INIT_FOCUS_POS
        self._update_proj_mat()
        self._update_proj_view_mat()

    def set_scene_aspect_ratio(self, aspect_ratio: float) -> None:
        """Change the viewport aspect ratio and rebuild the projection."""
        self._aspect_ratio = aspect_ratio
        self._update_proj_mat()
        self._update_proj_view_mat()

    def rotate(self, angle_x: float, angle_y: float) -> None:
        """Orbit the camera around the focus point, angles in camera space."""
        offset = self._camera_pos - self._focus_pos
        rot = Matrix4x4.rotation_y(angle_y) * Matrix4x4.rotation_x(angle_x)
        world_to_cam = self._view_mat.remove_translation()
        rot = world_to_cam * rot * world_to_cam.transpose()
        self._camera_pos = self._focus_pos + offset * rot
        self._update_proj_view_mat()

    def translate(self, disp_x: float, disp_y: float) -> None:
        """Pan the camera and focus point within the camera's view plane."""
        trans = Matrix4x4.translation(disp_x, disp_y, 0.0)
        world_to_cam = self._view_mat.remove_translation()
        trans = world_to_cam * trans * world_to_cam.transpose()
        self._camera_pos = (Vector4(*self._camera_pos, 1.0) * trans).xyz()
        self._focus_pos = (Vector4(*self._focus_pos, 1.0) * trans).xyz()
        self._update_proj_view_mat()

    def zoom(self, delta: float) -> None:
        """Scale the camera's distance to the focus by ``1 + delta / 10``."""
        ratio = 1.0 + delta / 10.0
        offset = self._camera_pos - self._focus_pos
        self._camera_pos = self._focus_pos + offset * ratio
        self._update_proj_view_mat()

    def _update_proj_mat(self) -> None:
        self._proj_mat = Matrix4x4.projection(
            self.FOV, self._aspect_ratio, self.Z_NEAR, self.Z_FAR, True
        )

    def _update_proj_view_mat(self) -> None:
        ref_z = normalize(-(self._camera_pos - self._focus_pos))
        ref_y = Vector3(0.0, 1.0, 0.0)
        ref_x = cross(ref_y, ref_z)
        ref_y = cross(ref_z, ref_x)
        ref_x = normalize(ref_x)
        ref_y = normalize(ref_y)

        eye = self._camera_pos
        self._view_mat = Matrix4x4(
            [
                [ref_x.x, ref_y.x, ref_z.x, 0.0],
                [ref_x.y, ref_y.y, ref_z.y, 0.0],
                [ref_x.z, ref_y.z, ref_z.z, 0.0],
                [-dot(ref_x, eye), -dot(ref_y, eye), -dot(ref_z, eye), 1.0],
            ]
        )
        self._proj_view_mat = self._view_mat * self._proj_mat