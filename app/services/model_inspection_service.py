"""Services for inspecting 3D models imported into the viewer.

This module parses GLTF/GLB files with trimesh and derives what the browser
viewer shows for a model: geometry statistics, the bounding box, the
normalisation applied on import and the camera poses for fit and the
orientation presets.
"""

import io
import logging
import math
import os
from typing import Dict, Optional

import numpy as np
import trimesh

from app.models.model_inspection import (
    BoundingBox,
    CameraPose,
    ModelFit,
    ModelInspection,
    ModelStats,
)
from app.utils.constants import (
    DEFAULT_CAMERA_FOV,
    FIT_FLOOR_Y,
    FIT_TARGET_SIZE,
    FIT_VIEW_PADDING,
    HOME_CAMERA_POSITION,
    ORIENT_DISTANCE_FACTOR,
    SUPPORTED_MODEL_FORMATS,
)

logger = logging.getLogger(__name__)

ISO_DIRECTION = np.ones(3) / math.sqrt(3.0)


class UnsupportedModelFormatError(ValueError):
    """Raised when an upload is not a .glb or .gltf file."""


class ModelParseError(Exception):
    """Raised when a model file cannot be parsed into a scene."""


def _vector(values) -> list:
    return [float(v) for v in values]


class ModelInspectionService:
    """Service computing viewer facts for GLTF/GLB models."""

    def detect_format(self, filename: Optional[str]) -> str:
        """Return the model format from the file extension.

        Raises:
            UnsupportedModelFormatError: If the extension is not .glb or .gltf
        """
        extension = os.path.splitext(filename or "")[1].lower().lstrip(".")
        if extension not in SUPPORTED_MODEL_FORMATS:
            raise UnsupportedModelFormatError("Only .glb and .gltf files are supported")
        return extension

    def load_scene(self, data: bytes, model_format: str) -> trimesh.Scene:
        """Parse model bytes into a trimesh scene.

        Args:
            data: Raw file content
            model_format: glb or gltf

        Returns:
            The parsed scene

        Raises:
            ModelParseError: If trimesh cannot read the file
        """
        try:
            scene = trimesh.load(
                io.BytesIO(data), file_type=model_format, force="scene"
            )
        except Exception as e:
            logger.warning(f"Failed to parse {model_format} model: {str(e)}")
            raise ModelParseError(f"Could not parse {model_format} model: {str(e)}")

        if not isinstance(scene, trimesh.Scene):
            raise ModelParseError(f"Unexpected model type after loading: {type(scene).__name__}")
        return scene

    def compute_stats(self, scene: trimesh.Scene) -> ModelStats:
        """Count objects, vertices, edges, faces and triangles.

        Every node referencing a mesh counts once, so instanced geometry is
        counted per instance. Edges are estimated per mesh as 3/2 of its
        triangles, the count for a closed triangle mesh.
        """
        stats = ModelStats()
        for node_name in scene.graph.nodes_geometry:
            _, geometry_name = scene.graph[node_name]
            geometry = scene.geometry.get(geometry_name)
            if not isinstance(geometry, trimesh.Trimesh):
                continue

            triangles = len(geometry.faces)
            stats.objects += 1
            stats.vertices += len(geometry.vertices)
            stats.triangles += triangles
            stats.edges += (triangles * 3) // 2

        stats.faces = stats.triangles
        return stats

    def compute_bounds(self, scene: trimesh.Scene) -> Optional[BoundingBox]:
        if not scene.geometry:
            return None
        bounds = scene.bounds
        if bounds is None:
            return None

        lower, upper = np.asarray(bounds[0]), np.asarray(bounds[1])
        return BoundingBox(
            min=_vector(lower),
            max=_vector(upper),
            size=_vector(upper - lower),
            center=_vector((lower + upper) / 2.0),
        )

    def _max_axis(self, bounds: Optional[BoundingBox]) -> float:
        if bounds is None:
            return 1.0
        return max(bounds.size) or 1.0

    def _center(self, bounds: Optional[BoundingBox]) -> np.ndarray:
        if bounds is None:
            return np.zeros(3)
        return np.asarray(bounds.center)

    def compute_fit(self, bounds: Optional[BoundingBox]) -> ModelFit:
        """Scale to the target size, centre on x/z and rest on the floor plane."""
        max_axis = self._max_axis(bounds)
        scale = FIT_TARGET_SIZE / max_axis
        center = self._center(bounds)
        lowest = bounds.min[1] if bounds is not None else 0.0

        translation = -center * scale
        translation[1] = FIT_FLOOR_Y - lowest * scale

        return ModelFit(max_axis=max_axis, scale=scale, translation=_vector(translation))

    def fit_camera(self, bounds: Optional[BoundingBox], fov: float = DEFAULT_CAMERA_FOV) -> CameraPose:
        """Camera pose framing the whole bounding box for a vertical field of view.

        Args:
            bounds: Bounding box of the model
            fov: Vertical field of view in degrees

        Returns:
            Position on the isometric diagonal with matching clipping planes
        """
        max_axis = self._max_axis(bounds)
        center = self._center(bounds)
        distance = max_axis / (2 * math.tan(math.radians(fov) / 2))

        position = center + ISO_DIRECTION * distance * FIT_VIEW_PADDING
        return CameraPose(
            position=_vector(position),
            target=_vector(center),
            near=max(0.01, max_axis / 1000),
            far=max(1000.0, distance * 25),
        )

    def orientation_views(self, bounds: Optional[BoundingBox]) -> Dict[str, CameraPose]:
        max_axis = self._max_axis(bounds)
        center = self._center(bounds)
        distance = max_axis * ORIENT_DISTANCE_FACTOR

        offsets = {
            "N": np.array([0.0, 0.0, distance]),
            "S": np.array([0.0, 0.0, -distance]),
            "E": np.array([distance, 0.0, 0.0]),
            "W": np.array([-distance, 0.0, 0.0]),
            "TOP": np.array([0.0, distance, 0.0]),
            "ISO": ISO_DIRECTION * distance,
        }
        views = {
            name: CameraPose(position=_vector(center + offset), target=_vector(center))
            for name, offset in offsets.items()
        }
        views["HOME"] = CameraPose(
            position=_vector(HOME_CAMERA_POSITION), target=[0.0, 0.0, 0.0]
        )
        return views

    def inspect(
        self, data: bytes, filename: str, fov: float = DEFAULT_CAMERA_FOV
    ) -> ModelInspection:
        """Inspect a GLTF/GLB file.

        Args:
            data: Raw file content
            filename: Uploaded file name, used to detect the format
            fov: Vertical field of view in degrees for the camera poses

        Returns:
            Stats, bounds, fit and camera poses for the model

        Raises:
            UnsupportedModelFormatError: If the file is not .glb or .gltf
            ModelParseError: If the file cannot be parsed
        """
        model_format = self.detect_format(filename)
        scene = self.load_scene(data, model_format)

        stats = self.compute_stats(scene)
        bounds = self.compute_bounds(scene) if stats.objects else None

        logger.info(
            f"Inspected model:[file:{filename}][objects:{stats.objects}]"
            f"[vertices:{stats.vertices}][triangles:{stats.triangles}]"
        )

        return ModelInspection(
            filename=filename,
            format=model_format,
            file_size=len(data),
            stats=stats,
            bounds=bounds,
            fit=self.compute_fit(bounds),
            fov=fov,
            camera=self.fit_camera(bounds, fov),
            views=self.orientation_views(bounds),
        )


model_inspection_service = ModelInspectionService()
