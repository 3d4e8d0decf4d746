"""Models describing an imported 3D model as the viewer sees it."""

from typing import Dict, List, Optional
from typing_extensions import Annotated
from pydantic import BaseModel, Field

Vector3 = Annotated[List[float], Field(min_length=3, max_length=3)]


class ModelStats(BaseModel):
    """Geometry statistics summed over every mesh instance in the scene."""

    objects: int = 0
    vertices: int = 0
    edges: int = 0
    faces: int = 0
    triangles: int = 0


class BoundingBox(BaseModel):
    """World-space axis aligned bounding box."""

    min: Vector3
    max: Vector3
    size: Vector3
    center: Vector3


class ModelFit(BaseModel):
    """Normalisation applied when the model is placed in the viewer.

    Attributes:
        max_axis: Largest side of the bounding box, 1.0 when degenerate
        scale: Uniform scale bringing the largest side to the target size
        translation: Offset applied after scaling, centring x/z and resting the model on the floor
    """

    max_axis: float
    scale: float
    translation: Vector3


class CameraPose(BaseModel):
    position: Vector3
    target: Vector3
    near: Annotated[Optional[float], Field(None, description="Near clipping plane")]
    far: Annotated[Optional[float], Field(None, description="Far clipping plane")]


class ModelInspection(BaseModel):
    """Result of inspecting an uploaded GLTF/GLB model.

    Attributes:
        filename: Name of the uploaded file
        format: Detected model format, glb or gltf
        file_size: Size of the upload in bytes
        stats: Object, vertex, edge, face and triangle counts
        bounds: Bounding box, None when the scene has no geometry
        fit: Normalisation applied on import
        fov: Vertical field of view used for the camera poses, in degrees
        camera: Camera pose framing the whole model
        views: Orientation presets keyed by name (N, S, E, W, TOP, ISO, HOME)
    """

    filename: str
    format: str
    file_size: int
    stats: ModelStats
    bounds: Optional[BoundingBox] = None
    fit: ModelFit
    fov: float
    camera: CameraPose
    views: Dict[str, CameraPose]
