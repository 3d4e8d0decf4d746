# Client routes rendered by the website
PRODUCTS_ROUTE = "/products"


def product_route(product_id: str) -> str:
    return f"{PRODUCTS_ROUTE}/{product_id}"


def viewer_route(product_id: str) -> str:
    return f"{PRODUCTS_ROUTE}/{product_id}/viewer"


# Model formats the viewer can import
class ModelFormat:
    GLB = "glb"
    GLTF = "gltf"


SUPPORTED_MODEL_FORMATS = (ModelFormat.GLB, ModelFormat.GLTF)

# Viewer camera and scene conventions
DEFAULT_CAMERA_FOV = 50.0
HOME_CAMERA_POSITION = (0.0, 0.0, 8.0)
FIT_TARGET_SIZE = 3.0
FIT_FLOOR_Y = -1.5
FIT_VIEW_PADDING = 1.7
ORIENT_DISTANCE_FACTOR = 2.2

# Product catalog, in display order
PRODUCT_CATALOG = [
    {
        "id": "viewer",
        "name": "3D Viewer",
        "logo": "/logo/viewer.png",
        "summary": "Fast GLTF/IFC preview with orbit, fit, grid, and contact shadows.",
        "features": ["GLTF/GLB support", "Orbit + Fit view", "Contact shadows", "Annotations (soon)"],
        "price": "Free",
        "badge": "Ready",
        "color_from": "from-blue-600",
        "color_to": "to-sky-500",
        "disabled": False,
        "has_viewer": True,
    },
    {
        "id": "comparer",
        "name": "Model Comparer",
        "logo": "/logo/comparer.png",
        "summary": "Side-by-side or diff overlay to compare revisions.",
        "features": ["Geometry diff", "Property diff", "Color-coded changes", "Report export"],
        "price": "Coming soon",
        "badge": "Preview",
        "color_from": "from-red-600",
        "color_to": "to-rose-500",
        "disabled": True,
        "has_viewer": False,
    },
    {
        "id": "converter",
        "name": "Format Converter",
        "logo": "/logo/converter.png",
        "summary": "Convert CAD/BIM to GLTF/IFC/DRACO for web pipelines.",
        "features": ["IFC/GLTF/DRACO", "Property mapping", "Shared coords", "Batch convert"],
        "price": "Coming soon",
        "badge": "Preview",
        "color_from": "from-emerald-500",
        "color_to": "to-cyan-500",
        "disabled": True,
        "has_viewer": False,
    },
]
