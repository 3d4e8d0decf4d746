"""API endpoints for the product catalog and the 3D model viewer."""

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, status, Query, UploadFile, File

from app.core.config import settings
from app.models.model_inspection import ModelInspection
from app.models.product import Product, ProductList
from app.services.model_inspection_service import (
    model_inspection_service,
    ModelParseError,
    UnsupportedModelFormatError,
)
from app.services.product_service import product_service
from app.utils.constants import DEFAULT_CAMERA_FOV

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=ProductList,
    status_code=status.HTTP_200_OK,
    summary="List products",
    description="List the product catalog in display order",
)
async def list_products(
    available: Optional[bool] = Query(
        None, description="Keep only available (true) or upcoming (false) products"
    ),
) -> ProductList:
    """List the product catalog.

    Args:
        available: Optional availability filter

    Returns:
        The products in display order
    """
    return await product_service.get_products(available=available)


@router.get(
    "/{product_id}",
    response_model=Product,
    status_code=status.HTTP_200_OK,
    summary="Get product",
    description="Get a single product of the catalog",
)
async def get_product(product_id: str) -> Product:
    product = await product_service.get_product(product_id)
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Product not found"
        )
    return product


@router.post(
    "/{product_id}/viewer/inspect",
    response_model=ModelInspection,
    status_code=status.HTTP_200_OK,
    summary="Inspect a 3D model",
    description="Upload a GLTF/GLB model and get the statistics, bounds and camera poses the viewer uses",
)
async def inspect_model(
    product_id: str,
    file: UploadFile = File(..., description="GLB or self-contained GLTF file"),
    fov: float = Query(
        DEFAULT_CAMERA_FOV, gt=0, lt=180, description="Camera vertical field of view in degrees"
    ),
) -> ModelInspection:
    """Inspect an uploaded model for the product's viewer.

    Args:
        product_id: Slug of a product with an available viewer
        file: The uploaded model
        fov: Camera vertical field of view in degrees

    Returns:
        Model statistics, bounding box, import normalisation and camera poses

    Raises:
        HTTPException: 404 for unknown products or products without a viewer,
            400 for unsupported or empty files, 413 for oversized files,
            422 when the model cannot be parsed
    """
    product = await product_service.get_product(product_id)
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Product not found"
        )
    if not product_service.viewer_available(product):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Viewer not available for this product",
        )

    try:
        model_inspection_service.detect_format(file.filename)
    except UnsupportedModelFormatError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    max_bytes = settings.MAX_MODEL_UPLOAD_MB * 1024 * 1024
    data = await file.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Model files are limited to {settings.MAX_MODEL_UPLOAD_MB} MB",
        )
    if not data:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Uploaded file is empty"
        )

    logger.info(f"model inspect:[product:{product_id}][file:{file.filename}][bytes:{len(data)}]")

    try:
        return await asyncio.to_thread(
            model_inspection_service.inspect, data, file.filename, fov
        )
    except ModelParseError as e:
        logger.warning(f"Rejected model {file.filename}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Could not parse model file",
        )
