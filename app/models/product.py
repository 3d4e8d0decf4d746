"""Product catalog models for the Cadster API."""

from typing import List, Optional
from typing_extensions import Annotated
from pydantic import BaseModel, Field


class Product(BaseModel):
    """A product listed in the catalog.

    Attributes:
        id: Slug identifying the product in client routes
        disabled: Whether the product is not yet available
        has_viewer: Whether the product opens the 3D model viewer
        path: Client route of the product detail page
        viewer_path: Client route of the viewer, for available viewer products
    """

    id: Annotated[str, Field(..., description="Slug identifying the product in client routes")]
    name: str
    logo: Annotated[str, Field(..., description="Path of the product logo image")]
    summary: str
    features: List[str] = Field(default_factory=list)
    price: str
    badge: Optional[str] = None
    color_from: Optional[str] = None
    color_to: Optional[str] = None
    disabled: bool = False
    has_viewer: bool = False
    path: Annotated[str, Field(..., description="Client route of the product detail page")]
    viewer_path: Annotated[
        Optional[str],
        Field(None, description="Client route of the 3D viewer, when the product has one"),
    ]


class ProductList(BaseModel):
    """Catalog listing.

    Attributes:
        products: Products in display order
        count: Number of products returned
    """

    products: List[Product]
    count: int
