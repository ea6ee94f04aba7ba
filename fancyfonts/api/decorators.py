"""
Decorator API endpoints.

Lists the markers that can be wrapped around rendered text.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from fancyfonts.api.deps import catalog_dependency
from fancyfonts.models.catalog import Catalog

router = APIRouter(prefix="/decorators", tags=["decorators"])


class DecoratorResponse(BaseModel):
    """A single decorator."""

    id: str
    name: str
    value: str


class DecoratorListResponse(BaseModel):
    """Response model for the decorator list."""

    decorators: list[DecoratorResponse]


@router.get("", response_model=DecoratorListResponse)
async def list_decorators(
    catalog: Annotated[Catalog, Depends(catalog_dependency)],
) -> DecoratorListResponse:
    """List decorators in catalog order. The first one is the default."""
    return DecoratorListResponse(
        decorators=[
            DecoratorResponse(id=d.id, name=d.name, value=d.value) for d in catalog.decorators
        ]
    )
