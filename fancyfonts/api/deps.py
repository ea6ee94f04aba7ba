"""Shared FastAPI dependencies."""

from fastapi import status

from fancyfonts.models.catalog import Catalog
from fancyfonts.models.failure import FailureKind, KnownError
from fancyfonts.services.font_data import get_catalog


def catalog_dependency() -> Catalog:
    """
    Provide the font catalog.

    Raises KnownError (503) when the data tables are missing.
    """
    try:
        return get_catalog()
    except FileNotFoundError as e:
        raise KnownError(
            kind=FailureKind.SERVICE_UNAVAILABLE,
            message="Font catalog not available. Please try again later.",
            detail=str(e),
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        ) from e
