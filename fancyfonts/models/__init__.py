from fancyfonts.models.catalog import Catalog, build_catalog
from fancyfonts.models.failure import (
    ApiResponse,
    FailureDetail,
    FailureKind,
    KnownError,
    OutcomeType,
)
from fancyfonts.models.filter_state import FilterState
from fancyfonts.models.font import (
    Decorator,
    Font,
    build_decorator,
    build_font,
    normalize_text,
)

__all__ = [
    "ApiResponse",
    "Catalog",
    "Decorator",
    "FailureDetail",
    "FailureKind",
    "FilterState",
    "Font",
    "KnownError",
    "OutcomeType",
    "build_catalog",
    "build_decorator",
    "build_font",
    "normalize_text",
]
