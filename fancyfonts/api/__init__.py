from fancyfonts.api.decorators import router as decorators_router
from fancyfonts.api.fonts import router as fonts_router
from fancyfonts.api.health import router as health_router
from fancyfonts.api.preferences import router as preferences_router

__all__ = [
    "decorators_router",
    "fonts_router",
    "health_router",
    "preferences_router",
]
