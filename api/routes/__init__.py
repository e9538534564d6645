from .segment import router as segment_router, set_analyzer
from .lessons import router as lessons_router, set_session
from .dictionary import router as dictionary_router, set_dict_manager

__all__ = [
    "segment_router",
    "lessons_router",
    "dictionary_router",
    "set_analyzer",
    "set_session",
    "set_dict_manager"
]
