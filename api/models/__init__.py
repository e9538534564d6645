from .request import (
    SegmentRequest,
    AnalyzeRequest,
    VocabItemModel,
    MergeRequest,
    SplitRequest,
    ExportRequest,
    LessonSelectRequest,
    ToggleAllRequest,
    CustomVocabRequest
)
from .response import (
    SegmentResponse,
    AnalyzeResponse,
    ExportResponse,
    BookInfo,
    LessonsResponse,
    CustomVocabResponse,
    HealthResponse
)

__all__ = [
    "SegmentRequest",
    "AnalyzeRequest",
    "VocabItemModel",
    "MergeRequest",
    "SplitRequest",
    "ExportRequest",
    "LessonSelectRequest",
    "ToggleAllRequest",
    "CustomVocabRequest",
    "SegmentResponse",
    "AnalyzeResponse",
    "ExportResponse",
    "BookInfo",
    "LessonsResponse",
    "CustomVocabResponse",
    "HealthResponse"
]
