"""
API 响应模型定义
"""
from typing import Dict, List
from pydantic import BaseModel, Field

from .request import VocabItemModel


class SegmentResponse(BaseModel):
    """断词响应"""
    words: List[str] = Field(..., description="断词结果（含标点）")


class AnalyzeResponse(BaseModel):
    """生词分析响应"""
    items: List[VocabItemModel] = Field(..., description="生词列表")
    char_count: int = Field(..., description="总字数")
    new_word_count: int = Field(..., description="生词数")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "items": [
                        {"word": "開心", "level": "2"},
                        {"word": "地", "level": "1"}
                    ],
                    "char_count": 3,
                    "new_word_count": 2
                }
            ]
        }
    }


class ExportResponse(BaseModel):
    text: str = Field(..., description="编号后的生词清单")


class BookInfo(BaseModel):
    """冊别"""
    book: str
    lessons: List[str]
    selected: List[str]
    status: str = Field(..., description="all / partial / none")


class LessonsResponse(BaseModel):
    books: List[BookInfo]
    selected_count: int
    blocklist_count: int


class CustomVocabResponse(BaseModel):
    words: List[str]
    count: int
    added: int = 0


class HealthResponse(BaseModel):
    """健康检查响应"""
    status: str = Field(..., description="服务状态")
    version: str = Field(..., description="版本号")
    dictionaries_loaded: bool = Field(..., description="词典是否加载")
    stats: Dict[str, int] = Field(default_factory=dict, description="词典统计")
