"""
API 请求模型定义
"""
from typing import List, Optional
from pydantic import BaseModel, Field

from config import settings


class SegmentRequest(BaseModel):
    """断词请求"""
    text: str = Field(..., description="待断词文本", max_length=settings.max_text_length)
    split_sentence: Optional[bool] = Field(default=None, description="是否先依标点切分句子，不填用服务预设值")
    use_grammar_rules: Optional[bool] = Field(default=None, description="是否使用上下文规则修正，不填用服务预设值")
    use_blocklist: bool = Field(default=True, description="是否把旧词清单视为已知词")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"text": "我們開心地看書。", "split_sentence": True, "use_grammar_rules": True}
            ]
        }
    }


class AnalyzeRequest(BaseModel):
    """生词分析请求"""
    text: str = Field(..., description="待分析文本", min_length=1, max_length=settings.max_text_length)
    use_advanced: bool = Field(default=True, description="使用字典断词（否则用 jieba）")
    split_sentence: Optional[bool] = Field(default=None, description="是否先依标点切分句子，不填用服务预设值")
    use_grammar_rules: Optional[bool] = Field(default=None, description="是否使用上下文规则修正，不填用服务预设值")


class VocabItemModel(BaseModel):
    """生词"""
    word: str = Field(..., min_length=1, description="词语")
    level: str = Field(default="0", description="词汇等级，0 表示未知")


class MergeRequest(BaseModel):
    """与下一个词合并"""
    items: List[VocabItemModel]
    index: int = Field(..., ge=0)
    char_count: int = Field(default=0, ge=0, description="原文总字数，原样带回")


class SplitRequest(BaseModel):
    """手动切分"""
    items: List[VocabItemModel]
    index: int = Field(..., ge=0)
    pieces: str = Field(..., description="以空白分隔的新词，如「看 書」")
    force: bool = Field(default=False, description="新词与原词不符时仍然套用")
    char_count: int = Field(default=0, ge=0, description="原文总字数，原样带回")


class ExportRequest(BaseModel):
    """导出为纯文本"""
    items: List[VocabItemModel]


class LessonSelectRequest(BaseModel):
    """勾选 / 取消课数"""
    lessons: List[str] = Field(..., min_length=1)
    checked: bool = True


class ToggleAllRequest(BaseModel):
    checked: bool


class CustomVocabRequest(BaseModel):
    """新增补充旧词"""
    text: str = Field(..., description="以换行、逗号、顿号或空白分隔的词", min_length=1)
