"""
断词与生词分析 API 路由
"""
from fastapi import APIRouter, HTTPException

from api.models import (
    SegmentRequest,
    AnalyzeRequest,
    VocabItemModel,
    MergeRequest,
    SplitRequest,
    ExportRequest,
    SegmentResponse,
    AnalyzeResponse,
    ExportResponse
)
from core.vocab_analyzer import VocabAnalyzer, VocabItem
from services.vocab_session import VocabSession

router = APIRouter(prefix="/api/v1", tags=["segment"])

# 全局实例（在 main.py 中初始化）
analyzer: VocabAnalyzer = None
session: VocabSession = None


def set_analyzer(a: VocabAnalyzer, s: VocabSession):
    """设置分析器与会话实例"""
    global analyzer, session
    analyzer = a
    session = s


def _require_analyzer() -> VocabAnalyzer:
    if analyzer is None or session is None:
        raise HTTPException(status_code=500, detail="Analyzer not initialized")
    return analyzer


def _to_items(models) -> list:
    return [VocabItem(word=m.word, level=m.level) for m in models]


def _to_response(items, char_count: int) -> AnalyzeResponse:
    return AnalyzeResponse(
        items=[VocabItemModel(word=i.word, level=i.level) for i in items],
        char_count=char_count,
        new_word_count=len(items)
    )


@router.post("/segment", response_model=SegmentResponse)
async def segment_text(request: SegmentRequest) -> SegmentResponse:
    """
    断词

    - 正向 / 逆向最大匹配，选粒度较粗的结果
    - 可选上下文规则修正
    - 标点、空白、数字原样保留
    """
    a = _require_analyzer()
    blocklist = session.blocklist if request.use_blocklist else None
    words = a.segment(
        request.text,
        blocklist,
        use_grammar_rules=request.use_grammar_rules,
        split_sentence=request.split_sentence
    )
    return SegmentResponse(words=words)


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_text(request: AnalyzeRequest) -> AnalyzeResponse:
    """
    分析生词

    - 过滤标点与旧词（已勾选课数 + 补充旧词）
    - 去重并标上词汇等级
    """
    a = _require_analyzer()
    try:
        result = a.analyze(
            request.text,
            session.blocklist,
            use_advanced=request.use_advanced,
            use_grammar_rules=request.use_grammar_rules,
            split_sentence=request.split_sentence
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _to_response(result.items, result.char_count)


@router.post("/analyze/merge", response_model=AnalyzeResponse)
async def merge_items(request: MergeRequest) -> AnalyzeResponse:
    """与下一个词合并"""
    a = _require_analyzer()
    try:
        items = a.merge_with_next(_to_items(request.items), request.index)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _to_response(items, request.char_count)


@router.post("/analyze/split", response_model=AnalyzeResponse)
async def split_item(request: SplitRequest) -> AnalyzeResponse:
    """手动切分单个词"""
    a = _require_analyzer()
    try:
        items = a.split_item(
            _to_items(request.items),
            request.index,
            request.pieces,
            force=request.force
        )
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _to_response(items, request.char_count)


@router.post("/analyze/export", response_model=ExportResponse)
async def export_items(request: ExportRequest) -> ExportResponse:
    """导出为「1. 詞 (Level 2)」格式的纯文本"""
    _require_analyzer()
    return ExportResponse(text=VocabAnalyzer.format_text(_to_items(request.items)))
