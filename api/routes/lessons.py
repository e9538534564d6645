"""
课数选择与补充旧词 API 路由
"""
from fastapi import APIRouter, HTTPException

from api.models import (
    LessonSelectRequest,
    ToggleAllRequest,
    CustomVocabRequest,
    BookInfo,
    LessonsResponse,
    CustomVocabResponse
)
from services.vocab_session import VocabSession

router = APIRouter(prefix="/api/v1", tags=["lessons"])

# 全局会话实例
session: VocabSession = None


def set_session(s: VocabSession):
    """设置会话实例"""
    global session
    session = s


def _require_session() -> VocabSession:
    if session is None:
        raise HTTPException(status_code=500, detail="Session not initialized")
    return session


def _lessons_response(s: VocabSession) -> LessonsResponse:
    books = [
        BookInfo(book=g.book, lessons=g.lessons, selected=g.selected, status=g.status)
        for g in s.books()
    ]
    return LessonsResponse(
        books=books,
        selected_count=len(s.selected_lessons),
        blocklist_count=len(s.blocklist)
    )


@router.get("/lessons", response_model=LessonsResponse)
async def get_lessons() -> LessonsResponse:
    """按冊别列出课数与勾选状态"""
    return _lessons_response(_require_session())


@router.post("/lessons/select", response_model=LessonsResponse)
async def select_lessons(request: LessonSelectRequest) -> LessonsResponse:
    """勾选 / 取消指定课数"""
    s = _require_session()
    unknown = [l for l in request.lessons if not s.set_lesson(l, request.checked)]
    if unknown:
        raise HTTPException(status_code=404, detail=f"Unknown lessons: {', '.join(unknown)}")
    return _lessons_response(s)


@router.post("/lessons/toggle-all", response_model=LessonsResponse)
async def toggle_all_lessons(request: ToggleAllRequest) -> LessonsResponse:
    """全选 / 全不选"""
    s = _require_session()
    s.toggle_all(request.checked)
    return _lessons_response(s)


@router.post("/lessons/select-up-to/{book}", response_model=LessonsResponse)
async def select_up_to(book: str) -> LessonsResponse:
    """累积选择到某一冊为止"""
    s = _require_session()
    if not s.select_up_to(book):
        raise HTTPException(status_code=404, detail=f"Unknown book: {book}")
    return _lessons_response(s)


@router.post("/lessons/toggle-book/{book}", response_model=LessonsResponse)
async def toggle_book(book: str) -> LessonsResponse:
    """单冊开关"""
    s = _require_session()
    if not s.toggle_book(book):
        raise HTTPException(status_code=404, detail=f"Unknown book: {book}")
    return _lessons_response(s)


@router.get("/vocab/custom", response_model=CustomVocabResponse)
async def list_custom_vocab() -> CustomVocabResponse:
    """列出补充旧词"""
    words = _require_session().list_custom_vocab()
    return CustomVocabResponse(words=words, count=len(words))


@router.post("/vocab/custom", response_model=CustomVocabResponse)
async def add_custom_vocab(request: CustomVocabRequest) -> CustomVocabResponse:
    """新增补充旧词"""
    s = _require_session()
    added = s.add_custom_vocab(request.text)
    words = s.list_custom_vocab()
    return CustomVocabResponse(words=words, count=len(words), added=added)


@router.delete("/vocab/custom", response_model=CustomVocabResponse)
async def clear_custom_vocab() -> CustomVocabResponse:
    """清除所有补充旧词（不影响勾选的课本词汇）"""
    s = _require_session()
    s.clear_custom_vocab()
    return CustomVocabResponse(words=[], count=0)
