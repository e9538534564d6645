"""
词典查询 API 路由
"""
from fastapi import APIRouter, HTTPException
from typing import Dict, Optional

from services.dictionary_manager import DictionaryManager
from services.vocab_session import VocabSession

router = APIRouter(prefix="/api/v1/dictionary", tags=["dictionary"])

# 全局词典管理器实例
dict_manager: DictionaryManager = None
# 重新加载后需要同步课数的会话
session: Optional[VocabSession] = None


def set_dict_manager(dm: DictionaryManager, s: Optional[VocabSession] = None):
    """设置词典管理器与会话实例"""
    global dict_manager, session
    dict_manager = dm
    session = s


@router.get("/stats")
async def get_dictionary_stats() -> Dict:
    """获取词典统计信息"""
    if dict_manager is None:
        raise HTTPException(status_code=500, detail="Dictionary manager not initialized")

    return dict_manager.get_stats()


@router.get("/level")
async def get_word_level(word: str) -> Dict:
    """查询词汇等级"""
    if dict_manager is None:
        raise HTTPException(status_code=500, detail="Dictionary manager not initialized")

    return {
        "word": word,
        "level": dict_manager.get_level(word),
        "known": word in dict_manager.known_words or word in dict_manager.level_table
    }


@router.get("/search")
async def search_dictionary(word: str) -> Dict:
    """搜索等级表"""
    if dict_manager is None:
        raise HTTPException(status_code=500, detail="Dictionary manager not initialized")

    return dict_manager.search(word)


@router.post("/reload")
async def reload_dictionaries() -> Dict:
    """重新加载所有词典，并同步会话的课数勾选"""
    if dict_manager is None:
        raise HTTPException(status_code=500, detail="Dictionary manager not initialized")

    dict_manager.reload_all()
    if session is not None:
        session.sync_lessons()
    return {"status": "success", "message": "All dictionaries reloaded", "stats": dict_manager.get_stats()}
