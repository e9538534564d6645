"""
共用测试夹具
"""
import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from services.dictionary_manager import DictionaryManager


TBCL = {
    "我": "1",
    "們": "1",
    "開心": "2",
    "心地": "4",
    "看": "1",
    "書": "1",
    "紅": "1",
    "色": "1",
    "還": "1",
    "都": "1",
    "還都": "6",
    "學校": 1,
    "圖書館": "2",
}

LESSONS = {
    "B1L1": ["我", "們"],
    "B1L2": ["看"],
    "B1L10": ["書"],
    "B2L1": ["學校"],
}


@pytest.fixture
def dictionary_dir(tmp_path):
    """写入测试用等级表与课本生词"""
    path = tmp_path / "dictionaries"
    path.mkdir()
    (path / "tbcl_data.json").write_text(json.dumps(TBCL, ensure_ascii=False), encoding="utf-8")
    (path / "vocab_by_lesson.json").write_text(json.dumps(LESSONS, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def dict_manager(dictionary_dir):
    """创建测试用词典管理器"""
    dm = DictionaryManager(dictionary_dir)
    dm.load_all()
    return dm
