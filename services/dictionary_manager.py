"""
词典管理器
负责加载词汇等级表与课本生词，提供断词用的等级表
"""
import json
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Set


# 预设已知词（确保这些词不被切开）
DEFAULT_KNOWN_WORDS = ("紅色", "護龍", "還都", "看書", "吃飯", "一定")

UNKNOWN_LEVEL = "0"


class DictionaryManager:
    """词典管理器"""

    def __init__(
        self,
        dictionary_path: Path,
        tbcl_file: str = "tbcl_data.json",
        lesson_file: str = "vocab_by_lesson.json",
        default_known_words=DEFAULT_KNOWN_WORDS
    ):
        self.dictionary_path = Path(dictionary_path)
        self.tbcl_file = tbcl_file
        self.lesson_file = lesson_file
        self.default_known_words = tuple(default_known_words)

        self._levels: Dict[str, str] = {}
        self._lessons: Dict[str, List[str]] = {}
        self._known_words: Set[str] = set(self.default_known_words)
        self._loaded = False
        self._lock = threading.Lock()

    def load_all(self):
        """加载等级表和课本生词"""
        with self._lock:
            levels = self._load_json(self.tbcl_file, "等级表")
            lessons = self._load_json(self.lesson_file, "课本生词")

            self._levels = {
                str(word): str(level)
                for word, level in levels.items()
                if word
            }
            self._lessons = {
                str(lesson): [w for w in words if isinstance(w, str) and w]
                for lesson, words in lessons.items()
                if isinstance(words, list)
            }

            # 所有课本生词都加入已知词汇库
            self._known_words = set(self.default_known_words)
            for words in self._lessons.values():
                self._known_words.update(words)

            self._loaded = True

    def _load_json(self, file_name: str, label: str) -> Dict:
        """加载单个 JSON 文件，失败时返回空字典"""
        full_path = self.dictionary_path / file_name
        if not full_path.exists():
            print(f"  ⚠️ {label}不存在: {full_path}")
            return {}

        try:
            with open(full_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            print(f"  ✗ 加载{label} {file_name} 失败: {e}")
            return {}

        if not isinstance(data, dict):
            print(f"  ✗ {label} {file_name} 格式错误: 顶层必须是对象")
            return {}

        print(f"  ✓ 加载{label} {file_name}: {len(data)} 条")
        return data

    def reload_all(self):
        """重新加载所有词典"""
        self.load_all()

    def is_loaded(self) -> bool:
        """检查词典是否已加载"""
        return self._loaded

    def get_stats(self) -> Dict:
        """获取词典统计信息"""
        return {
            "levels": len(self._levels),
            "lessons": len(self._lessons),
            "lesson_words": sum(len(words) for words in self._lessons.values()),
            "known_words": len(self._known_words),
        }

    @property
    def level_table(self) -> Mapping[str, str]:
        """只读等级表 {词: 等级}"""
        return MappingProxyType(self._levels)

    @property
    def lessons(self) -> Mapping[str, List[str]]:
        """只读课本生词 {课: [词]}"""
        return MappingProxyType(self._lessons)

    @property
    def known_words(self) -> frozenset:
        return frozenset(self._known_words)

    def get_level(self, word: str) -> str:
        """查词汇等级，未收录返回 "0" """
        return self._levels.get(word) or UNKNOWN_LEVEL

    def get_lesson_words(self, lesson: str) -> List[str]:
        return list(self._lessons.get(lesson, []))

    def build_segment_table(self) -> Dict[str, str]:
        """断词用等级表：已知词不在等级表里的补上等级 "0" """
        table = dict(self._levels)
        for word in self._known_words:
            if not table.get(word):
                table[word] = UNKNOWN_LEVEL
        return table

    def get_all_words_for_tokenizer(self) -> List[str]:
        """获取所有词（用于添加到分词器自定义词典）"""
        return sorted(set(self._levels) | self._known_words)

    def search(self, word: str, limit: Optional[int] = 50) -> Dict:
        """搜索包含该字串的词"""
        results = []
        for entry_word, level in self._levels.items():
            if word in entry_word:
                results.append({"word": entry_word, "level": level})
                if limit and len(results) >= limit:
                    break
        return {"results": results, "count": len(results)}
