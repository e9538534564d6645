"""
生词分析会话

保存使用者勾选的课数与手动补充的旧词，两者合并成断词时的旧词清单。

课数以冊别分组（B1 ~ B6），支持：
- 单课勾选 / 全选 / 全不选
- 累积选择：选到某一冊为止
- 单冊开关
手动补充的旧词存成 JSON 列表，修改后立即保存。
"""
import json
import re
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Set


# 冊别顺序
BOOK_ORDER = ("B1", "B2", "B3", "B4", "B5", "B6")

_BOOK_PATTERN = re.compile(r"^(B\d+)")
_VOCAB_SEPARATORS = re.compile(r"[\n,、\s]+")


def book_of(lesson: str) -> Optional[str]:
    """课数所属冊别，如 B1L3 -> B1"""
    match = _BOOK_PATTERN.match(lesson)
    return match.group(1) if match else None


def natural_key(text: str):
    """自然排序：B1L2 排在 B1L10 前面"""
    return [int(part) if part.isdigit() else part for part in re.split(r"(\d+)", text)]


@dataclass
class BookGroup:
    """冊别分组"""
    book: str
    lessons: List[str]
    selected: List[str] = field(default_factory=list)

    @property
    def status(self) -> str:
        """all / partial / none"""
        if not self.selected:
            return "none"
        if len(self.selected) == len(self.lessons):
            return "all"
        return "partial"


class VocabSession:
    """生词分析会话"""

    def __init__(self, dict_manager, custom_vocab_path: Optional[Path] = None):
        """
        Args:
            dict_manager: 词典管理器（提供课本生词）
            custom_vocab_path: 补充旧词存储路径，None 表示不保存
        """
        self.dict_manager = dict_manager
        self.custom_vocab_path = Path(custom_vocab_path) if custom_vocab_path else None

        self.selected_lessons: Set[str] = set()
        self.custom_old_vocab: Set[str] = set()
        self._known_lessons: Set[str] = set(dict_manager.lessons.keys())
        self._lock = threading.RLock()

        # 预设全选
        self.toggle_all(True)
        self._load_custom_vocab()

    # ---------- 课数选择 ----------

    def set_lesson(self, lesson: str, checked: bool) -> bool:
        """勾选 / 取消单课，课数不存在返回 False"""
        if lesson not in self.dict_manager.lessons:
            return False
        with self._lock:
            if checked:
                self.selected_lessons.add(lesson)
            else:
                self.selected_lessons.discard(lesson)
        return True

    def toggle_all(self, checked: bool):
        with self._lock:
            self.selected_lessons.clear()
            if checked:
                self.selected_lessons.update(self.dict_manager.lessons.keys())

    def sync_lessons(self):
        """
        词典重新加载后同步课数

        已删除的课数移出勾选，新出现的课数预设勾选，其余保留原本的选择
        """
        current = set(self.dict_manager.lessons.keys())
        with self._lock:
            added = current - self._known_lessons
            self.selected_lessons &= current
            self.selected_lessons |= added
            self._known_lessons = current

    def select_up_to(self, target_book: str) -> bool:
        """选到某一冊为止（含），之后的冊全部取消"""
        if target_book not in BOOK_ORDER:
            return False
        target_index = BOOK_ORDER.index(target_book)

        with self._lock:
            for lesson in self.dict_manager.lessons:
                book = book_of(lesson)
                if book not in BOOK_ORDER:
                    continue
                if BOOK_ORDER.index(book) <= target_index:
                    self.selected_lessons.add(lesson)
                else:
                    self.selected_lessons.discard(lesson)
        return True

    def toggle_book(self, target_book: str) -> bool:
        """单冊开关：整冊已全选则全部取消，否则全选"""
        lessons = [l for l in self.dict_manager.lessons if book_of(l) == target_book]
        if not lessons:
            return False

        with self._lock:
            all_checked = all(l in self.selected_lessons for l in lessons)
            for lesson in lessons:
                if all_checked:
                    self.selected_lessons.discard(lesson)
                else:
                    self.selected_lessons.add(lesson)
        return True

    def books(self) -> List[BookGroup]:
        """按冊别顺序分组，空冊略过"""
        groups = {book: [] for book in BOOK_ORDER}
        for lesson in self.dict_manager.lessons:
            book = book_of(lesson)
            if book in groups:
                groups[book].append(lesson)

        result = []
        with self._lock:
            for book in BOOK_ORDER:
                lessons = sorted(groups[book], key=natural_key)
                if not lessons:
                    continue
                result.append(BookGroup(
                    book=book,
                    lessons=lessons,
                    selected=[l for l in lessons if l in self.selected_lessons]
                ))
        return result

    # ---------- 补充旧词 ----------

    def add_custom_vocab(self, text: str) -> int:
        """
        新增补充旧词

        Args:
            text: 以换行、逗号、顿号或空白分隔的词

        Returns:
            实际新增的数量
        """
        words = [w.strip() for w in _VOCAB_SEPARATORS.split(text or "")]
        added = 0
        with self._lock:
            for word in words:
                if word and word not in self.custom_old_vocab:
                    self.custom_old_vocab.add(word)
                    added += 1
            if added:
                self._save_custom_vocab()
        return added

    def list_custom_vocab(self) -> List[str]:
        with self._lock:
            return sorted(self.custom_old_vocab)

    def clear_custom_vocab(self):
        with self._lock:
            self.custom_old_vocab.clear()
            self._save_custom_vocab()

    def _load_custom_vocab(self):
        """加载补充旧词"""
        if self.custom_vocab_path is None or not self.custom_vocab_path.exists():
            return
        try:
            with open(self.custom_vocab_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            self.custom_old_vocab.update(w for w in data if isinstance(w, str) and w)
        except (OSError, ValueError, TypeError) as e:
            print(f"⚠️ 加载补充旧词失败: {e}")

    def _save_custom_vocab(self):
        """保存补充旧词"""
        if self.custom_vocab_path is None:
            return
        try:
            self.custom_vocab_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.custom_vocab_path, 'w', encoding='utf-8') as f:
                json.dump(sorted(self.custom_old_vocab), f, ensure_ascii=False, indent=2)
        except OSError as e:
            print(f"⚠️ 保存补充旧词失败: {e}")

    # ---------- 旧词清单 ----------

    @property
    def blocklist(self) -> Set[str]:
        """已勾选课数的生词 + 补充旧词"""
        with self._lock:
            words = set(self.custom_old_vocab)
            for lesson in self.selected_lessons:
                words.update(self.dict_manager.get_lesson_words(lesson))
        return words

    def get_stats(self) -> Dict:
        with self._lock:
            return {
                "selected_lessons": len(self.selected_lessons),
                "custom_old_vocab": len(self.custom_old_vocab),
                "blocklist": len(self.blocklist),
            }

