"""
生词分析
断词后过滤标点和旧词、去重，并标上词汇等级

另外提供结果的手动调整：
- 与下一个词合并
- 手动切分单个词
"""
import re
from dataclasses import dataclass, asdict
from typing import Dict, Iterable, List, Optional

from .tokenizers import AdvancedTokenizer, ChineseTokenizer


# 标点、空白、数字、英文字母组成的词不算生词
_PUNCTUATION_PATTERN = re.compile(r"^[。，、；：！？「」『』（）《》…—\sA-Za-z0-9_]+$")


def is_punctuation(text: str) -> bool:
    return _PUNCTUATION_PATTERN.match(text) is not None


@dataclass
class VocabItem:
    """生词"""
    word: str
    level: str = "0"


@dataclass
class AnalysisResult:
    """分析结果"""
    items: List[VocabItem]
    char_count: int

    @property
    def new_word_count(self) -> int:
        return len(self.items)

    def to_dict(self) -> Dict:
        return {
            "items": [asdict(item) for item in self.items],
            "char_count": self.char_count,
            "new_word_count": self.new_word_count,
        }


class VocabAnalyzer:
    """生词分析器"""

    def __init__(
        self,
        dictionary_manager,
        advanced: Optional[AdvancedTokenizer] = None,
        baseline: Optional[ChineseTokenizer] = None
    ):
        self.dict_manager = dictionary_manager
        self.advanced = advanced or AdvancedTokenizer(dictionary_manager)
        self._baseline = baseline

    @property
    def baseline(self) -> ChineseTokenizer:
        """jieba 加载较慢，第一次用到才初始化"""
        if self._baseline is None:
            self._baseline = ChineseTokenizer(self.dict_manager)
        return self._baseline

    def segment(
        self,
        text: str,
        blocklist: Optional[Iterable[str]] = None,
        use_advanced: bool = True,
        use_grammar_rules: Optional[bool] = None,
        split_sentence: Optional[bool] = None
    ) -> List[str]:
        """只断词，不过滤；两个开关为 None 时沿用分词器的预设值"""
        if not use_advanced:
            return self.baseline.tokenize(text, blocklist)

        return self.advanced.tokenize(
            text,
            blocklist,
            split_sentence=split_sentence,
            use_grammar_rules=use_grammar_rules
        )

    def analyze(
        self,
        text: str,
        blocklist: Optional[Iterable[str]] = None,
        use_advanced: bool = True,
        use_grammar_rules: Optional[bool] = None,
        split_sentence: Optional[bool] = None
    ) -> AnalysisResult:
        """
        分析文本中的生词

        Args:
            text: 待分析文本
            blocklist: 旧词清单，这些词不列入结果
            use_advanced: 使用字典断词（否则用 jieba）
            use_grammar_rules: 是否使用上下文规则，None 用预设值
            split_sentence: 是否先分句，None 用预设值

        Returns:
            AnalysisResult
        """
        if not text or not text.strip():
            raise ValueError("text is empty")

        blocked = set(blocklist or ())
        words = self.segment(text, blocked, use_advanced, use_grammar_rules, split_sentence)

        items = []
        seen = set()
        for word in words:
            if not word.strip() or is_punctuation(word):
                continue
            if word in blocked or word in seen:
                continue
            seen.add(word)
            items.append(self._make_item(word))

        return AnalysisResult(items=items, char_count=len(text))

    def _make_item(self, word: str) -> VocabItem:
        return VocabItem(word=word, level=self.dict_manager.get_level(word))

    def merge_with_next(self, items: List[VocabItem], index: int) -> List[VocabItem]:
        """把第 index 个词与下一个词合并，重新查等级"""
        if index < 0 or index >= len(items) - 1:
            raise IndexError(f"cannot merge item {index} of {len(items)}")

        merged = self._make_item(items[index].word + items[index + 1].word)
        return list(items[:index]) + [merged] + list(items[index + 2:])

    def split_item(
        self,
        items: List[VocabItem],
        index: int,
        pieces: str,
        force: bool = False
    ) -> List[VocabItem]:
        """
        手动切分单个词

        Args:
            items: 当前结果
            index: 要切分的词
            pieces: 以空白分隔的新词，如 "看 書"
            force: 新词拼起来与原词不符时仍然套用
        """
        if index < 0 or index >= len(items):
            raise IndexError(f"no item at {index}")

        new_words = [w for w in pieces.split() if w.strip()]
        if not new_words:
            return list(items)

        original = items[index].word
        combined = "".join(new_words)
        if combined != original and not force:
            raise ValueError(f"「{combined}」与原词「{original}」不符")

        replacement = [self._make_item(w) for w in new_words]
        return list(items[:index]) + replacement + list(items[index + 1:])

    @staticmethod
    def format_text(items: List[VocabItem]) -> str:
        """复制用的纯文本格式"""
        return "\n".join(
            f"{i + 1}. {item.word} (Level {item.level})"
            for i, item in enumerate(items)
        )
