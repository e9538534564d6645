"""
最大匹配断词

- ForwardMaxMatcher: 正向最大匹配（从左到右，贪婪）
- BackwardMaxMatcher: 逆向最大匹配（从右到左，贪婪）

两者都保证完整覆盖：每步至少前进一个字，找不到词时退回单字。
"""
from abc import ABC, abstractmethod
from typing import AbstractSet, List

from .dictionary import MAX_WORD_LEN
from .reduplication import is_reduplication


class MaxMatcher(ABC):
    """最大匹配基类"""

    def __init__(self, max_word_len: int = MAX_WORD_LEN):
        if max_word_len < 1:
            raise ValueError(f"max_word_len must be >= 1, got {max_word_len}")
        self.max_word_len = max_word_len

    @abstractmethod
    def match(self, text: str, dictionary: AbstractSet[str]) -> List[str]:
        """对单句断词"""
        pass


class ForwardMaxMatcher(MaxMatcher):
    """正向最大匹配"""

    def match(self, text: str, dictionary: AbstractSet[str]) -> List[str]:
        result = []
        index = 0
        length = len(text)

        while index < length:
            match = None
            # 从最长可能的词开始尝试
            for size in range(min(length - index, self.max_word_len), 1, -1):
                sub = text[index:index + size]
                # 字典没有，但符合 AA / AABB 叠字，也视为词
                if sub in dictionary or is_reduplication(sub):
                    match = sub
                    break

            if match is None:
                match = text[index]  # 兜底：单字
            result.append(match)
            index += len(match)

        return result


class BackwardMaxMatcher(MaxMatcher):
    """
    逆向最大匹配

    不处理叠字，只认字典词。
    """

    def match(self, text: str, dictionary: AbstractSet[str]) -> List[str]:
        result = []
        index = len(text)

        while index > 0:
            match = None
            for size in range(min(index, self.max_word_len), 1, -1):
                sub = text[index - size:index]
                if sub in dictionary:
                    match = sub
                    break

            if match is None:
                match = text[index - 1]
            result.append(match)
            index -= len(match)

        # 倒序收集，最后翻回从左到右
        result.reverse()
        return result


def forward_max_match(text: str, dictionary: AbstractSet[str], max_word_len: int = MAX_WORD_LEN) -> List[str]:
    return ForwardMaxMatcher(max_word_len).match(text, dictionary)


def backward_max_match(text: str, dictionary: AbstractSet[str], max_word_len: int = MAX_WORD_LEN) -> List[str]:
    return BackwardMaxMatcher(max_word_len).match(text, dictionary)
