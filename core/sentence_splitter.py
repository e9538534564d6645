"""
分句模块

依标点、空白、数字把长文本切成短句，每句独立断词，
避免长句让匹配范围过大。切出来的标点段原样保留。
"""
import re
from typing import List


# 中文标点、空白、ASCII 数字组成的分隔段
DELIMITER_CHARS = "。，、；：！？「」『』（）《》…—"
DELIMITER_PATTERN = re.compile(r"([" + DELIMITER_CHARS + r"\s0-9]+)")
_DELIMITER_RUN = re.compile(r"[" + DELIMITER_CHARS + r"\s0-9]+")


def normalize_newlines(text: str) -> str:
    """统一换行符 (\\r\\n -> \\n)"""
    return text.replace("\r\n", "\n")


class SentenceSplitter:
    """分句器"""

    def split(self, text: str) -> List[str]:
        """
        切分文本，分隔段与句子交错保留

        Args:
            text: 原始文本

        Returns:
            按原顺序排列的片段，''.join(结果) == 换行规范化后的文本
        """
        if not text:
            return []
        parts = DELIMITER_PATTERN.split(normalize_newlines(text))
        return [part for part in parts if part]

    def is_delimiter(self, part: str) -> bool:
        """是否为直接透传的片段（标点/空白/数字）"""
        if not part.strip():
            return True
        return _DELIMITER_RUN.fullmatch(part) is not None


# 单例
sentence_splitter = SentenceSplitter()
