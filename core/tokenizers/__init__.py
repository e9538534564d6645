"""
分词器模块
"""
from core.tokenizers.base import BaseTokenizer
from core.tokenizers.advanced import AdvancedTokenizer
from core.tokenizers.chinese import ChineseTokenizer


def get_tokenizer(name: str = "advanced", dictionary_manager=None, **kwargs) -> BaseTokenizer:
    """按名称获取分词器：advanced（字典断词）或 baseline（jieba）"""
    if name == "advanced":
        return AdvancedTokenizer(dictionary_manager, **kwargs)
    if name == "baseline":
        return ChineseTokenizer(dictionary_manager)
    raise ValueError(f"Unknown tokenizer: {name}")


__all__ = [
    "BaseTokenizer",
    "AdvancedTokenizer",
    "ChineseTokenizer",
    "get_tokenizer",
]
