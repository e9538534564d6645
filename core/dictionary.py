"""
断词字典构建

等级表 {词: 等级} 只用于查等级，断词时只需要成员判断，
所以每次断词前把等级表的键和旧词清单合并成一个集合。
"""
from typing import Iterable, Mapping, Optional, Set


# 最长词长度（正向/逆向匹配共用）
MAX_WORD_LEN = 6


def build_dictionary(
    level_table: Mapping[str, str],
    blocklist: Optional[Iterable[str]] = None
) -> Set[str]:
    """
    合并等级表与已知词清单

    Args:
        level_table: {词: 等级}，等级在这里不使用
        blocklist: 额外的已知词（旧词），可选

    Returns:
        已知词集合
    """
    dictionary = set(level_table.keys())
    if blocklist:
        dictionary.update(blocklist)
    return dictionary
