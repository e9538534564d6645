"""
正向 / 逆向结果选择

原则：词数越少越好（粒度），单字越少越好，平手取逆向结果。
"""
from typing import List


def count_single_chars(words: List[str]) -> int:
    """单字词数量"""
    return sum(1 for w in words if len(w) == 1)


def select_best_result(fmm: List[str], bmm: List[str]) -> List[str]:
    """
    选择最佳断词结果

    Args:
        fmm: 正向最大匹配结果
        bmm: 逆向最大匹配结果（同一句）

    Returns:
        选中的结果（原列表对象，不复制）
    """
    if len(fmm) != len(bmm):
        return fmm if len(fmm) < len(bmm) else bmm

    fmm_single = count_single_chars(fmm)
    bmm_single = count_single_chars(bmm)
    if fmm_single != bmm_single:
        return fmm if fmm_single < bmm_single else bmm

    # 默认回传逆向（通常 BMM 对中文准确度略高）
    return bmm
