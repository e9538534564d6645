"""
叠字检测
"""


def is_reduplication(word: str) -> bool:
    """判断是否为 AA（慢慢）或 AABB（高高興興）形式"""
    if len(word) == 2:
        return word[0] == word[1]
    if len(word) == 4:
        return word[0] == word[1] and word[2] == word[3]
    return False
