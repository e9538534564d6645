"""
上下文歧义修正规则

在选定的断词结果上依序执行三条规则，每条只扫一遍：
1. 助词「地」修正：[開, 心地] -> [開心, 地]
2. 强制拆分：[還都] -> [還, 都]
3. 后缀合并：[紅, 色] -> [紅色]，[我, 們] -> [我們]

规则只调整词边界，不增删字；若某条规则的输出与输入拼起来不一致，
丢弃该规则的输出。
"""
from dataclasses import dataclass
from typing import AbstractSet, Callable, Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class SuffixRule:
    """后缀合并规则"""
    suffix: str
    prev_length: Optional[int] = None  # 前词必须的长度，None 表示不限

    def accepts(self, prev: str) -> bool:
        if self.prev_length is None:
            return True
        return len(prev) == self.prev_length


DEFAULT_PARTICLE = "地"

# 「還都」在字典里（历史名词），但一般文章里 99% 是「還」+「都」
DEFAULT_SPLIT_TARGETS: Tuple[str, ...] = ("還都",)

DEFAULT_SUFFIX_RULES: Tuple[SuffixRule, ...] = (
    SuffixRule("色", prev_length=1),  # 紅色、綠色、藍色
    SuffixRule("們"),                 # 我們、同學們
)


def fix_particle_ambiguity(
    words: List[str],
    dictionary: AbstractSet[str],
    particle: str = DEFAULT_PARTICLE
) -> List[str]:
    """
    修正助词歧义：AB + C地 vs A + BC地

    若后词是「X地」且 前词 + X 是已知词，改切成 [前词X, 地]。
    被改写的后词不能再当下一个词的前词。
    """
    if len(words) < 2:
        return list(words)

    result = []
    prev_available = False
    for i, curr in enumerate(words):
        prev = words[i - 1] if i > 0 and prev_available else None

        if prev is not None and len(curr) == 2 and curr.endswith(particle):
            candidate = prev + curr[0]  # e.g. 開 + 心 = 開心
            if candidate in dictionary:
                result.pop()  # 移除已加入的 prev
                result.append(candidate)
                result.append(particle)
                prev_available = False
                continue

        result.append(curr)
        prev_available = True
    return result


def split_specific_words(words: List[str], targets: Iterable[str]) -> List[str]:
    """强制把指定的词拆成单字"""
    targets = set(targets)
    result = []
    for word in words:
        if word in targets:
            result.extend(word)
        else:
            result.append(word)
    return result


def merge_suffix_rules(words: List[str], rules: Iterable[SuffixRule] = DEFAULT_SUFFIX_RULES) -> List[str]:
    """
    后缀合并

    看的是已输出的最后一个词，所以可以连续合并。
    """
    if len(words) < 2:
        return list(words)

    rule_map = {rule.suffix: rule for rule in rules}
    result = [words[0]]
    for curr in words[1:]:
        rule = rule_map.get(curr)
        if rule is not None and rule.accepts(result[-1]):
            result[-1] = result[-1] + curr
        else:
            result.append(curr)
    return result


class ContextRuleEngine:
    """上下文规则引擎"""

    def __init__(
        self,
        particle: str = DEFAULT_PARTICLE,
        split_targets: Iterable[str] = DEFAULT_SPLIT_TARGETS,
        suffix_rules: Iterable[SuffixRule] = DEFAULT_SUFFIX_RULES
    ):
        if len(particle) != 1:
            raise ValueError(f"particle must be a single character, got {particle!r}")
        self.particle = particle
        self.split_targets = tuple(split_targets)
        self.suffix_rules = tuple(suffix_rules)

    def rules(self, dictionary: AbstractSet[str]) -> List[Tuple[str, Callable[[List[str]], List[str]]]]:
        """按固定顺序返回 (名称, 规则函数)"""
        return [
            ("particle", lambda ws: fix_particle_ambiguity(ws, dictionary, self.particle)),
            ("split", lambda ws: split_specific_words(ws, self.split_targets)),
            ("suffix", lambda ws: merge_suffix_rules(ws, self.suffix_rules)),
        ]

    def apply(self, words: List[str], dictionary: AbstractSet[str]) -> List[str]:
        """
        依序执行所有规则

        Args:
            words: 一句的断词结果
            dictionary: 已知词集合

        Returns:
            修正后的断词结果
        """
        result = list(words)
        for name, rule in self.rules(dictionary):
            rewritten = rule(result)
            if "".join(rewritten) != "".join(result):
                print(f"⚠️ 规则 {name} 改变了原文，已忽略: {result} -> {rewritten}")
                continue
            result = rewritten
        return result


def apply_context_rules(words: List[str], dictionary: AbstractSet[str]) -> List[str]:
    """便捷函数：使用默认规则"""
    return ContextRuleEngine().apply(words, dictionary)
