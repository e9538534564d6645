"""
进阶中文断词引擎（含上下文歧义修正）

处理流程：
文本 → 建字典 → 换行规范化 → 分句 →
每句：正向匹配 + 逆向匹配 → 选择 → [上下文规则] → 按原顺序拼接
"""
from typing import AbstractSet, Iterable, List, Mapping, Optional

from .dictionary import MAX_WORD_LEN, build_dictionary
from .sentence_splitter import sentence_splitter, normalize_newlines
from .matchers import ForwardMaxMatcher, BackwardMaxMatcher
from .selector import select_best_result
from .context_rules import ContextRuleEngine, DEFAULT_PARTICLE


class AdvancedSegmenter:
    """进阶断词器，本身不保存跨调用的状态"""

    def __init__(
        self,
        max_word_len: int = MAX_WORD_LEN,
        particle: str = DEFAULT_PARTICLE,
        rule_engine: Optional[ContextRuleEngine] = None
    ):
        self.splitter = sentence_splitter
        self.forward = ForwardMaxMatcher(max_word_len)
        self.backward = BackwardMaxMatcher(max_word_len)
        self.rule_engine = rule_engine or ContextRuleEngine(particle=particle)

    def segment(
        self,
        text: str,
        level_table: Mapping[str, str],
        blocklist: Optional[Iterable[str]] = None,
        split_sentence: bool = True,
        use_grammar_rules: bool = True
    ) -> List[str]:
        """
        主要断词函数

        Args:
            text: 待分析文本
            level_table: 词汇等级表 {词: 等级}
            blocklist: 旧词清单（可选），同样视为已知词
            split_sentence: 是否先依标点切分句子
            use_grammar_rules: 是否使用上下文规则修正

        Returns:
            断词结果，拼起来等于换行规范化后的原文
        """
        if not text:
            return []

        # 每次重建，确保等级表和旧词都能被匹配到
        dictionary = build_dictionary(level_table, blocklist)

        if not split_sentence:
            return self.process_sentence(normalize_newlines(text), dictionary, use_grammar_rules)

        words = []
        for part in self.splitter.split(text):
            if self.splitter.is_delimiter(part):
                words.append(part)  # 保留标点
                continue
            words.extend(self.process_sentence(part, dictionary, use_grammar_rules))
        return words

    def process_sentence(
        self,
        sentence: str,
        dictionary: AbstractSet[str],
        use_rules: bool = True
    ) -> List[str]:
        """单句断词"""
        if not sentence:
            return []

        fmm = self.forward.match(sentence, dictionary)
        bmm = self.backward.match(sentence, dictionary)
        result = select_best_result(fmm, bmm)

        if use_rules:
            result = self.rule_engine.apply(result, dictionary)
        return list(result)


_default_segmenter: Optional[AdvancedSegmenter] = None


def get_default_segmenter() -> AdvancedSegmenter:
    """获取默认断词器实例"""
    global _default_segmenter
    if _default_segmenter is None:
        _default_segmenter = AdvancedSegmenter()
    return _default_segmenter


def segment(
    text: str,
    level_table: Mapping[str, str],
    blocklist: Optional[Iterable[str]] = None,
    split_sentence: bool = True,
    use_grammar_rules: bool = True
) -> List[str]:
    """便捷函数：使用默认断词器"""
    return get_default_segmenter().segment(
        text,
        level_table,
        blocklist,
        split_sentence=split_sentence,
        use_grammar_rules=use_grammar_rules
    )
