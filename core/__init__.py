"""
核心处理模块

- build_dictionary: 合并等级表与旧词清单
- SentenceSplitter: 依标点分句
- ForwardMaxMatcher / BackwardMaxMatcher: 正向 / 逆向最大匹配
- select_best_result: 正逆向结果选择
- ContextRuleEngine: 上下文歧义修正
- AdvancedSegmenter: 进阶断词引擎
- VocabAnalyzer: 生词分析
"""
from .dictionary import MAX_WORD_LEN, build_dictionary
from .sentence_splitter import SentenceSplitter, sentence_splitter, normalize_newlines
from .reduplication import is_reduplication
from .matchers import ForwardMaxMatcher, BackwardMaxMatcher, forward_max_match, backward_max_match
from .selector import select_best_result
from .context_rules import ContextRuleEngine, SuffixRule, apply_context_rules
from .segmenter import AdvancedSegmenter, segment, get_default_segmenter
from .vocab_analyzer import VocabAnalyzer, VocabItem, AnalysisResult, is_punctuation

__all__ = [
    "MAX_WORD_LEN",
    "build_dictionary",
    "SentenceSplitter",
    "sentence_splitter",
    "normalize_newlines",
    "is_reduplication",
    "ForwardMaxMatcher",
    "BackwardMaxMatcher",
    "forward_max_match",
    "backward_max_match",
    "select_best_result",
    "ContextRuleEngine",
    "SuffixRule",
    "apply_context_rules",
    "AdvancedSegmenter",
    "segment",
    "get_default_segmenter",
    "VocabAnalyzer",
    "VocabItem",
    "AnalysisResult",
    "is_punctuation",
]
