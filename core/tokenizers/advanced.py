"""
进阶分词器

把等级表、已知词和旧词清单交给 AdvancedSegmenter。
"""
from typing import Iterable, List, Optional
from core.tokenizers.base import BaseTokenizer
from core.segmenter import AdvancedSegmenter


class AdvancedTokenizer(BaseTokenizer):
    """字典断词 + 上下文规则"""

    def __init__(
        self,
        dictionary_manager=None,
        segmenter: Optional[AdvancedSegmenter] = None,
        split_sentence: bool = True,
        use_grammar_rules: bool = True
    ):
        super().__init__(dictionary_manager)
        self.segmenter = segmenter or AdvancedSegmenter()
        self.split_sentence = split_sentence
        self.use_grammar_rules = use_grammar_rules

    def tokenize(
        self,
        text: str,
        blocklist: Optional[Iterable[str]] = None,
        split_sentence: Optional[bool] = None,
        use_grammar_rules: Optional[bool] = None
    ) -> List[str]:
        """split_sentence / use_grammar_rules 为 None 时用实例预设值"""
        if not text:
            return []
        if split_sentence is None:
            split_sentence = self.split_sentence
        if use_grammar_rules is None:
            use_grammar_rules = self.use_grammar_rules

        table = self.dict_manager.build_segment_table() if self.dict_manager else {}
        return self.segmenter.segment(
            text,
            table,
            blocklist,
            split_sentence=split_sentence,
            use_grammar_rules=use_grammar_rules
        )
