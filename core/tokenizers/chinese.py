"""
基础中文分词器（jieba）

不使用字典断词规则时的备用方案。
"""
from typing import Iterable, List, Optional
from core.tokenizers.base import BaseTokenizer

_jieba = None


def get_jieba():
    global _jieba
    if _jieba is None:
        import jieba
        jieba.setLogLevel(20)
        _jieba = jieba
    return _jieba


class ChineseTokenizer(BaseTokenizer):
    """中文分词器"""

    def __init__(self, dictionary_manager=None):
        super().__init__(dictionary_manager)
        self.jieba = get_jieba()

        # 将词典中的词添加到jieba
        if dictionary_manager:
            self._load_custom_words(dictionary_manager)

    def _load_custom_words(self, dict_manager):
        """从词典加载自定义词"""
        for word in dict_manager.get_all_words_for_tokenizer():
            if len(word) > 1:  # 只添加多字词
                self.jieba.add_word(word)

    def tokenize(self, text: str, blocklist: Optional[Iterable[str]] = None) -> List[str]:
        """中文分词，旧词清单不影响 jieba 的结果"""
        if not text:
            return []
        return [word for word in self.jieba.lcut(text.replace("\r\n", "\n")) if word]

