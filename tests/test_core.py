"""
基础组件测试：字典、分句、叠字、正逆向匹配、结果选择
"""
import pytest

from core.dictionary import build_dictionary, MAX_WORD_LEN
from core.sentence_splitter import SentenceSplitter, normalize_newlines
from core.reduplication import is_reduplication
from core.matchers import ForwardMaxMatcher, BackwardMaxMatcher, forward_max_match, backward_max_match
from core.selector import select_best_result, count_single_chars


class TestDictionaryBuilder:
    """字典构建测试"""

    def test_merge_table_and_blocklist(self):
        """测试等级表与旧词合并"""
        dictionary = build_dictionary({"開心": "2", "紅": "1"}, {"看書", "紅"})
        assert dictionary == {"開心", "紅", "看書"}

    def test_without_blocklist(self):
        """测试没有旧词清单"""
        assert build_dictionary({"我": "1"}) == {"我"}
        assert build_dictionary({"我": "1"}, None) == {"我"}

    def test_empty_inputs(self):
        """测试空输入"""
        assert build_dictionary({}) == set()
        assert build_dictionary({}, []) == set()

    def test_does_not_mutate_inputs(self):
        """测试不修改输入"""
        table = {"我": "1"}
        blocklist = ["們"]
        build_dictionary(table, blocklist)
        assert table == {"我": "1"}
        assert blocklist == ["們"]


class TestSentenceSplitter:
    """分句测试"""

    def setup_method(self):
        self.splitter = SentenceSplitter()

    def test_keep_punctuation(self):
        """测试保留标点"""
        assert self.splitter.split("我們好。你好") == ["我們好", "。", "你好"]

    def test_leading_delimiter(self):
        """测试开头是标点"""
        assert self.splitter.split("，開始") == ["，", "開始"]

    def test_delimiter_runs(self):
        """测试连续分隔字符合成一段"""
        assert self.splitter.split("好！」 「對") == ["好", "！」 「", "對"]

    def test_digits_are_delimiters(self):
        """测试数字切开句子"""
        assert self.splitter.split("第3課") == ["第", "3", "課"]

    def test_normalize_crlf(self):
        """测试换行规范化"""
        assert self.splitter.split("甲\r\n乙") == ["甲", "\n", "乙"]
        assert normalize_newlines("a\r\nb\rc") == "a\nb\rc"

    def test_lossless(self):
        """测试切分后可还原"""
        text = "今天天氣很好，我們去學校。\r\n明天  2024年《書》"
        assert "".join(self.splitter.split(text)) == normalize_newlines(text)

    def test_empty(self):
        """测试空文本"""
        assert self.splitter.split("") == []

    def test_is_delimiter(self):
        """测试透传判断"""
        assert self.splitter.is_delimiter("。")
        assert self.splitter.is_delimiter("  \n")
        assert self.splitter.is_delimiter("2024")
        assert not self.splitter.is_delimiter("我們")
        assert not self.splitter.is_delimiter("Hello")


class TestReduplication:
    """叠字测试"""

    def test_aa(self):
        assert is_reduplication("慢慢")
        assert not is_reduplication("慢走")

    def test_aabb(self):
        assert is_reduplication("高高興興")
        assert is_reduplication("天天天天")
        assert not is_reduplication("高興高興")

    def test_other_lengths(self):
        assert not is_reduplication("")
        assert not is_reduplication("慢")
        assert not is_reduplication("慢慢慢")


class TestMatchers:
    """正向 / 逆向最大匹配测试"""

    def setup_method(self):
        self.dictionary = {"研究", "研究生", "生命", "起源"}

    def test_forward(self):
        """测试正向最大匹配"""
        assert forward_max_match("研究生命起源", self.dictionary) == ["研究生", "命", "起源"]

    def test_backward(self):
        """测试逆向最大匹配"""
        assert backward_max_match("研究生命起源", self.dictionary) == ["研究", "生命", "起源"]

    def test_empty_dictionary(self):
        """测试空字典退回单字"""
        assert forward_max_match("你好嗎", set()) == ["你", "好", "嗎"]
        assert backward_max_match("你好嗎", set()) == ["你", "好", "嗎"]

    def test_empty_text(self):
        assert forward_max_match("", self.dictionary) == []
        assert backward_max_match("", self.dictionary) == []

    def test_forward_reduplication(self):
        """测试正向匹配接受字典外的叠字"""
        assert forward_max_match("慢慢", set()) == ["慢慢"]
        assert forward_max_match("高高興興", set()) == ["高高興興"]
        assert forward_max_match("看看書", set()) == ["看看", "書"]

    def test_backward_ignores_reduplication(self):
        """测试逆向匹配不处理叠字"""
        assert backward_max_match("慢慢", set()) == ["慢", "慢"]
        assert backward_max_match("高高興興", set()) == ["高", "高", "興", "興"]

    def test_max_word_len(self):
        """测试最长词长度限制"""
        matcher = ForwardMaxMatcher(max_word_len=2)
        assert matcher.match("研究生", {"研究生"}) == ["研", "究", "生"]
        assert BackwardMaxMatcher(max_word_len=2).match("研究生", {"研究生"}) == ["研", "究", "生"]

    def test_longer_than_default_not_matched(self):
        """测试超过 6 字的词不会被匹配"""
        word = "中華民國國防部"
        assert len(word) > MAX_WORD_LEN
        assert forward_max_match(word, {word}) != [word]

    def test_invalid_max_word_len(self):
        """测试非法配置"""
        with pytest.raises(ValueError):
            ForwardMaxMatcher(max_word_len=0)
        with pytest.raises(ValueError):
            BackwardMaxMatcher(max_word_len=-1)

    @pytest.mark.parametrize("text", [
        "研究生命起源",
        "今天天氣很好",
        "高高興興地去學校",
        "我",
    ])
    def test_full_coverage(self, text):
        """测试完整覆盖"""
        for words in (forward_max_match(text, self.dictionary), backward_max_match(text, self.dictionary)):
            assert "".join(words) == text
            assert all(len(w) >= 1 for w in words)
            assert sum(len(w) for w in words) == len(text)


class TestSelector:
    """结果选择测试"""

    def test_fewer_words_wins(self):
        """测试词数少的优先"""
        fmm = ["研究生", "命起源"]
        bmm = ["研究", "生命", "起源"]
        assert select_best_result(fmm, bmm) is fmm
        assert select_best_result(bmm, fmm) is fmm

    def test_fewer_single_chars_wins(self):
        """测试词数相同时单字少的优先"""
        fmm = ["研究生", "命", "起源"]
        bmm = ["研究", "生命", "起源"]
        assert select_best_result(fmm, bmm) is bmm

    def test_tie_returns_backward(self):
        """测试完全平手时取逆向结果"""
        fmm = ["開心", "地"]
        bmm = ["開", "心地"]
        assert select_best_result(fmm, bmm) is bmm

    def test_deterministic(self):
        a = ["我", "們"]
        b = ["我們"]
        assert select_best_result(a, b) == select_best_result(a, b) == ["我們"]

    def test_count_single_chars(self):
        assert count_single_chars(["我", "們", "開心"]) == 2
        assert count_single_chars([]) == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
