"""
分词器基类
"""
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional


class BaseTokenizer(ABC):
    """分词器基类"""

    def __init__(self, dictionary_manager=None):
        self.dict_manager = dictionary_manager

    @abstractmethod
    def tokenize(self, text: str, blocklist: Optional[Iterable[str]] = None) -> List[str]:
        """分词"""
        pass

