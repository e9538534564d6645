"""
项目配置管理
"""
from pathlib import Path
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """应用配置"""

    # API配置
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = True

    # 路径配置
    base_path: Path = Path(__file__).parent.parent
    dictionary_path: Path = base_path / "dictionaries"
    tbcl_file: str = "tbcl_data.json"           # {词: 等级}
    lesson_file: str = "vocab_by_lesson.json"   # {课: [词, ...]}
    custom_vocab_path: Optional[Path] = base_path / "data" / "custom_old_vocab.json"

    # 断词配置
    max_word_len: int = Field(default=6, ge=1)
    particle: str = Field(default="地", min_length=1, max_length=1)
    split_sentence: bool = True
    use_grammar_rules: bool = True

    # 请求限制
    max_text_length: int = 20000

    # 日志配置
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# 全局配置实例
settings = Settings()
