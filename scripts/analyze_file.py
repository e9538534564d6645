#!/usr/bin/env python
"""
文本文件生词分析脚本
读取 UTF-8 文本，以全部课数为旧词，列出生词与等级
"""
import json
import sys
from pathlib import Path

# 添加项目根目录到 path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import settings
from core.vocab_analyzer import VocabAnalyzer
from services.dictionary_manager import DictionaryManager
from services.vocab_session import VocabSession


def run_analysis(text_path: str, use_grammar_rules: bool = True, use_advanced: bool = True, output_path: str = None):
    """分析单个文件"""
    print("=" * 60)
    print("中文生词分析")
    print("=" * 60)

    print(f"\n📂 读取文件: {text_path}")
    text = Path(text_path).read_text(encoding='utf-8')
    print(f"   共 {len(text)} 字")

    print("\n⚙️ 加载词典...")
    dict_manager = DictionaryManager(
        settings.dictionary_path,
        tbcl_file=settings.tbcl_file,
        lesson_file=settings.lesson_file
    )
    dict_manager.load_all()

    # 不读写补充旧词，只用课本生词（预设全选）
    session = VocabSession(dict_manager)
    analyzer = VocabAnalyzer(dict_manager)

    result = analyzer.analyze(
        text,
        session.blocklist,
        use_advanced=use_advanced,
        use_grammar_rules=use_grammar_rules
    )

    print("\n" + "=" * 60)
    print(f"总字数: {result.char_count}    生词数: {result.new_word_count}")
    print("=" * 60)

    if output_path:
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(result.to_dict(), f, ensure_ascii=False, indent=2)
        print(f"\n💾 结果已保存到: {output_path}")
    elif result.items:
        print(VocabAnalyzer.format_text(result.items))
    else:
        print("没有发现生词！（全都是旧词或已知词汇）")

    return result


def main():
    """主函数"""
    import argparse

    parser = argparse.ArgumentParser(description='分析文本文件中的生词')
    parser.add_argument('text_file', help='UTF-8 文本文件路径')
    parser.add_argument('--no-grammar', action='store_true', help='不使用上下文规则修正')
    parser.add_argument('--baseline', action='store_true', help='使用 jieba 断词')
    parser.add_argument('--json', dest='output', help='输出 JSON 文件路径', default=None)

    args = parser.parse_args()

    if not Path(args.text_file).exists():
        print(f"❌ 文件不存在: {args.text_file}")
        sys.exit(1)

    try:
        run_analysis(
            args.text_file,
            use_grammar_rules=not args.no_grammar,
            use_advanced=not args.baseline,
            output_path=args.output
        )
    except ValueError as e:
        print(f"❌ {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
