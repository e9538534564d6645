"""
中文生词分析服务 - API 入口
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from api.routes import (
    segment_router,
    lessons_router,
    dictionary_router,
    set_analyzer,
    set_session,
    set_dict_manager
)
from api.models import HealthResponse
from core.segmenter import AdvancedSegmenter
from core.tokenizers import AdvancedTokenizer
from core.vocab_analyzer import VocabAnalyzer
from services.dictionary_manager import DictionaryManager
from services.vocab_session import VocabSession

VERSION = "1.0.0"

# 全局实例
dict_manager: DictionaryManager = None


def init_services(dm: DictionaryManager, custom_vocab_path=None) -> VocabAnalyzer:
    """依词典管理器建立分析器与会话，并注入各路由"""
    global dict_manager
    dict_manager = dm

    segmenter = AdvancedSegmenter(max_word_len=settings.max_word_len, particle=settings.particle)
    tokenizer = AdvancedTokenizer(
        dm,
        segmenter=segmenter,
        split_sentence=settings.split_sentence,
        use_grammar_rules=settings.use_grammar_rules
    )
    analyzer = VocabAnalyzer(dm, advanced=tokenizer)
    session = VocabSession(dm, custom_vocab_path)

    set_analyzer(analyzer, session)
    set_session(session)
    set_dict_manager(dm, session)
    return analyzer


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    print("🚀 正在初始化服务...")

    dm = DictionaryManager(
        settings.dictionary_path,
        tbcl_file=settings.tbcl_file,
        lesson_file=settings.lesson_file
    )
    dm.load_all()
    print(f"📚 词典加载完成: {dm.get_stats()}")

    init_services(dm, settings.custom_vocab_path)
    print("⚙️ 断词引擎初始化完成")

    print("✅ 服务启动完成!")

    yield

    print("👋 服务关闭中...")


app = FastAPI(
    title="中文生词分析服务",
    description="""
    ## 功能
    - 断词：正向 / 逆向最大匹配 + 上下文歧义修正
    - 生词分析：过滤已学课数与补充旧词，标上 TBCL 等级
    - 手动调整：合并、切分分析结果

    ## 旧词来源
    - 课本生词（按冊别 / 课数勾选）
    - 手动补充的旧词
    """,
    version=VERSION,
    lifespan=lifespan
)

# CORS 配置
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 注册路由
app.include_router(segment_router)
app.include_router(lessons_router)
app.include_router(dictionary_router)


@app.get("/", tags=["health"])
async def root():
    """根路径"""
    return {"message": "中文生词分析服务", "docs": "/docs"}


@app.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check() -> HealthResponse:
    """健康检查"""
    loaded = dict_manager is not None and dict_manager.is_loaded()
    return HealthResponse(
        status="healthy",
        version=VERSION,
        dictionaries_loaded=loaded,
        stats=dict_manager.get_stats() if loaded else {}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
