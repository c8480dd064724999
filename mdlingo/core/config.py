from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    运行配置，可通过 MDLINGO_ 前缀的环境变量或 .env 文件覆盖。
    """

    model_config = SettingsConfigDict(env_prefix="MDLINGO_", env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # 日志
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"
    LOG_FILE: Optional[str] = None

    # 文档目录
    DOCS_ROOT: str = "docs"
    DEFAULT_LANGUAGES: List[str] = ["km"]

    # 翻译服务
    GOOGLE_TRANSLATE_URL: str = (
        "https://translate.google.com/translate_a/single"
        "?client=it&dt=qca&dt=t&dt=rmt&dt=bd&dt=rms&dt=sos&dt=md&dt=gt"
        "&dt=ld&dt=ss&dt=ex&otf=2&dj=1&hl=en&ie=UTF-8&oe=UTF-8&sl=auto"
    )
    REQUEST_TIMEOUT: float = 30.0

    # 限流与重试
    DELAY_SECONDS: float = 2.0
    BATCH_SIZE: int = 5
    MAX_RETRIES: int = 3
    RETRY_DELAY_SECONDS: float = 1.0
    RATE_LIMIT_MAX_RETRIES: int = 5
    RATE_LIMIT_DELAY_SECONDS: float = 5.0

    # 缓存键只取原文前 N 个字符
    CACHE_KEY_LENGTH: int = 100

    QA_SAMPLE_SIZE: int = 10


settings = Settings()
