"""配置：从 .env / 环境变量读取，未设置时使用默认值"""

import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError

# Udyam 注册页面
DEFAULT_URL = "https://udyamregistration.gov.in/UdyamRegistration.aspx"


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ConfigError(f"{name} 不是有效的布尔值: {raw!r}")


def _get_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError as e:
        raise ConfigError(f"{name} 不是有效的数值: {raw!r}") from e


@dataclass
class Settings:
    """采集脚本的运行配置"""
    url: str = DEFAULT_URL
    headless: bool = False
    browser_args: Tuple[str, ...] = ("--no-sandbox", "--disable-setuid-sandbox")
    output_dir: str = "."
    settle_seconds: float = 1.5
    form_wait_ms: int = 8000
    # 失败退出码策略：第一阶段失败默认 1，第二阶段失败默认 0
    step1_failure_exit: int = 1
    step2_failure_exit: int = 0

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """读取环境变量（可选先加载 .env 文件）"""
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        return cls(
            url=os.getenv("FORM_SCRAPER_URL") or DEFAULT_URL,
            headless=_get_bool("FORM_SCRAPER_HEADLESS", False),
            output_dir=os.getenv("FORM_SCRAPER_OUTPUT_DIR") or ".",
            settle_seconds=_get_number("FORM_SCRAPER_SETTLE_SECONDS", 1.5, float),
            form_wait_ms=_get_number("FORM_SCRAPER_FORM_WAIT_MS", 8000, int),
            step1_failure_exit=_get_number("FORM_SCRAPER_STEP1_FAILURE_EXIT", 1, int),
            step2_failure_exit=_get_number("FORM_SCRAPER_STEP2_FAILURE_EXIT", 0, int),
        )
