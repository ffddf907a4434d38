"""异常定义

错误分类是扁平的：导航/启动失败、提取失败，以及配置错误。
"""

from typing import Optional


class ScraperError(Exception):
    """所有采集错误的基类，附带 url / phase 上下文"""

    def __init__(self, message: str, url: Optional[str] = None, phase: Optional[str] = None):
        self.message = message
        self.url = url
        self.phase = phase
        super().__init__(message)

    def __str__(self) -> str:
        parts = [self.message]
        if self.url:
            parts.append(f"url={self.url}")
        if self.phase:
            parts.append(f"phase={self.phase}")
        return " | ".join(parts)


class NavigationError(ScraperError):
    """浏览器启动或页面导航失败"""


class ExtractionError(ScraperError):
    """页面内字段提取失败"""


class ConfigError(ScraperError):
    """环境变量配置无效"""
