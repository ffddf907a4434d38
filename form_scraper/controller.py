"""执行模块：页面准备、导航与等待"""

import asyncio
from typing import Optional
from playwright.async_api import Page
from .errors import NavigationError


class Controller:
    """执行模块：封装采集流程需要的页面操作"""

    def __init__(self, page: Page, settle_seconds: float = 1.5):
        self.page = page
        self.settle_seconds = settle_seconds

    async def prepare(self):
        """关闭导航超时并禁用 HTTP 缓存"""
        self.page.set_default_navigation_timeout(0)
        try:
            session = await self.page.context.new_cdp_session(self.page)
            await session.send("Network.setCacheDisabled", {"cacheDisabled": True})
        except Exception as e:
            # 非 Chromium 浏览器没有 CDP，缓存保持默认
            print(f"⚠ 无法禁用缓存: {e}")

    async def open(self, url: str, phase: Optional[str] = None):
        """打开 URL 并等待网络空闲，不设超时"""
        try:
            await self.page.goto(url, wait_until="networkidle", timeout=0)
        except Exception as e:
            raise NavigationError(f"打开页面失败: {e}", url=url, phase=phase) from e
        print(f"✓ 已打开 {self.page.url}")

    async def settle(self):
        """固定等待，让页面脚本完成渲染"""
        await asyncio.sleep(self.settle_seconds)
