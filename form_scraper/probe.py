"""能力探测：检查当前安装的 Playwright 是否提供指定的 Page 方法"""

from dataclasses import dataclass

import playwright
from playwright.async_api import async_playwright


@dataclass
class ProbeReport:
    """探测结果"""
    module_path: str
    capability: str
    present: bool
    kind: str  # 属性的类型名，不存在时为 "undefined"


def inspect_capability(page, capability: str) -> ProbeReport:
    """检查 page 对象上是否存在某个能力"""
    attr = getattr(page, capability, None)
    present = attr is not None
    kind = ("method" if callable(attr) else type(attr).__name__) if present else "undefined"
    return ProbeReport(
        module_path=playwright.__file__,
        capability=capability,
        present=present,
        kind=kind,
    )


async def probe_capabilities(capability: str = "wait_for_timeout", headless: bool = True,
                             browser_type: str = "chromium") -> ProbeReport:
    """
    启动浏览器并打开空白页，打印 Playwright 的安装位置以及
    page 上是否存在 capability，然后关闭浏览器。
    """
    print(f"使用的 playwright 位于: {playwright.__file__}")

    async with async_playwright() as p:
        browser = await getattr(p, browser_type).launch(headless=headless)
        page = await browser.new_page()

        report = inspect_capability(page, capability)
        print(f"page.{capability} 的类型: {report.kind}")

        await browser.close()
    return report
