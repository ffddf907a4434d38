"""
检查当前安装的 Playwright：打印模块位置，以及 Page 是否提供 wait_for_timeout。

运行示例：
    python check_playwright_api.py
"""

import asyncio

from form_scraper import probe_capabilities


if __name__ == "__main__":
    asyncio.run(probe_capabilities())
