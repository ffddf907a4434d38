"""
表单 Schema 采集脚本 - 基于 Playwright

流程：
  1. 打开 Udyam 注册页面，等待网络空闲
  2. 提取 Step 1 表单字段，保存到 formSchema_step1.json
  3. 操作员在浏览器中手动完成 Aadhaar + OTP 验证后，在终端按任意键
  4. 提取 Step 2（PAN 验证）表单字段，保存到 formSchema_step1_and_2.json

只读取 DOM 属性（label、name、id、type、pattern、required、options），
不会提交表单，也不会触发 OTP/PAN 验证。

依赖安装：
    pip install -e .
    playwright install chromium

运行示例：
    python scraper.py
"""

import asyncio
import sys

from form_scraper import FormCapture, Settings


async def main() -> int:
    settings = Settings.from_env()
    return await FormCapture(settings).run()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
