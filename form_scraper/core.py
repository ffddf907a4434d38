"""表单采集流程核心类"""

import json
import sys
from typing import Optional
from playwright.async_api import async_playwright, Browser

from .config import Settings
from .controller import Controller
from .errors import NavigationError
from .extractor import FieldExtractor
from .models import CaptureState, CombinedSchema, FormSchema, fields_to_list
from .operator_input import OperatorSignal, TerminalKeypress
from .writer import SchemaWriter


class FormCapture:
    """
    两阶段表单采集：
    打开页面 → 提取 Step 1 → 写文件 → 等待操作员按键 → 提取 Step 2 → 写合并文件 → 关闭浏览器
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        signal: Optional[OperatorSignal] = None,
        extractor: Optional[FieldExtractor] = None,
        writer: Optional[SchemaWriter] = None,
    ):
        self.settings = settings or Settings()
        self.signal = signal or TerminalKeypress()
        self.extractor = extractor or FieldExtractor(form_wait_ms=self.settings.form_wait_ms)
        self.writer = writer or SchemaWriter(self.settings.output_dir)
        self.state = CaptureState.AWAITING_STEP1
        self.step1 = None
        self.step2 = None

    async def run(self) -> int:
        """启动浏览器并执行完整流程，返回进程退出码"""
        print("正在启动浏览器...")
        async with async_playwright() as p:
            try:
                browser = await p.chromium.launch(
                    headless=self.settings.headless,
                    args=list(self.settings.browser_args),
                )
            except Exception as e:
                error = NavigationError(f"浏览器启动失败: {e}", phase="launch")
                print(f"❌ {error}", file=sys.stderr)
                self.state = CaptureState.DONE
                return self.settings.step1_failure_exit

            return await self.capture(browser)

    async def capture(self, browser: Browser) -> int:
        """在已启动的浏览器上执行两阶段采集，任何出口都会关闭浏览器"""
        settings = self.settings
        self.state = CaptureState.AWAITING_STEP1

        try:
            page = await browser.new_page()
            controller = Controller(page, settle_seconds=settings.settle_seconds)
            await controller.prepare()

            print(f"正在打开 {settings.url} ...")
            await controller.open(settings.url, phase="step1")
            await controller.settle()

            print("正在提取 Step 1 字段...")
            self.step1 = await self.extractor.extract(page, phase="step1")
            self._print_fields("Step 1", self.step1)

            path = self.writer.write_step1(FormSchema(fields=self.step1, url=page.url))
            print(f"✓ Step 1 schema 已保存到 {path}")
        except Exception as e:
            print(f"❌ 出错: {e}", file=sys.stderr)
            await browser.close()
            self.state = CaptureState.DONE
            return settings.step1_failure_exit

        self.state = CaptureState.AWAITING_OPERATOR_SIGNAL
        print("\n请在浏览器中手动完成 Aadhaar + OTP 验证。")
        print("Step 2（PAN 验证）表单出现后，在此按任意键开始提取。")

        exit_code = 0
        try:
            await self.signal.wait()

            print("正在提取 Step 2 字段...")
            self.step2 = await self.extractor.extract(page, phase="step2")
            self._print_fields("Step 2", self.step2)

            combined = CombinedSchema(step1=self.step1, step2=self.step2, url=page.url)
            path = self.writer.write_combined(combined)
            print(f"✓ Step 1 & 2 合并 schema 已保存到 {path}")
        except Exception as e:
            print(f"❌ 提取 Step 2 失败: {e}", file=sys.stderr)
            exit_code = settings.step2_failure_exit
        finally:
            await browser.close()
            self.state = CaptureState.DONE

        return exit_code

    def _print_fields(self, step: str, fields):
        print(f"✓ {step} 提取到 {len(fields)} 个字段:")
        print(json.dumps(fields_to_list(fields), ensure_ascii=False, indent=2))
