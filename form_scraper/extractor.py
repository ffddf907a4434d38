"""提取模块：从已加载的页面中提取表单字段元数据"""

from typing import Dict, List, Optional, Tuple
from playwright.async_api import Page, TimeoutError as PlaywrightTimeout
from .errors import ExtractionError
from .models import FieldDescriptor, FieldOption, WaitOutcome


# 页面内脚本只负责读取原始 DOM 信息，label 优先级与过滤逻辑在 Python 侧完成。
# 单个元素读取失败时退化为默认值，不中断整个扫描。
COLLECT_FIELDS_JS = """
() => {
    const safe = (fn, fallback) => {
        try {
            const v = fn();
            return v === undefined ? fallback : v;
        } catch (e) {
            return fallback;
        }
    };
    const text = (node) => (node.innerText || '').trim();

    const nodes = Array.from(document.querySelectorAll('input, select, textarea, button'));
    return nodes.map(el => {
        const tag = safe(() => el.tagName.toLowerCase(), '');
        const id = safe(() => el.id, '');

        // label 候选：不存在时为 null，存在时为去空白的文本（可能为空串）
        const labelFor = safe(() => {
            if (!id) return null;
            const lab = document.querySelector(`label[for="${CSS.escape(id)}"]`);
            return lab ? text(lab) : null;
        }, null);
        const parentLabel = safe(() => {
            const lab = el.closest('label');
            return lab ? text(lab) : null;
        }, null);
        const siblingLabel = safe(() => {
            const sib = el.previousElementSibling;
            return sib && sib.tagName.toLowerCase() === 'label' ? text(sib) : null;
        }, null);

        const options = tag === 'select'
            ? safe(() => Array.from(el.options || []).map(o => ({ value: o.value, label: (o.text || '').trim() })), [])
            : null;

        return {
            tag,
            type: safe(() => el.type, '') || '',
            name: safe(() => el.name, '') || '',
            id: id || '',
            placeholder: safe(() => el.placeholder, '') || '',
            required: !!safe(() => el.required, false),
            pattern: safe(() => el.getAttribute('pattern'), null),
            options,
            labelFor,
            parentLabel,
            siblingLabel
        };
    });
}
"""


def resolve_label(raw: Dict) -> str:
    """
    label 优先级：
    label[for=id] → 最近的祖先 label → 紧邻的前一个 label 兄弟 → placeholder → 空串
    """
    for key in ("labelFor", "parentLabel", "siblingLabel"):
        value = raw.get(key)
        if value is not None:
            return value
    return (raw.get("placeholder") or "").strip()


def resolve_type(tag: str, raw_type: Optional[str]) -> str:
    """select 固定为 "select"，其余优先取元素自身的 type，否则取标签名"""
    if tag == "select":
        return "select"
    return raw_type or tag


def build_descriptor(raw: Dict) -> FieldDescriptor:
    """把页面返回的原始数据转换为 FieldDescriptor"""
    tag = raw.get("tag") or ""
    options = None
    if tag == "select":
        options = tuple(
            FieldOption(value=o.get("value", ""), label=o.get("label", ""))
            for o in (raw.get("options") or [])
        )
    return FieldDescriptor(
        tag=tag,
        label=resolve_label(raw),
        name=raw.get("name") or None,
        id=raw.get("id") or None,
        type=resolve_type(tag, raw.get("type")),
        placeholder=raw.get("placeholder") or None,
        required=bool(raw.get("required")),
        pattern=raw.get("pattern"),
        options=options,
    )


def is_identifiable(descriptor: FieldDescriptor) -> bool:
    """没有 name/id/label 的元素丢弃，按钮除外"""
    return bool(descriptor.name or descriptor.id or descriptor.label or descriptor.tag == "button")


def build_descriptors(raw_fields: List[Dict]) -> Tuple[FieldDescriptor, ...]:
    """按文档顺序构建并过滤字段"""
    descriptors = (build_descriptor(raw) for raw in raw_fields)
    return tuple(d for d in descriptors if is_identifiable(d))


class FieldExtractor:
    """
    提取模块：等待 form 出现（尽力而为），然后在页面内收集
    input / select / textarea / button 的元数据。
    """

    def __init__(self, form_selector: str = "form", form_wait_ms: int = 8000):
        self.form_selector = form_selector
        self.form_wait_ms = form_wait_ms
        self.last_wait: Optional[WaitOutcome] = None

    async def wait_for_form(self, page: Page) -> WaitOutcome:
        """等待 form 元素，超时不抛异常"""
        try:
            await page.wait_for_selector(self.form_selector, timeout=self.form_wait_ms)
            return WaitOutcome.FOUND
        except PlaywrightTimeout:
            return WaitOutcome.TIMED_OUT

    async def extract(self, page: Page, phase: Optional[str] = None) -> Tuple[FieldDescriptor, ...]:
        """
        返回按文档顺序排列的字段元组（可能为空）。
        页面内执行失败时抛出 ExtractionError。
        """
        self.last_wait = await self.wait_for_form(page)
        if self.last_wait is WaitOutcome.TIMED_OUT:
            print(f"⚠ {self.form_wait_ms}ms 内未等到 {self.form_selector}，继续提取")

        try:
            raw_fields = await page.evaluate(COLLECT_FIELDS_JS)
        except Exception as e:
            raise ExtractionError(f"页面内字段提取失败: {e}", url=page.url, phase=phase) from e

        return build_descriptors(raw_fields or [])
