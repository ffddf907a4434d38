"""数据模型定义"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional, Tuple


class WaitOutcome(Enum):
    """尽力等待的结果（超时不视为错误）"""
    FOUND = "found"
    TIMED_OUT = "timed_out"


class CaptureState(Enum):
    """采集流程的状态"""
    AWAITING_STEP1 = "awaiting_step1"
    AWAITING_OPERATOR_SIGNAL = "awaiting_operator_signal"
    DONE = "done"


@dataclass(frozen=True)
class FieldOption:
    """<select> 中的单个选项"""
    value: str
    label: str

    def to_dict(self) -> Dict:
        return {"value": self.value, "label": self.label}


@dataclass(frozen=True)
class FieldDescriptor:
    """单个表单字段的元数据"""
    tag: str
    label: str
    name: Optional[str]
    id: Optional[str]
    type: str
    placeholder: Optional[str]
    required: bool
    pattern: Optional[str]
    options: Optional[Tuple[FieldOption, ...]]  # 仅 select 有值

    def to_dict(self) -> Dict:
        return {
            "tag": self.tag,
            "label": self.label,
            "name": self.name,
            "id": self.id,
            "type": self.type,
            "placeholder": self.placeholder,
            "required": self.required,
            "pattern": self.pattern,
            "options": [o.to_dict() for o in self.options] if self.options is not None else None,
        }


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC 时间戳，精确到毫秒，例如 2024-01-01T00:00:00.000Z"""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


@dataclass(frozen=True)
class FormSchema:
    """某一时刻页面上的全部字段"""
    fields: Tuple[FieldDescriptor, ...]
    url: str
    scraped_at: str = field(default_factory=utc_timestamp)

    def to_dict(self) -> Dict:
        # 与 formSchema_step1.json 的键顺序一致
        return {
            "step1": [f.to_dict() for f in self.fields],
            "url": self.url,
            "scrapedAt": self.scraped_at,
        }


@dataclass(frozen=True)
class CombinedSchema:
    """两次采集（step1 + step2）的合并结果，共用一组 url/scrapedAt"""
    step1: Tuple[FieldDescriptor, ...]
    step2: Tuple[FieldDescriptor, ...]
    url: str
    scraped_at: str = field(default_factory=utc_timestamp)

    def to_dict(self) -> Dict:
        return {
            "url": self.url,
            "scrapedAt": self.scraped_at,
            "step1": [f.to_dict() for f in self.step1],
            "step2": [f.to_dict() for f in self.step2],
        }


def fields_to_list(fields) -> List[Dict]:
    """字段序列转为可打印的 dict 列表"""
    return [f.to_dict() for f in fields]
