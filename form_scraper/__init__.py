"""表单 Schema 采集包

包含各个模块：
- models: 数据模型
- extractor: 字段提取模块
- controller: 页面操作模块
- writer: JSON 输出模块
- operator_input: 操作员按键等待
- config: 运行配置
- core: 两阶段采集流程
- probe: Playwright 能力探测
"""

from .models import (
    FieldOption,
    FieldDescriptor,
    FormSchema,
    CombinedSchema,
    WaitOutcome,
    CaptureState,
)
from .errors import ScraperError, NavigationError, ExtractionError, ConfigError
from .extractor import FieldExtractor
from .controller import Controller
from .writer import SchemaWriter
from .operator_input import OperatorSignal, TerminalKeypress, ImmediateSignal
from .config import Settings
from .core import FormCapture
from .probe import ProbeReport, probe_capabilities

__all__ = [
    "FieldOption",
    "FieldDescriptor",
    "FormSchema",
    "CombinedSchema",
    "WaitOutcome",
    "CaptureState",
    "ScraperError",
    "NavigationError",
    "ExtractionError",
    "ConfigError",
    "FieldExtractor",
    "Controller",
    "SchemaWriter",
    "OperatorSignal",
    "TerminalKeypress",
    "ImmediateSignal",
    "Settings",
    "FormCapture",
    "ProbeReport",
    "probe_capabilities",
]
