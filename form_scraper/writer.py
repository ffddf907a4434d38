"""输出模块：把采集结果写成 JSON 文件"""

import json
from pathlib import Path
from typing import Dict, Union
from .models import CombinedSchema, FormSchema

STEP1_FILENAME = "formSchema_step1.json"
COMBINED_FILENAME = "formSchema_step1_and_2.json"


class SchemaWriter:
    """把 FormSchema / CombinedSchema 序列化到输出目录"""

    def __init__(self, output_dir: Union[str, Path] = "."):
        self.output_dir = Path(output_dir)

    def write_step1(self, schema: FormSchema) -> Path:
        return self._write(STEP1_FILENAME, schema.to_dict())

    def write_combined(self, schema: CombinedSchema) -> Path:
        return self._write(COMBINED_FILENAME, schema.to_dict())

    def _write(self, filename: str, data: Dict) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / filename
        path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        return path
