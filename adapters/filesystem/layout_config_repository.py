from __future__ import annotations

from pathlib import Path

from adapters.filesystem.json_utils import load_json_text
from domain.models import ChartLayoutConfig
from domain.ports.repositories import LayoutConfigRepository


class FileSystemLayoutConfigRepository(LayoutConfigRepository):
    def load_by_path(self, path: Path) -> ChartLayoutConfig:
        text = path.read_text(encoding="utf-8")
        return ChartLayoutConfig.model_validate(load_json_text(self._strip_comments(text)))

    def _strip_comments(self, content: str) -> str:
        result_lines: list[str] = []
        for line in content.splitlines():
            in_string = False
            escaped = False
            cleaned = []
            for idx, char in enumerate(line):
                if not escaped and char == '"':
                    in_string = not in_string
                if not in_string and char == "/" and idx + 1 < len(line) and line[idx + 1] == "/":
                    break
                cleaned.append(char)
                escaped = char == "\\" and not escaped
            result_lines.append("".join(cleaned))
        return "\n".join(result_lines)
