from __future__ import annotations

from pathlib import Path

from domain.ports.repositories import SvgRepository


class FileSystemSvgRepository(SvgRepository):
    def save(self, svg: str, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(svg, encoding="utf-8")
