from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest


def pytest_configure() -> None:
    root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(root))


def render_desktop(fields: Dict[str, str], actions: Optional[Dict[str, Dict[str, str]]] = None) -> str:
    lines = ["[Desktop Entry]"]
    lines += [f"{k}={v}" for k, v in fields.items()]
    for key, body in (actions or {}).items():
        lines.append("")
        lines.append(f"[Desktop Action {key}]")
        lines += [f"{k}={v}" for k, v in body.items()]
    return "\n".join(lines) + "\n"


@pytest.fixture
def write_desktop() -> Callable[..., Path]:
    def _write(
        directory: Path,
        filename: str,
        fields: Dict[str, str],
        actions: Optional[Dict[str, Dict[str, str]]] = None,
    ) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        path.write_text(render_desktop(fields, actions), encoding="utf-8")
        return path

    return _write


class FakePopen:
    """Records spawn attempts; raises FileNotFoundError for programs not in `available`.

    Like the real Popen, an argument holding a NUL byte raises ValueError.
    """

    def __init__(self, available: Optional[List[str]] = None):
        self.available = available
        self.calls: List[Dict[str, Any]] = []

    def __call__(self, argv: List[str], **kwargs: Any) -> "FakePopen":
        self.calls.append({"argv": list(argv), **kwargs})
        if any("\x00" in a for a in argv):
            raise ValueError("embedded null byte")
        if self.available is not None and argv[0] not in self.available:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        return self


@pytest.fixture
def fake_popen(monkeypatch: pytest.MonkeyPatch) -> FakePopen:
    fake = FakePopen()
    monkeypatch.setattr("appdeck.launcher.subprocess.Popen", fake)
    return fake
