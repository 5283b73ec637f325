import sys
import json
import textwrap
from pathlib import Path
from typing import Any, Callable

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / ".config"))
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def write_json():
    def _write(path: Path, payload: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")

    return _write


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    root = tmp_path / "workspace"
    root.mkdir()
    return root


@pytest.fixture
def settings_root(tmp_path: Path) -> Path:
    return tmp_path / ".config" / "code-context"


@pytest.fixture
def fake_eslint(tmp_path: Path) -> Callable[..., tuple[str, ...]]:
    """Build a command that behaves like ``eslint --print-config``."""

    def _make(
        output: Any = None,
        exit_code: int = 0,
        stderr: str = "",
        sleep: float = 0,
        name: str = "fake_eslint.py",
    ) -> tuple[str, ...]:
        stdout = output if isinstance(output, str) else json.dumps(output)
        script = tmp_path / name
        calls_path = str(tmp_path / f"{name}.calls")
        script.write_text(
            textwrap.dedent(
                f"""
                import json
                import os
                import sys
                import time

                with open({calls_path!r}, "a", encoding="utf-8") as handle:
                    handle.write(json.dumps({{"argv": sys.argv[1:], "cwd": os.getcwd(), "pid": os.getpid()}}) + "\\n")
                time.sleep({sleep!r})
                sys.stderr.write({stderr!r})
                sys.stdout.write({stdout!r})
                sys.exit({exit_code!r})
                """
            ),
            encoding="utf-8",
        )
        return (sys.executable, str(script))

    return _make


@pytest.fixture
def fake_eslint_calls(tmp_path: Path) -> Callable[[str], list[dict]]:
    def _calls(name: str = "fake_eslint.py") -> list[dict]:
        path = tmp_path / f"{name}.calls"
        if not path.exists():
            return []
        return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]

    return _calls


@pytest.fixture
def cli_runner(tmp_path: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(tmp_path))
            env.setdefault("XDG_CONFIG_HOME", str(tmp_path / ".config"))
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()
