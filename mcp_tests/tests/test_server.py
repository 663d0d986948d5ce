import sys
import types
import uuid
import importlib.util
from pathlib import Path


def _find_server_py() -> Path:
    root = Path(__file__).resolve().parents[2]
    candidates = [
        root / "server" / "server.py",
        root / "src" / "server" / "server.py",
    ]
    for p in candidates:
        if p.exists():
            return p
    raise FileNotFoundError(f"Could not find server.py. Tried: {candidates}")


def _install_fake_modules(monkeypatch, captures: dict):
    # ---- Fake mcp.server.fastmcp.FastMCP ----
    mcp_mod = types.ModuleType("mcp")
    mcp_server_mod = types.ModuleType("mcp.server")
    fastmcp_mod = types.ModuleType("mcp.server.fastmcp")

    class DummyFastMCP:
        def __init__(self, name: str):
            captures["fastmcp_name"] = name
            captures["mcp_instance"] = self
            self.run_calls = []

        def run(self, *, transport: str):
            self.run_calls.append({"transport": transport})
            captures["run_calls"] = list(self.run_calls)

    fastmcp_mod.FastMCP = DummyFastMCP

    mcp_mod.__path__ = []
    mcp_server_mod.__path__ = []

    monkeypatch.setitem(sys.modules, "mcp", mcp_mod)
    monkeypatch.setitem(sys.modules, "mcp.server", mcp_server_mod)
    monkeypatch.setitem(sys.modules, "mcp.server.fastmcp", fastmcp_mod)

    # ---- Fake config ----
    config_mod = types.ModuleType("config")
    config_mod.LOG_LEVEL = "DEBUG"
    monkeypatch.setitem(sys.modules, "config", config_mod)

    # ---- Fake tools ----
    tools_pkg = types.ModuleType("tools")
    tools_pkg.__path__ = []
    monkeypatch.setitem(sys.modules, "tools", tools_pkg)

    def _tool_module(name: str):
        mod = types.ModuleType(f"tools.{name}")

        def register(mcp, **kwargs):
            captures.setdefault(f"register_{name}_calls", []).append({"mcp": mcp, **kwargs})

        mod.register = register
        monkeypatch.setitem(sys.modules, f"tools.{name}", mod)

    for name in ("push", "pull", "locale_files"):
        _tool_module(name)


def _load_server_module(monkeypatch, captures: dict):
    _install_fake_modules(monkeypatch, captures)

    server_path = _find_server_py()
    mod_name = f"server_under_test_{uuid.uuid4().hex}"
    spec = importlib.util.spec_from_file_location(mod_name, server_path)
    assert spec and spec.loader

    module = importlib.util.module_from_spec(spec)
    monkeypatch.setitem(sys.modules, mod_name, module)
    spec.loader.exec_module(module)
    return module


def test_server_registers_tools_and_runs_stdio(monkeypatch):
    captures = {}
    module = _load_server_module(monkeypatch, captures)

    assert captures["fastmcp_name"] == "phrase-locales"
    mcp = captures["mcp_instance"]

    for name in ("push", "pull", "locale_files"):
        calls = captures.get(f"register_{name}_calls", [])
        assert len(calls) == 1
        assert calls[0]["mcp"] is mcp

    logging_calls = []
    monkeypatch.setattr(module, "configure_logging", lambda: logging_calls.append(True))

    module.main()
    assert logging_calls == [True]
    assert captures["run_calls"] == [{"transport": "stdio"}]
