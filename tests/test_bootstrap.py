import sys
import types

from crudgen import load_plugins
from crudgen.backends import InMemoryRepository, repository_manager


def test_load_plugins_calls_register(monkeypatch) -> None:
    calls = []
    plugin = types.ModuleType("crudgen_test_plugin")

    def register() -> None:
        calls.append("registered")
        repository_manager.register(InMemoryRepository(name="plugin-store"))

    plugin.register = register
    monkeypatch.setitem(sys.modules, "crudgen_test_plugin", plugin)
    try:
        load_plugins([" crudgen_test_plugin ", ""])
        assert calls == ["registered"]
        assert "plugin-store" in repository_manager
    finally:
        repository_manager.unregister("plugin-store")


def test_modules_without_register_are_ignored(monkeypatch) -> None:
    monkeypatch.setitem(sys.modules, "crudgen_empty_plugin", types.ModuleType("crudgen_empty_plugin"))
    load_plugins(["crudgen_empty_plugin"])
