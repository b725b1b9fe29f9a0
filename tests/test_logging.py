"""Tests for import-time logging behavior."""

import importlib
import logging
import sys


def test_importing_library_modules_does_not_configure_global_logging(monkeypatch):
    calls = {"count": 0}

    def fake_basic_config(*args, **kwargs):
        calls["count"] += 1

    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)

    module_names = (
        "postlist.content",
        "postlist.content.loader",
        "postlist.config",
        "postlist.config.settings",
        "postlist.display",
        "postlist.cli",
    )
    for module_name in module_names:
        monkeypatch.delitem(sys.modules, module_name, raising=False)

    for module_name in module_names:
        importlib.import_module(module_name)
    assert calls["count"] == 0
