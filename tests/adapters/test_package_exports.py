"""Ensure packages expose the expected public names."""

from importlib import import_module

import pytest


def test_interface_package_exports_are_empty() -> None:
    module = import_module("stockbook.adapters.interface")
    assert module.__all__ == []


def test_streamlit_package_exports_are_empty() -> None:
    module = import_module("stockbook.adapters.interface.streamlit")
    assert module.__all__ == []


@pytest.mark.parametrize(
    "module_name",
    [
        "stockbook.domain",
        "stockbook.domain.models",
        "stockbook.domain.services",
        "stockbook.application.ports",
        "stockbook.application.use_cases",
    ],
)
def test_package_exports_resolve(module_name: str) -> None:
    """Every name in __all__ should be importable from the package."""
    module = import_module(module_name)
    for name in module.__all__:
        assert hasattr(module, name), f"{module_name} is missing {name}"
