"""Probe optional test dependencies without importing them."""

import importlib.util


def module_available(module_name: str) -> bool:
    return importlib.util.find_spec(module_name) is not None


def missing_modules(*module_names: str) -> list[str]:
    """Return the names in ``module_names`` that cannot be imported."""
    return [name for name in module_names if not module_available(name)]
