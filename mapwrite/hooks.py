"""Loading of callable options from ``module:function`` specs."""

from __future__ import annotations

import importlib
from types import ModuleType
from typing import Any, Callable

from mapwrite.errors import HookError


def parse_hook_spec(spec: str) -> tuple[str, str]:
    """Split ``module:function`` into its parts."""
    spec = spec.strip()
    if not spec:
        raise HookError(
            code="MW005",
            message="Hook spec cannot be empty.",
            hint="Use module:function",
        )

    module_name, sep, symbol_name = spec.partition(":")
    if not sep or not module_name.strip() or not symbol_name.strip():
        raise HookError(
            code="MW005",
            message=f"Hook spec '{spec}' must name both a module and a function.",
            hint="Use module:function",
        )
    return module_name.strip(), symbol_name.strip()


def load_hook(spec: str) -> Callable[..., Any]:
    """Import and return the callable named by ``spec``."""
    module_name, symbol_name = parse_hook_spec(spec)
    module = _import_hook_module(module_name, spec)

    obj: Any = module
    for part in symbol_name.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise HookError(
                code="MW006",
                message=f"Module '{module_name}' has no attribute '{symbol_name}' (spec '{spec}').",
                hint="Check the function name after ':'.",
            ) from exc

    if not callable(obj):
        raise HookError(
            code="MW007",
            message=f"Hook '{spec}' resolved to non-callable '{type(obj).__name__}'.",
            hint="Point the spec at a function taking one argument.",
        )
    return obj


def _import_hook_module(module_name: str, spec: str) -> ModuleType:
    try:
        return importlib.import_module(module_name)
    except Exception as exc:
        raise HookError(
            code="MW008",
            message=f"Failed to import hook module '{module_name}' from spec '{spec}': {exc}",
            hint="Ensure module is on PYTHONPATH and importable.",
        ) from exc
