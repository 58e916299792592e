# src/webroots/resolver.py
"""Plugin loading for collaborators named in configuration.

A hook is named as ``module.path:function`` or ``/file/path.py:function`` and
must be a ``str -> str`` callable, e.g. a deployment's own HTML unescaper.
"""

from __future__ import annotations

import importlib
import importlib.util
import sys
from collections.abc import Callable
from hashlib import sha256
from pathlib import Path
from types import ModuleType

Hook = Callable[[str], str]

# Keyed by the full hook spec, so two functions of one file are cached apart
_hook_cache: dict[str, Hook] = {}


def load_hook(hook_spec: str) -> Hook:
    """Return the callable named by ``hook_spec``, loading its module once.

    Raises:
        ValueError: If the spec is malformed, the module cannot be imported or
            executed, or the attribute is missing or not callable
        FileNotFoundError: If a hook file does not exist

    Examples:
        >>> unescape = load_hook('html:unescape')
        >>> decode = load_hook('/srv/hooks/escaping.py:decode')
    """
    cached = _hook_cache.get(hook_spec)
    if cached is not None:
        return cached

    target, func_name = _split_spec(hook_spec)
    module = _load_file_module(target) if _is_file_target(target) else _import_module(target)

    hook = getattr(module, func_name, None)
    if hook is None:
        raise ValueError(f"Module '{target}' has no function '{func_name}'")
    if not callable(hook):
        raise ValueError(f"Hook '{func_name}' is not callable (type: {type(hook).__name__})")

    _hook_cache[hook_spec] = hook
    return hook


def _split_spec(hook_spec: str) -> tuple[str, str]:
    target, sep, func_name = hook_spec.rpartition(":")
    if not sep or not target or not func_name:
        raise ValueError(f"Hook spec must be 'module:function' or 'path.py:function', got: {hook_spec}")
    return target, func_name


def _is_file_target(target: str) -> bool:
    return "/" in target or target.endswith(".py")


def _import_module(name: str) -> ModuleType:
    try:
        return importlib.import_module(name)
    except ImportError as e:
        raise ValueError(f"Could not import module '{name}': {e}") from e


def _load_file_module(file_path: str) -> ModuleType:
    path = Path(file_path).resolve()

    if not path.exists():
        raise FileNotFoundError(f"Hook file not found: {path}")
    if path.suffix != ".py":
        raise ValueError(f"Hook file must be .py, got: {path.suffix}")

    # Same stem in two directories must not share a sys.modules entry
    module_name = f"webroots_hook_{path.stem}_{sha256(str(path).encode('utf-8')).hexdigest()[:12]}"
    if module_name in sys.modules:
        return sys.modules[module_name]

    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ValueError(f"Could not load spec from {path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        del sys.modules[module_name]
        raise ValueError(f"Hook file {path} failed to load: {type(e).__name__}: {e}") from e

    return module
