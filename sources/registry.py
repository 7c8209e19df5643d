from __future__ import annotations

from typing import Any, Callable, Dict

from config.settings import Settings


_REGISTRY: Dict[str, Callable[..., Any]] = {}


def register(name: str, factory: Callable[..., Any]) -> None:
    _REGISTRY[name] = factory


def get_document_source(name: str, settings: Settings, **overrides: Any):
    """Build a registered document source from settings (plus explicit overrides)."""
    if name not in _REGISTRY:
        raise KeyError(f"Unknown document source: {name}")
    return _REGISTRY[name](settings, **overrides)


def available_sources() -> Dict[str, Any]:
    return dict(_REGISTRY)
