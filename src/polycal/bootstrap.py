from __future__ import annotations

from typing import Optional

from .config import DEFAULT_CONFIG, EngineConfig
from .core.engine import ConverterRegistry
from .core.types import CalendarId
from .engines.factory import make_converter


def build_registry(config: Optional[EngineConfig] = None) -> ConverterRegistry:
    cfg = config or DEFAULT_CONFIG
    converters = {cid: make_converter(cid, cfg) for cid in CalendarId}
    return ConverterRegistry(converters)
