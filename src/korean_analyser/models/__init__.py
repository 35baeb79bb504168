from .base_model import (
    BaseSegmentationEngine,
    BufferedSession,
    EngineSession,
    RawToken,
    TokenAttributes,
)
from .kiwi_model import KiwiSegmentationEngine
from .model_factory import EngineFactory

__all__ = [
    "BaseSegmentationEngine",
    "BufferedSession",
    "EngineSession",
    "RawToken",
    "TokenAttributes",
    "KiwiSegmentationEngine",
    "EngineFactory",
]
