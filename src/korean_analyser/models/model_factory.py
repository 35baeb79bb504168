"""
Фабрика движков сегментации по конфигурации.
"""

from __future__ import annotations

from typing import Optional, Dict, Any

from .base_model import BaseSegmentationEngine
from .kiwi_model import DEFAULT_MAX_INSTANCES, KiwiSegmentationEngine


class EngineFactory:
    """Создаёт движки по секции ``engine`` конфигурации."""

    @staticmethod
    def create(engine_cfg: Dict[str, Any]) -> Optional[BaseSegmentationEngine]:
        """Создаёт движок из словаря настроек.

        Ожидаемый формат:
        {
          "type": "kiwi",
          "num_workers": 0,
          "model_type": null,
          "model_path": null,
          "load_default_dict": true,
          "integrate_allomorph": true,
          "max_instances": 2
        }
        """
        if not engine_cfg:
            return None
        engine_type = (engine_cfg.get("type") or "").lower()
        if engine_type == "kiwi":
            return KiwiSegmentationEngine(
                num_workers=engine_cfg.get("num_workers"),
                model_type=engine_cfg.get("model_type"),
                model_path=engine_cfg.get("model_path"),
                load_default_dict=bool(engine_cfg.get("load_default_dict", True)),
                integrate_allomorph=bool(engine_cfg.get("integrate_allomorph", True)),
                max_instances=int(engine_cfg.get("max_instances") or DEFAULT_MAX_INSTANCES),
            )
        return None

    @staticmethod
    def create_or_fail(engine_cfg: Dict[str, Any]) -> BaseSegmentationEngine:
        """Создаёт движок или выбрасывает ошибку (Fail Fast).

        Raises:
            RuntimeError: если тип отсутствует или неизвестен
        """
        engine = EngineFactory.create(engine_cfg)
        if engine is None:
            raise RuntimeError(f"Некорректная конфигурация движка: отсутствует или неизвестный тип в {engine_cfg!r}")
        return engine
