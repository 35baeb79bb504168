"""
Компонент для экспорта проанализированных термов.

Форматы: Excel (лист термов и сводные листы), CSV и JSON с метаданными.
"""

import json
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Sequence, Union

import pandas as pd

from ..interfaces.text_processor import AnalyzedTerm, TermExporterInterface
import logging

logger = logging.getLogger(__name__)

TERM_COLUMNS = [
    'surface', 'position', 'start_offset', 'end_offset',
    'token_type', 'pos_type', 'left_pos', 'right_pos', 'reading',
]


class TermExporter(TermExporterInterface):
    """Экспортёр списков проанализированных термов."""

    def __init__(self, output_dir: Union[str, Path] = "data/results", sheet_name: str = "Terms"):
        """
        Инициализирует экспортёр.

        Args:
            output_dir: Папка для export_all_formats
            sheet_name: Имя листа Excel с термами
        """
        self.output_dir = Path(output_dir)
        self.sheet_name = sheet_name

    def to_dataframe(self, terms: Sequence[AnalyzedTerm]) -> pd.DataFrame:
        """Возвращает термы как DataFrame, по строке на терм."""
        return pd.DataFrame([t.to_dict() for t in terms], columns=TERM_COLUMNS)

    def export_to_excel(self, terms: Sequence[AnalyzedTerm], filepath: Union[str, Path]) -> Optional[Path]:
        """
        Экспортирует термы в книгу Excel.

        Args:
            terms: Проанализированные термы
            filepath: Путь к файлу (.xlsx добавляется, если расширения нет)

        Returns:
            Путь к записанному файлу или None, если экспортировать нечего
        """
        if not terms:
            logger.info("Нет термов для экспорта в Excel")
            return None

        filepath = _with_suffix(filepath, '.xlsx')
        df = self.to_dataframe(terms)

        pos_counts = Counter(t.left_pos for t in terms)
        stats_df = pd.DataFrame({
            'Параметр': ['Всего термов', 'Уникальных форм', 'Последняя позиция', 'Дата экспорта'],
            'Значение': [
                len(terms),
                df['surface'].nunique(),
                max(t.position for t in terms),
                datetime.now().strftime('%Y-%m-%d %H:%M:%S'),
            ],
        })
        pos_df = pd.DataFrame(
            sorted(pos_counts.items(), key=lambda x: x[1], reverse=True),
            columns=['POS', 'Количество'],
        )

        with pd.ExcelWriter(filepath, engine='openpyxl') as writer:
            df.to_excel(writer, sheet_name=self.sheet_name, index=False)
            stats_df.to_excel(writer, sheet_name='Статистика', index=False)
            pos_df.to_excel(writer, sheet_name='Части речи', index=False)

        logger.info(f"Термы экспортированы в Excel: {filepath}")
        return filepath

    def export_to_csv(self, terms: Sequence[AnalyzedTerm], filepath: Union[str, Path]) -> Optional[Path]:
        if not terms:
            logger.info("Нет термов для экспорта в CSV")
            return None
        filepath = _with_suffix(filepath, '.csv')
        self.to_dataframe(terms).to_csv(filepath, index=False, encoding='utf-8')
        logger.info(f"Термы экспортированы в CSV: {filepath}")
        return filepath

    def export_to_json(self, terms: Sequence[AnalyzedTerm], filepath: Union[str, Path]) -> Optional[Path]:
        """
        Экспортирует термы в JSON с блоком метаданных.

        Args:
            terms: Проанализированные термы
            filepath: Путь к файлу (.json добавляется, если расширения нет)
        """
        if not terms:
            logger.info("Нет термов для экспорта в JSON")
            return None
        filepath = _with_suffix(filepath, '.json')
        json_data = {
            'metadata': {
                'timestamp': datetime.now().isoformat(),
                'total_terms': len(terms),
            },
            'terms': [t.to_dict() for t in terms],
        }
        with open(filepath, 'w', encoding='utf-8') as jsonfile:
            json.dump(json_data, jsonfile, ensure_ascii=False, indent=2)
        logger.info(f"Термы экспортированы в JSON: {filepath}")
        return filepath

    def export_all_formats(self, terms: Sequence[AnalyzedTerm], base_filename: str) -> Dict[str, Path]:
        """
        Экспортирует термы во все форматы в папку output_dir.

        Args:
            terms: Проанализированные термы
            base_filename: Имя файла без расширения; к нему добавляется метка времени

        Returns:
            Словарь: формат -> путь к записанному файлу
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        base = self.output_dir / f"{base_filename}_{timestamp}"

        exported: Dict[str, Path] = {}
        for name, export in (
            ('excel', self.export_to_excel),
            ('csv', self.export_to_csv),
            ('json', self.export_to_json),
        ):
            path = export(terms, base)
            if path is not None:
                exported[name] = path
        logger.info(f"Термы экспортированы в {len(exported)} формата(ов) в {self.output_dir}")
        return exported


def _with_suffix(filepath: Union[str, Path], suffix: str) -> Path:
    filepath = Path(filepath)
    if not filepath.suffix:
        filepath = filepath.with_suffix(suffix)
    return filepath
