"""
Import von Gebäuden und Flurstücken für eine lokale Projektregion.

Ablauf:
    1. Koordinatentransformation aufbauen (Fehler sind fatal)
    2. Lokale Bounding Box in eine BBOX im projizierten System übersetzen
    3. Alle Datensätze parallel abrufen, parsen und in Elemente umwandeln
    4. Materialien zuweisen und Ergebnisse zusammenführen
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

from core.logging_config import LoggedOperation

from .bbox import BoundingBox, translate_bbox
from .client import WFSClient
from .config import WFSConfig
from .elements import OutputElement, apply_material, get_material
from .exceptions import DatasetError
from .fetcher import DatasetFetcher, DatasetResult, fetch_datasets
from .geometry import GeometryBuilder
from .models import Origin, ProjectedBoundingBox
from .parser import FeatureParser
from .transformer import CoordinateTransformer

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    """Zusammengeführtes Ergebnis aller Datensätze."""
    bbox: ProjectedBoundingBox
    datasets: Dict[str, DatasetResult] = field(default_factory=dict)

    @property
    def elements(self) -> List[OutputElement]:
        """Alle Elemente in der Reihenfolge der Datensätze."""
        return [element for result in self.datasets.values() for element in result.elements]

    @property
    def failed_datasets(self) -> List[str]:
        return [name for name, result in self.datasets.items() if not result.ok]

    def raise_for_failures(self) -> None:
        """Löst einen ``DatasetError`` aus, wenn ein Datensatz fehlgeschlagen ist."""
        failed = self.failed_datasets
        if failed:
            errors = "; ".join(self.datasets[name].error for name in failed)
            raise DatasetError(f"{len(failed)} Datensatz/Datensätze fehlgeschlagen: {errors}")

    def summary(self) -> Dict[str, Dict[str, Any]]:
        """Elementanzahl, übersprungene Features und Fehler je Datensatz."""
        return {
            name: {
                'elements': len(result.elements),
                'skipped': len(result.skipped),
                'error': result.error,
            }
            for name, result in self.datasets.items()
        }


class WFSImporter:
    """Importiert die konfigurierten WFS-Datensätze für eine Region."""

    def __init__(self, config: Optional[WFSConfig] = None):
        """Initialisiert den Importer.

        Args:
            config: WFS-Konfiguration (default: Standardkonfiguration)

        Raises:
            ValueError: Bei ungültiger Konfiguration
        """
        self.config = config or WFSConfig()
        errors = self.config.validate()
        if errors:
            raise ValueError(f"Ungültige WFS-Konfiguration: {'; '.join(errors)}")

        self.client = WFSClient(
            url=self.config.url,
            version=self.config.version,
            timeout=self.config.timeout,
            epsg_code=self.config.epsg_code,
        )

    def run(self, origin: Origin, boundary: Sequence[Sequence[float]]) -> ImportResult:
        """Führt den Import aus.

        Args:
            origin: Ursprung des lokalen Systems
            boundary: Eckpunkte der Region in lokalen Metern

        Returns:
            ImportResult

        Raises:
            CoordinateSystemError: Bei ungültiger Koordinatensystem-Definition
        """
        with LoggedOperation("WFS-Import", logger):
            transformer = CoordinateTransformer(self.config.projected_wkt)
            bbox = translate_bbox(BoundingBox.from_vertices(boundary), origin, transformer)

            builder = GeometryBuilder(transformer, origin, self.config.namespaces)
            parser = FeatureParser(builder, self.config.namespaces)
            fetcher = DatasetFetcher(self.client, parser)

            datasets = self.config.datasets
            results = fetch_datasets(fetcher, datasets, bbox)

            for dataset in datasets:
                if dataset.material and not dataset.as_curve:
                    result = results[dataset.name]
                    result.elements = apply_material(result.elements, get_material(dataset.material))

            import_result = ImportResult(bbox=bbox, datasets=results)
            for name, stats in import_result.summary().items():
                if stats['error']:
                    logger.error(f"❌ [{name}] fehlgeschlagen: {stats['error']}")
                else:
                    logger.info(
                        f"📊 [{name}] {stats['elements']} Elemente, "
                        f"{stats['skipped']} Features übersprungen"
                    )
            return import_result


def import_region(origin: Union[Origin, Dict[str, Any]], boundary: Sequence[Sequence[float]],
                  config: Optional[Union[WFSConfig, Dict[str, Any]]] = None) -> ImportResult:
    """Hilfsfunktion für einen einzelnen Import.

    Args:
        origin: Ursprung oder Dictionary mit ``latitude``/``longitude``/``elevation``
        boundary: Eckpunkte der Region in lokalen Metern
        config: WFSConfig oder Dictionary mit Konfigurationswerten

    Returns:
        ImportResult
    """
    if isinstance(origin, dict):
        origin = Origin.from_dict(origin)
    if not isinstance(config, WFSConfig):
        config = WFSConfig(config=config)
    return WFSImporter(config).run(origin, boundary)
