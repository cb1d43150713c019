"""
Abruf und Aufbau der Elemente je Datensatz.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .client import WFSClient
from .elements import OutputElement, assemble_element
from .exceptions import DatasetError
from .models import DatasetSpec, FeatureSkip, ProjectedBoundingBox
from .parser import FeatureParser

logger = logging.getLogger(__name__)


@dataclass
class DatasetResult:
    """Ergebnis eines Datensatzes.

    Bei einem Datensatzfehler ist ``elements`` leer und ``error`` gesetzt.
    """
    dataset: DatasetSpec
    elements: List[OutputElement] = field(default_factory=list)
    skipped: List[FeatureSkip] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DatasetFetcher:
    """Holt einen Datensatz vom WFS und baut die Ausgabe-Elemente."""

    def __init__(self, client: WFSClient, parser: FeatureParser):
        self.client = client
        self.parser = parser

    def fetch(self, dataset: DatasetSpec, bbox: ProjectedBoundingBox) -> DatasetResult:
        """Holt und verarbeitet einen Datensatz.

        Fehler auf Datensatzebene werden im Ergebnis vermerkt und nicht
        weitergereicht, damit andere Datensätze unberührt bleiben.
        """
        try:
            body = self.client.get_feature(dataset.name, bbox)
            parsed = self.parser.parse(body, dataset.name)
        except DatasetError as e:
            logger.error(f"❌ {str(e)}")
            return DatasetResult(dataset=dataset, error=str(e))

        elements = [
            assemble_element(feature.polygon, dataset.as_curve, dataset.name, feature.attributes)
            for feature in parsed.features
        ]
        logger.info(f"✅ [{dataset.name}] {len(elements)} Elemente erstellt")
        return DatasetResult(dataset=dataset, elements=elements, skipped=parsed.skipped)


def fetch_datasets(fetcher: DatasetFetcher, datasets: Sequence[DatasetSpec],
                   bbox: ProjectedBoundingBox) -> Dict[str, DatasetResult]:
    """Holt alle Datensätze parallel und wartet auf alle Ergebnisse.

    Returns:
        Dict[str, DatasetResult]: Ergebnisse in der Reihenfolge von ``datasets``
    """
    if not datasets:
        return {}

    with ThreadPoolExecutor(max_workers=len(datasets), thread_name_prefix="wfs") as executor:
        futures = [(dataset, executor.submit(fetcher.fetch, dataset, bbox)) for dataset in datasets]
        return {dataset.name: future.result() for dataset, future in futures}
