"""
WFS-Konfiguration für den Import von Gebäuden und Flurstücken.
"""

import copy
import logging
from typing import Dict, Any, Optional, List

import yaml

from .elements import BUILTIN_MATERIALS
from .models import DatasetSpec
from .transformer import ETRS89_UTM32N_WKT

DEFAULT_CONFIG: Dict[str, Any] = {
    'url': 'https://www.wfs.nrw.de/geobasis/wfs_nw_alkis_aaa-modell-basiert',
    'version': '2.0.0',
    'timeout': 30,
    'epsg_code': 25832,
    'projected_wkt': ETRS89_UTM32N_WKT,
    'namespaces': {
        'wfs': 'http://www.opengis.net/wfs/2.0',
        'gml': 'http://www.opengis.net/gml/3.2',
    },
    'datasets': [
        {'name': 'AX_Gebaeude', 'as_curve': False, 'material': 'XAxis'},
        {'name': 'AX_Flurstueck', 'as_curve': True},
    ],
}


class WFSConfig:
    """Konfiguration für WFS-Abfragen."""

    def __init__(self, config: Optional[Dict[str, Any]] = None, config_path: Optional[str] = None):
        """Initialisiert die WFS-Konfiguration.

        Standardwerte werden zuerst von der Datei, dann vom Dictionary
        überschrieben.

        Args:
            config: Optional[Dict] - Direkte Konfiguration
            config_path: Optional[str] - Pfad zu einer YAML-Datei (Abschnitt ``wfs`` oder flach)
        """
        self.logger = logging.getLogger(__name__)
        self._config = copy.deepcopy(DEFAULT_CONFIG)

        if config_path:
            self._load_config_file(config_path)

        if config:
            self._config.update(config)

        self.logger.debug("✅ WFS-Konfiguration initialisiert")

    def _load_config_file(self, config_path: str) -> None:
        """Lädt die Konfiguration aus einer Datei.

        Raises:
            OSError, yaml.YAMLError: Wenn die Datei nicht gelesen werden kann
        """
        with open(config_path, 'r', encoding='utf-8') as f:
            file_config = yaml.safe_load(f)

        if not file_config:
            self.logger.warning(f"⚠️ Leere Konfigurationsdatei: {config_path}")
            return

        section = file_config.get('wfs') if 'wfs' in file_config else file_config
        if not section:
            self.logger.warning(f"⚠️ Leerer Abschnitt 'wfs' in: {config_path}")
            return

        self._config.update(section)
        self.logger.info(f"✅ WFS-Konfiguration geladen von: {config_path}")

    def validate(self) -> List[str]:
        """Prüft die Konfiguration.

        Returns:
            List[str]: Fehlermeldungen, leer wenn gültig
        """
        errors = []
        if not self.url:
            errors.append("Keine WFS-URL konfiguriert")
        if not isinstance(self._config.get('timeout'), (int, float)) or self.timeout <= 0:
            errors.append("Timeout muss eine positive Zahl sein")
        if not self._config.get('datasets'):
            errors.append("Keine Datensätze konfiguriert")
        names = set()
        for entry in self._config.get('datasets') or []:
            if not isinstance(entry, dict) or not entry.get('name'):
                errors.append(f"Ungültiger Datensatz-Eintrag: {entry}")
                continue
            if entry['name'] in names:
                errors.append(f"Doppelter Datensatz: {entry['name']}")
            names.add(entry['name'])
            if entry.get('material') and entry['material'] not in BUILTIN_MATERIALS:
                errors.append(f"Unbekanntes Material: {entry['material']}")
        return errors

    @property
    def url(self) -> Optional[str]:
        """WFS Service URL."""
        return self._config.get('url')

    @property
    def version(self) -> str:
        return self._config.get('version', '2.0.0')

    @property
    def timeout(self) -> float:
        """Request Timeout in Sekunden."""
        return self._config.get('timeout', 30)

    @property
    def epsg_code(self) -> int:
        return int(self._config.get('epsg_code', 25832))

    @property
    def projected_wkt(self) -> str:
        return self._config.get('projected_wkt', ETRS89_UTM32N_WKT)

    @property
    def namespaces(self) -> Dict[str, str]:
        return self._config.get('namespaces', {})

    @property
    def datasets(self) -> List[DatasetSpec]:
        """Konfigurierte Datensätze in Abfragereihenfolge."""
        return [
            DatasetSpec(
                name=entry['name'],
                as_curve=bool(entry.get('as_curve', False)),
                material=entry.get('material'),
            )
            for entry in self._config.get('datasets', [])
        ]
