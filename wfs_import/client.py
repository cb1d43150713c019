"""
WFS-Client für GetFeature-Abfragen.
"""

import logging
from typing import Dict

import requests

from .exceptions import DatasetFetchError
from .models import ProjectedBoundingBox

logger = logging.getLogger(__name__)


class WFSClient:
    """Client für GetFeature-Anfragen an einen WFS 2.0.0."""

    def __init__(self, url: str, version: str = '2.0.0', timeout: float = 30,
                 epsg_code: int = 25832):
        """
        Initialisiert den WFS-Client.

        Args:
            url: URL des WFS-Dienstes
            version: WFS-Version (default: 2.0.0)
            timeout: Timeout pro Anfrage in Sekunden
            epsg_code: EPSG-Code des BBOX-Koordinatensystems
        """
        self.url = url
        self.version = version
        self.timeout = timeout
        self.epsg_code = epsg_code

    def build_params(self, type_name: str, bbox: ProjectedBoundingBox) -> Dict[str, str]:
        """Parameter einer GetFeature-Anfrage."""
        return {
            'VERSION': self.version,
            'SERVICE': 'WFS',
            'REQUEST': 'GetFeature',
            'TYPENAMES': type_name,
            'BBOX': bbox.to_query(self.epsg_code),
        }

    def get_feature(self, type_name: str, bbox: ProjectedBoundingBox) -> bytes:
        """
        Ruft die Features eines Typs innerhalb der BBOX ab.

        Args:
            type_name: Name des Featuretyps
            bbox: BBOX im projizierten System

        Returns:
            bytes: Antwort des WFS

        Raises:
            DatasetFetchError: Bei Verbindungsfehler, Timeout oder HTTP-Fehlerstatus
        """
        params = self.build_params(type_name, bbox)
        logger.info(f"🔄 [{type_name}] GetFeature für BBOX {params['BBOX']}")
        try:
            response = requests.get(self.url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise DatasetFetchError(f"WFS-Anfrage fehlgeschlagen: {str(e)}", type_name) from e

        logger.info(f"✅ [{type_name}] {len(response.content)} Bytes empfangen")
        return response.content
