"""
Fehlerklassen für den WFS-Import.

Die Hierarchie trennt drei Ebenen:
    - fatal (``CoordinateSystemError``): bricht den gesamten Import ab
    - Datensatz (``DatasetFetchError``, ``DatasetParseError``): der betroffene
      Datensatz liefert keine Elemente, der andere bleibt unberührt
    - Feature (``FeatureParseError``, ``GeometryError``): das Feature wird
      übersprungen und als ``FeatureSkip`` protokolliert
"""

from typing import Optional


class WFSImportError(Exception):
    """Basisklasse für alle Fehler des WFS-Imports."""
    pass


class CoordinateSystemError(WFSImportError):
    """Ungültige Koordinatensystem-Definition."""
    pass


class DatasetError(WFSImportError):
    """Fehler, der einen ganzen Datensatz betrifft."""

    def __init__(self, message: str, dataset: Optional[str] = None):
        self.dataset = dataset
        prefix = f"[{dataset}] " if dataset else ""
        super().__init__(f"{prefix}{message}")


class DatasetFetchError(DatasetError):
    """Netzwerkfehler, Timeout oder HTTP-Status ungleich 2xx."""
    pass


class DatasetParseError(DatasetError):
    """Antwort ist kein lesbares WFS-FeatureCollection-Dokument."""
    pass


class FeatureParseError(WFSImportError):
    """Ein einzelnes Feature konnte nicht gelesen werden."""
    pass


class GeometryError(FeatureParseError):
    """Ungültige oder degenerierte Feature-Geometrie."""
    pass
