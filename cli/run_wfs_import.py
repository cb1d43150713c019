"""
CLI-Schnittstelle für den WFS-Import von Gebäuden und Flurstücken.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import click

from core.config_manager import get_module_config, load_config
from core.logging_config import setup_logging
from wfs_import import Origin, WFSConfig, WFSImporter, WFSImportError
from wfs_import.output import write_geojson

# Logger-Konfiguration
setup_logging()
logger = logging.getLogger(__name__)


class WFSImportCLIError(Exception):
    """Fehler beim Ausführen des Imports über die CLI."""
    def __init__(self, message: str, details: Optional[Exception] = None):
        self.message = message
        self.details = details
        super().__init__(f"{message}" + (f": {str(details)}" if details else ""))


def square_boundary(size: float) -> List[Tuple[float, float, float]]:
    """Quadratische Region der Kantenlänge ``size`` um den Ursprung."""
    half = size / 2.0
    return [(-half, -half, 0.0), (half, -half, 0.0), (half, half, 0.0), (-half, half, 0.0)]


def load_wfs_config(config: Optional[str]) -> WFSConfig:
    """Lädt die WFS-Konfiguration aus einer Datei oder nutzt die Standardwerte."""
    if config is None:
        return WFSConfig()

    config_path = Path(config)
    if not config_path.is_file():
        raise WFSImportCLIError(f"Konfigurationsdatei nicht gefunden: {config}")
    try:
        global_config = load_config(config_path)
    except (OSError, ValueError) as e:
        raise WFSImportCLIError("Fehler beim Laden der Konfiguration", e)

    level = (global_config.get('logging') or {}).get('level')
    if level:
        numeric_level = logging.getLevelName(str(level).upper())
        if not isinstance(numeric_level, int):
            raise WFSImportCLIError(f"Ungültiges Logging-Level: {level}")
        setup_logging(numeric_level)

    wfs_section = get_module_config(global_config, 'wfs')
    if not wfs_section:
        raise WFSImportCLIError(f"Kein Abschnitt 'wfs' in {config}")
    return WFSConfig(config=wfs_section)


@click.command()
@click.option('--lat', type=float, required=True, help='Breite des Ursprungs (WGS84)')
@click.option('--lon', type=float, required=True, help='Länge des Ursprungs (WGS84)')
@click.option('--elevation', type=float, default=0.0, help='Höhe des Ursprungs in Metern')
@click.option('--size', type=float, default=100.0, help='Kantenlänge der Region in Metern')
@click.option('--config', '-c', default=None, help='Pfad zur Konfigurationsdatei')
@click.option('--output', '-o', default=None, help='GeoJSON-Ausgabedatei')
def run_wfs_import(lat: float, lon: float, elevation: float, size: float,
                   config: Optional[str], output: Optional[str]):
    """Importiert Gebäude und Flurstücke für eine Region um den Ursprung."""
    try:
        if size <= 0:
            raise WFSImportCLIError(f"Ungültige Kantenlänge: {size}")

        wfs_config = load_wfs_config(config)
        try:
            importer = WFSImporter(wfs_config)
        except ValueError as e:
            raise WFSImportCLIError("Ungültige WFS-Konfiguration", e)

        logger.info("🚀 Starte WFS-Import...")
        try:
            result = importer.run(Origin(lat, lon, elevation), square_boundary(size))
        except WFSImportError as e:
            raise WFSImportCLIError("WFS-Import abgebrochen", e)

        for name, stats in result.summary().items():
            click.echo(f"{name}: {stats['elements']} Elemente, {stats['skipped']} übersprungen"
                       + (f", Fehler: {stats['error']}" if stats['error'] else ""))

        if output:
            write_geojson(result.elements, output)

        if result.failed_datasets:
            raise WFSImportCLIError(
                f"Datensätze fehlgeschlagen: {', '.join(result.failed_datasets)}"
            )

        logger.info("✅ WFS-Import erfolgreich abgeschlossen")

    except WFSImportCLIError as e:
        logger.error(f"❌ WFS-Import mit Fehlern beendet: {e.message}")
        if e.details:
            logger.debug(f"Details: {str(e.details)}")
        raise click.Abort()


if __name__ == "__main__":
    run_wfs_import()
