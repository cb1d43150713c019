"""
Konfigurationsmanager für den WFS-Import.

Dieses Modul stellt Funktionen zum Laden von YAML-Konfigurationsdateien
und zum Zugriff auf modulspezifische Abschnitte bereit.
"""

import logging
from pathlib import Path
from typing import Dict, Any, Union, Optional

import yaml

from core.logging_config import LoggedOperation

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"

def load_config(config_file: Union[str, Path]) -> Dict[str, Any]:
    """Lädt eine YAML-Konfigurationsdatei.

    Args:
        config_file: Pfad zur Konfigurationsdatei

    Returns:
        Dictionary mit der Konfiguration

    Raises:
        FileNotFoundError: Wenn die Datei nicht existiert
        ValueError: Bei falscher Endung, leerer Datei oder YAML-Syntaxfehler
    """
    with LoggedOperation("Konfiguration laden", logger):
        config_path = Path(config_file)

        if not config_path.exists():
            raise FileNotFoundError(f"Konfigurationsdatei nicht gefunden: {config_path}")

        if config_path.suffix not in ('.yml', '.yaml'):
            raise ValueError(f"Ungültiges Dateiformat: {config_path.suffix}")

        with open(config_path, 'r', encoding='utf-8') as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"YAML Syntax-Fehler in {config_path}") from e

        if not config:
            raise ValueError(f"Leere Konfigurationsdatei: {config_path}")

        logger.info(f"✅ Konfiguration geladen: {config_path}")
        return config

def get_module_config(global_config: Dict[str, Any], module_name: str) -> Optional[Dict[str, Any]]:
    """Holt die Konfiguration für ein spezifisches Modul.

    Args:
        global_config: Globale Konfiguration
        module_name: Name des Moduls (z.B. 'wfs')

    Returns:
        Modulspezifische Konfiguration oder None
    """
    section = global_config.get(module_name)
    if section is None:
        logger.warning(f"⚠️ Keine Konfiguration für Modul '{module_name}' gefunden")
    return section

def get_config_path(filename: str = "global.yml") -> Path:
    """Gibt den Pfad zu einer Datei im Konfigurationsverzeichnis zurück."""
    return CONFIG_DIR / filename
