"""
Export der Ausgabe-Elemente als GeoDataFrame bzw. GeoJSON.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Union

import geopandas as gpd
from shapely.geometry import LinearRing, LineString

from .elements import OutputElement
from .models import AttributeKind, AttributeValue

logger = logging.getLogger(__name__)


def flatten_value(value: AttributeValue) -> Any:
    """Verschachtelte Werte werden als JSON-String abgelegt."""
    if value.kind in (AttributeKind.MAPPING, AttributeKind.LIST):
        return json.dumps(value.to_python(), ensure_ascii=False)
    return value.value


def elements_to_geodataframe(elements: Iterable[OutputElement]) -> gpd.GeoDataFrame:
    """Wandelt Elemente in einen GeoDataFrame im lokalen System (ohne CRS) um."""
    records = []
    for element in elements:
        record = {
            'element_name': element.name,
            'representation': element.representation.value,
            'material': element.material.name if element.material else None,
        }
        for key, value in element.additional_properties.items():
            record[key] = flatten_value(value)
        geometry = element.geometry
        if isinstance(geometry, LinearRing):
            # GeoJSON kennt keinen LinearRing
            geometry = LineString(geometry.coords)
        record['geometry'] = geometry
        records.append(record)

    if not records:
        return gpd.GeoDataFrame(columns=['element_name', 'representation', 'material', 'geometry'],
                                geometry='geometry')
    return gpd.GeoDataFrame(records, geometry='geometry')


def write_geojson(elements: Iterable[OutputElement], output_path: Union[str, Path]) -> Path:
    """Speichert die Elemente als GeoJSON.

    Returns:
        Path: Pfad der geschriebenen Datei
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    gdf = elements_to_geodataframe(elements)
    gdf.to_file(output_path, driver='GeoJSON')
    logger.info(f"✅ {len(gdf)} Elemente als GeoJSON gespeichert: {output_path}")
    return output_path
