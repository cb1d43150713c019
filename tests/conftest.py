"""
Gemeinsame Test-Fixtures und Konfiguration.
"""
import sys
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import pytest

# Füge das Projekt-Root-Verzeichnis zum Python-Pfad hinzu
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from wfs_import.models import Origin  # noqa: E402
from wfs_import.transformer import CoordinateTransformer  # noqa: E402

BUILDING = "AX_Gebaeude"
PARCEL = "AX_Flurstueck"

# 10 x 10 m Quadrat in lokalen Metern
SQUARE = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]


def make_pos_list(transformer: CoordinateTransformer, origin: Origin,
                  points: Sequence[Tuple[float, float]], z: float = 50.0,
                  close: bool = True) -> str:
    """Erzeugt eine posList (x y z ...) im projizierten System aus lokalen Punkten."""
    ring = list(points) + ([points[0]] if close else [])
    values = []
    for x, y in ring:
        latitude, longitude = origin.from_local(x, y)
        px, py = transformer.to_projected(longitude, latitude)
        values.extend([f"{px:.6f}", f"{py:.6f}", f"{z:.3f}"])
    return " ".join(values)


def feature_xml(type_name: str, gml_id: str, pos_list: str, extra: str = "") -> str:
    """Ein wfs:member mit Feature im ALKIS-Stil."""
    return f"""
    <wfs:member>
        <{type_name} gml:id="{gml_id}">
            <gml:identifier codeSpace="http://www.adv-online.de/">urn:adv:oid:{gml_id}</gml:identifier>
            <lebenszeitintervall>
                <AA_Lebenszeitintervall>
                    <beginnt>2019-03-14T10:21:05Z</beginnt>
                </AA_Lebenszeitintervall>
            </lebenszeitintervall>
            <position>
                <gml:Polygon gml:id="{gml_id}_poly">
                    <gml:exterior>
                        <gml:LinearRing>
                            <gml:posList>{pos_list}</gml:posList>
                        </gml:LinearRing>
                    </gml:exterior>
                </gml:Polygon>
            </position>
            {extra}
        </{type_name}>
    </wfs:member>"""


def collection_xml(members: List[str]) -> str:
    """Umschließt Member mit einer wfs:FeatureCollection."""
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<wfs:FeatureCollection xmlns="http://www.adv-online.de/namespaces/adv/gid/7.1"
    xmlns:wfs="http://www.opengis.net/wfs/2.0"
    xmlns:gml="http://www.opengis.net/gml/3.2"
    numberMatched="{len(members)}" numberReturned="{len(members)}">
    {"".join(members)}
</wfs:FeatureCollection>"""


@pytest.fixture(scope="session")
def transformer() -> CoordinateTransformer:
    return CoordinateTransformer()


@pytest.fixture
def origin() -> Origin:
    return Origin(latitude=51.0, longitude=7.0, elevation=0.0)


@pytest.fixture
def square_pos_list(transformer, origin) -> str:
    return make_pos_list(transformer, origin, SQUARE)


@pytest.fixture
def building_response(square_pos_list) -> str:
    """WFS-Antwort mit einem Gebäude."""
    extra = """
            <gebaeudefunktion>2000</gebaeudefunktion>
            <anzahlDerOberirdischenGeschosse>3</anzahlDerOberirdischenGeschosse>
            <name>Rathaus</name>"""
    return collection_xml([feature_xml(BUILDING, "DENW36AL1000abcd", square_pos_list, extra)])


@pytest.fixture
def parcel_response(transformer, origin) -> str:
    """WFS-Antwort mit einem Flurstück."""
    pos_list = make_pos_list(transformer, origin, [(-20.0, -20.0), (30.0, -20.0), (30.0, 25.0), (-20.0, 25.0)])
    extra = """
            <flurstueckskennzeichen>053041001000120000__</flurstueckskennzeichen>
            <amtlicheFlaeche uom="m2">2250</amtlicheFlaeche>
            <flurnummer>1</flurnummer>"""
    return collection_xml([feature_xml(PARCEL, "DENW36AL2000wxyz", pos_list, extra)])


@pytest.fixture
def responses(building_response, parcel_response) -> Dict[str, str]:
    return {BUILDING: building_response, PARCEL: parcel_response}


@pytest.fixture
def boundary() -> List[Tuple[float, float, float]]:
    """100 x 100 m Region um den Ursprung."""
    return [(-50.0, -50.0, 0.0), (50.0, -50.0, 0.0), (50.0, 50.0, 0.0), (-50.0, 50.0, 0.0)]
