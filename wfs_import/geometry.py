"""
Geometrie-Builder für GML-Polygone aus WFS-Antworten.
"""

import math
from typing import Dict, List, Tuple

from lxml import etree
from shapely.geometry import Polygon

from .exceptions import GeometryError
from .models import Origin
from .transformer import CoordinateTransformer

GML_NAMESPACE = 'http://www.opengis.net/gml/3.2'

# Pfad vom position-Element zur Koordinatenliste
POS_LIST_PATH = 'gml:Polygon/gml:exterior/gml:LinearRing/gml:posList'

# Mindestverhältnis Fläche zu Umfang² für einen gültigen Ring
AREA_TOLERANCE = 1e-6


class GeometryBuilder:
    """Baut lokale Polygone aus ``position``-Elementen."""

    def __init__(self, transformer: CoordinateTransformer, origin: Origin,
                 namespaces: Dict[str, str] = None):
        """Initialisiert den Geometrie-Builder.

        Args:
            transformer: Transformation projiziert <-> WGS84
            origin: Ursprung des lokalen Systems
            namespaces: XML-Namespaces (benötigt wird ``gml``)
        """
        self.transformer = transformer
        self.origin = origin
        self.namespaces = {'gml': GML_NAMESPACE}
        if namespaces:
            self.namespaces.update({k: v for k, v in namespaces.items() if k == 'gml'})

    def read_pos_list(self, position: etree._Element) -> List[Tuple[float, float, float]]:
        """Liest die Koordinatentripel des äußeren Rings.

        Args:
            position: ``position``-Element des Features

        Returns:
            List[Tuple[float, float, float]]: (x, y, z) in projizierten Metern

        Raises:
            GeometryError: Fehlender Knoten, falsche Anzahl oder nicht-numerische Werte
        """
        pos_list = position.find(POS_LIST_PATH, namespaces=self.namespaces)
        if pos_list is None:
            raise GeometryError(f"Kein {POS_LIST_PATH} in position gefunden")

        tokens = (pos_list.text or '').split()
        if not tokens or len(tokens) % 3 != 0:
            raise GeometryError(
                f"posList enthält {len(tokens)} Werte, erwartet ein Vielfaches von 3"
            )

        try:
            values = [float(token) for token in tokens]
        except ValueError as e:
            raise GeometryError(f"Nicht-numerischer Wert in posList: {str(e)}") from e

        return [tuple(values[i:i + 3]) for i in range(0, len(values), 3)]

    def to_local(self, coordinates: List[Tuple[float, float, float]]) -> List[Tuple[float, float]]:
        """Projizierte Tripel -> lokale 2D-Punkte. z wird verworfen."""
        points = []
        for x, y, _z in coordinates:
            longitude, latitude = self.transformer.to_geographic(x, y)
            if not (math.isfinite(longitude) and math.isfinite(latitude)):
                raise GeometryError(f"Koordinate ({x}, {y}) nicht transformierbar")
            points.append(self.origin.to_local(latitude, longitude))
        return points

    def build_polygon(self, coordinates: List[Tuple[float, float, float]]) -> Polygon:
        """Erstellt ein geschlossenes, ebenes Polygon im lokalen System.

        Raises:
            GeometryError: Weniger als 3 verschiedene Punkte oder Fläche 0
        """
        points = self.to_local(coordinates)

        # Schließenden Punkt entfernen, shapely schließt den Ring selbst
        if len(points) > 1 and points[0] == points[-1]:
            points = points[:-1]

        if len(set(points)) < 3:
            raise GeometryError(f"Polygon hat nur {len(set(points))} verschiedene Punkte")

        polygon = Polygon(points)
        # Kollineare Ringe behalten nach der Transformation eine Restfläche
        if polygon.area <= AREA_TOLERANCE * polygon.length ** 2:
            raise GeometryError("Polygon ist degeneriert (Fläche 0)")
        return polygon

    def build(self, position: etree._Element) -> Tuple[List[Tuple[float, float, float]], Polygon]:
        """Liest und baut die Geometrie eines ``position``-Elements."""
        coordinates = self.read_pos_list(position)
        return coordinates, self.build_polygon(coordinates)
