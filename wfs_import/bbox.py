"""
Übersetzung einer lokalen Bounding Box in eine WFS-BBOX.
"""

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

from .models import Origin, ProjectedBoundingBox
from .transformer import CoordinateTransformer

logger = logging.getLogger(__name__)

Point3 = Tuple[float, float, float]


@dataclass(frozen=True)
class BoundingBox:
    """Achsparallele 3D-Box in lokalen Metern."""
    min: Point3
    max: Point3

    @classmethod
    def from_vertices(cls, vertices: Sequence[Sequence[float]]) -> "BoundingBox":
        """Erstellt die Box aus einer Punktmenge (2D-Punkte erhalten z = 0).

        Raises:
            ValueError: Wenn keine Punkte übergeben werden
        """
        points = [
            (float(v[0]), float(v[1]), float(v[2]) if len(v) > 2 else 0.0)
            for v in vertices
        ]
        if not points:
            raise ValueError("Keine Eckpunkte für die Bounding Box übergeben")
        xs, ys, zs = zip(*points)
        return cls((min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs)))

    @property
    def is_degenerate(self) -> bool:
        return self.min == self.max


def translate_bbox(bbox: BoundingBox, origin: Origin,
                   transformer: CoordinateTransformer) -> ProjectedBoundingBox:
    """Übersetzt eine lokale Box in eine BBOX im projizierten System.

    Die Min- und Max-Ecke werden über den Ursprung in geographische
    Koordinaten und anschließend ins projizierte System umgerechnet. Eine
    degenerierte Box ergibt eine Punkt-BBOX, die unverändert weitergegeben
    wird.

    Args:
        bbox: Box in lokalen Metern
        origin: Ursprung des lokalen Systems
        transformer: Koordinatentransformation

    Returns:
        ProjectedBoundingBox: (min_x, min_y, max_x, max_y) in Metern
    """
    if bbox.is_degenerate:
        logger.warning("⚠️ Degenerierte Bounding Box, BBOX-Abfrage ist ein Punkt")

    projected = []
    for x, y, _z in (bbox.min, bbox.max):
        latitude, longitude = origin.from_local(x, y)
        projected.append(transformer.to_projected(longitude, latitude))

    xs, ys = zip(*projected)
    result = ProjectedBoundingBox(min(xs), min(ys), max(xs), max(ys))
    logger.debug(f"📐 BBOX im projizierten System: {result.as_tuple()}")
    return result
