"""
Datenmodell für den WFS-Import.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from shapely.geometry import Polygon

# Erdradius wie im WGS84-Ellipsoid (große Halbachse)
EARTH_RADIUS = 6378137.0


@dataclass(frozen=True)
class Origin:
    """Geographischer Bezugspunkt des lokalen Projektkoordinatensystems.

    Lokale Koordinaten sind Meter in Ost- (x) und Nordrichtung (y) relativ
    zum Ursprung. Die Umrechnung nutzt eine sphärische, äquirektanguläre
    Näherung; ``from_local`` und ``to_local`` sind exakt invers zueinander.
    """
    latitude: float
    longitude: float
    elevation: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Origin":
        """Erstellt einen Ursprung aus einem Dictionary (``latitude``/``lat`` usw.)."""
        try:
            latitude = data['latitude'] if 'latitude' in data else data['lat']
            longitude = data['longitude'] if 'longitude' in data else data['lon']
        except KeyError as e:
            raise ValueError(f"Ursprung ohne Feld {e}") from e
        return cls(float(latitude), float(longitude), float(data.get('elevation', 0.0)))

    @property
    def _meters_per_degree_lat(self) -> float:
        return EARTH_RADIUS * math.pi / 180.0

    @property
    def _meters_per_degree_lon(self) -> float:
        return self._meters_per_degree_lat * math.cos(math.radians(self.latitude))

    def from_local(self, x: float, y: float) -> Tuple[float, float]:
        """Lokale Meter -> (Breite, Länge)."""
        latitude = self.latitude + y / self._meters_per_degree_lat
        longitude = self.longitude + x / self._meters_per_degree_lon
        return latitude, longitude

    def to_local(self, latitude: float, longitude: float) -> Tuple[float, float]:
        """(Breite, Länge) -> lokale Meter."""
        x = (longitude - self.longitude) * self._meters_per_degree_lon
        y = (latitude - self.latitude) * self._meters_per_degree_lat
        return x, y


@dataclass(frozen=True)
class ProjectedBoundingBox:
    """BBOX im projizierten Koordinatensystem (Meter)."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return self.min_x, self.min_y, self.max_x, self.max_y

    def to_query(self, epsg_code: int) -> str:
        """Formatiert die BBOX für den WFS-2.0.0-Parameter ``BBOX``."""
        coords = ",".join(repr(float(v)) for v in self.as_tuple())
        return f"{coords},urn:ogc:def:crs:EPSG::{epsg_code}"


class AttributeKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    MAPPING = "mapping"
    LIST = "list"


@dataclass(frozen=True)
class AttributeValue:
    """Getaggter Attributwert eines Features."""
    kind: AttributeKind
    value: Any

    @classmethod
    def string(cls, value: str) -> "AttributeValue":
        return cls(AttributeKind.STRING, value)

    @classmethod
    def number(cls, value: float) -> "AttributeValue":
        return cls(AttributeKind.NUMBER, value)

    @classmethod
    def mapping(cls, value: Dict[str, "AttributeValue"]) -> "AttributeValue":
        return cls(AttributeKind.MAPPING, value)

    @classmethod
    def sequence(cls, values: Iterable["AttributeValue"]) -> "AttributeValue":
        return cls(AttributeKind.LIST, tuple(values))

    def to_python(self) -> Any:
        """Wandelt den Wert rekursiv in einfache Python-Typen um."""
        if self.kind == AttributeKind.MAPPING:
            return {k: v.to_python() for k, v in self.value.items()}
        if self.kind == AttributeKind.LIST:
            return [v.to_python() for v in self.value]
        return self.value


Attributes = Dict[str, AttributeValue]


@dataclass
class ParsedFeature:
    """Ein gelesenes Feature.

    ``coordinates`` enthält den Ring in projizierten Metern (x, y, z),
    ``polygon`` denselben Ring im lokalen Koordinatensystem.
    """
    coordinates: List[Tuple[float, float, float]]
    polygon: Polygon
    attributes: Attributes = field(default_factory=dict)
    feature_id: Optional[str] = None


@dataclass(frozen=True)
class FeatureSkip:
    """Protokolleintrag für ein übersprungenes Feature."""
    index: int
    reason: str
    feature_id: Optional[str] = None


@dataclass(frozen=True)
class DatasetSpec:
    """Ein abzufragender Datensatz (WFS-Featuretyp)."""
    name: str
    as_curve: bool = False
    material: Optional[str] = None

