"""
Ausgabe-Elemente des WFS-Imports.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple, Union

from shapely.geometry import LinearRing, Polygon

from .models import Attributes


class Representation(str, Enum):
    """Geometrische Darstellung eines Elements."""
    SURFACE = "surface"  # gefüllte, einseitige ebene Fläche
    CURVE = "curve"      # nur die Umrandung


@dataclass(frozen=True)
class Material:
    name: str
    color: Tuple[float, float, float, float]


# Rot, wie die X-Achse
X_AXIS = Material("XAxis", (1.0, 0.0, 0.0, 1.0))

BUILTIN_MATERIALS: Dict[str, Material] = {
    X_AXIS.name: X_AXIS,
}


def get_material(name: str) -> Material:
    """Sucht ein vordefiniertes Material.

    Raises:
        ValueError: Wenn kein Material mit diesem Namen existiert
    """
    try:
        return BUILTIN_MATERIALS[name]
    except KeyError:
        raise ValueError(f"Unbekanntes Material: {name}") from None


@dataclass
class OutputElement:
    """Geometrisches Element im lokalen Koordinatensystem."""
    name: str
    representation: Representation
    geometry: Union[Polygon, LinearRing]
    additional_properties: Attributes = field(default_factory=dict)
    material: Optional[Material] = None


def assemble_element(polygon: Polygon, as_curve: bool, type_name: str,
                     attributes: Attributes) -> OutputElement:
    """Erzeugt ein Ausgabe-Element aus einem lokalen Polygon.

    Args:
        polygon: Polygon im lokalen System
        as_curve: True für eine Umrandung, False für eine Fläche
        type_name: Name des Datensatzes, wird der Elementname
        attributes: Attribute des Features, werden unverändert übernommen

    Returns:
        OutputElement
    """
    if as_curve:
        representation, geometry = Representation.CURVE, LinearRing(polygon.exterior.coords)
    else:
        representation, geometry = Representation.SURFACE, polygon

    return OutputElement(
        name=type_name,
        representation=representation,
        geometry=geometry,
        additional_properties=dict(attributes),
    )


def apply_material(elements: Iterable[OutputElement], material: Material) -> List[OutputElement]:
    """Gibt Kopien der Elemente mit überschriebenem Material zurück."""
    return [replace(element, material=material) for element in elements]
