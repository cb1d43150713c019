"""
WFS-Import von Gebäuden (AX_Gebaeude) und Flurstücken (AX_Flurstueck)
in ein lokales Projektkoordinatensystem.
"""

from .bbox import BoundingBox, translate_bbox
from .client import WFSClient
from .config import WFSConfig
from .elements import OutputElement, Representation, Material, X_AXIS
from .exceptions import (
    WFSImportError,
    CoordinateSystemError,
    DatasetError,
    DatasetFetchError,
    DatasetParseError,
    FeatureParseError,
    GeometryError,
)
from .fetcher import DatasetFetcher, DatasetResult, fetch_datasets
from .geometry import GeometryBuilder
from .importer import WFSImporter, ImportResult, import_region
from .models import Origin, ProjectedBoundingBox, ParsedFeature, AttributeValue, DatasetSpec
from .parser import FeatureParser, ParseResult
from .transformer import CoordinateTransformer

__all__ = [
    'BoundingBox',
    'translate_bbox',
    'WFSClient',
    'WFSConfig',
    'OutputElement',
    'Representation',
    'Material',
    'X_AXIS',
    'WFSImportError',
    'CoordinateSystemError',
    'DatasetError',
    'DatasetFetchError',
    'DatasetParseError',
    'FeatureParseError',
    'GeometryError',
    'DatasetFetcher',
    'DatasetResult',
    'fetch_datasets',
    'GeometryBuilder',
    'WFSImporter',
    'ImportResult',
    'import_region',
    'Origin',
    'ProjectedBoundingBox',
    'ParsedFeature',
    'AttributeValue',
    'DatasetSpec',
    'FeatureParser',
    'ParseResult',
    'CoordinateTransformer',
]
