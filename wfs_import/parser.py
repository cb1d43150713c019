"""
Parser für WFS-2.0.0-FeatureCollections.

Das Dokument wird direkt über den lxml-Baum gelesen. Jedes ``wfs:member``
wird einzeln verarbeitet; Fehler in einem Feature werden als
``FeatureSkip`` protokolliert und brechen die übrigen Features nicht ab.
"""

import logging
import re
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from lxml import etree

from .exceptions import DatasetParseError, FeatureParseError
from .geometry import GML_NAMESPACE, GeometryBuilder
from .models import AttributeValue, Attributes, FeatureSkip, ParsedFeature

logger = logging.getLogger(__name__)

WFS_NAMESPACE = 'http://www.opengis.net/wfs/2.0'
GEOMETRY_KEY = 'position'
TEXT_KEY = '#text'

_NUMBER_PATTERN = re.compile(r'^-?(0|[1-9]\d*)(\.\d+)?$')


@dataclass
class ParseResult:
    """Ergebnis des Parsens einer FeatureCollection."""
    features: List[ParsedFeature] = field(default_factory=list)
    skipped: List[FeatureSkip] = field(default_factory=list)


def qualified_name(name: str, nsmap: Dict[Optional[str], str]) -> str:
    """Wandelt ``{uri}local`` in ``prefix:local`` um (ohne Präfix: ``local``)."""
    qname = etree.QName(name)
    if qname.namespace is None:
        return qname.localname
    for prefix, uri in nsmap.items():
        if uri == qname.namespace and prefix:
            return f"{prefix}:{qname.localname}"
    return qname.localname


def scalar_value(text: Optional[str]) -> AttributeValue:
    """Text eines Blattknotens als String oder Zahl."""
    text = (text or '').strip()
    match = _NUMBER_PATTERN.match(text)
    if match:
        number = float(text) if match.group(2) else int(text)
        # Nur verlustfreie Umwandlungen, sonst bleibt der Originaltext erhalten
        if str(number) == text:
            return AttributeValue.number(number)
    return AttributeValue.string(text)


def _attribute_entries(element: etree._Element) -> Attributes:
    return OrderedDict(
        (f"@{qualified_name(key, element.nsmap)}", AttributeValue.string(value))
        for key, value in element.attrib.items()
    )


def child_attributes(element: etree._Element, exclude: tuple = ()) -> Attributes:
    """Sammelt die Kindelemente als Attribut-Map.

    Mehrfach vorkommende Namen werden zu einer Liste zusammengefasst.
    """
    grouped: Dict[str, List[AttributeValue]] = OrderedDict()
    for child in element:
        # Kommentare und Processing Instructions haben keinen String-Tag
        if not isinstance(child.tag, str):
            continue
        if etree.QName(child).localname in exclude:
            continue
        key = qualified_name(child.tag, child.nsmap)
        grouped.setdefault(key, []).append(element_value(child))

    return OrderedDict(
        (key, values[0] if len(values) == 1 else AttributeValue.sequence(values))
        for key, values in grouped.items()
    )


def element_value(element: etree._Element) -> AttributeValue:
    """Rekursive Umwandlung eines Elements in einen getaggten Wert."""
    has_children = any(isinstance(child.tag, str) for child in element)
    if not has_children and not element.attrib:
        return scalar_value(element.text)

    entries = _attribute_entries(element)
    entries.update(child_attributes(element))
    text = (element.text or '').strip()
    if text:
        entries[TEXT_KEY] = scalar_value(text)
    return AttributeValue.mapping(entries)


class FeatureParser:
    """Liest Features eines Featuretyps aus einer WFS-Antwort."""

    def __init__(self, geometry_builder: GeometryBuilder, namespaces: Dict[str, str] = None):
        """Initialisiert den Parser.

        Args:
            geometry_builder: Builder für die Feature-Geometrie
            namespaces: XML-Namespaces (``wfs``, ``gml``)
        """
        self.geometry_builder = geometry_builder
        self.namespaces = {'wfs': WFS_NAMESPACE, 'gml': GML_NAMESPACE}
        if namespaces:
            self.namespaces.update(namespaces)

    def parse(self, body: Union[bytes, str], type_name: str) -> ParseResult:
        """Parst eine FeatureCollection.

        Args:
            body: Antwort des WFS
            type_name: Name des angefragten Featuretyps

        Returns:
            ParseResult: gelesene und übersprungene Features

        Raises:
            DatasetParseError: Wenn das Dokument nicht lesbar oder keine FeatureCollection ist
        """
        root = self._parse_document(body, type_name)
        result = ParseResult()

        members = root.findall('wfs:member', namespaces=self.namespaces)
        for index, member in enumerate(members):
            try:
                result.features.append(self.parse_member(member, type_name))
            except FeatureParseError as e:
                skip = FeatureSkip(index=index, reason=str(e), feature_id=self._member_id(member))
                result.skipped.append(skip)
                logger.debug(f"⚠️ [{type_name}] Feature {index} übersprungen: {skip.reason}")

        if result.skipped:
            logger.warning(
                f"⚠️ [{type_name}] {len(result.skipped)} von {len(members)} Features übersprungen"
            )
        return result

    def _parse_document(self, body: Union[bytes, str], type_name: str) -> etree._Element:
        if isinstance(body, str):
            body = body.encode('utf-8')
        try:
            parser = etree.XMLParser(resolve_entities=False, huge_tree=True)
            root = etree.fromstring(body, parser=parser)
        except etree.XMLSyntaxError as e:
            raise DatasetParseError(f"Antwort ist kein gültiges XML: {str(e)}", type_name) from e

        expected = f"{{{self.namespaces['wfs']}}}FeatureCollection"
        if root.tag != expected:
            raise DatasetParseError(
                f"Unerwartetes Wurzelelement {root.tag}, erwartet wfs:FeatureCollection",
                type_name,
            )
        return root

    def find_feature(self, member: etree._Element, type_name: str) -> etree._Element:
        """Findet das Feature-Element des Typs ``type_name`` in einem Member.

        Raises:
            FeatureParseError: Wenn kein passendes Element vorhanden ist
        """
        prefix, _, local = type_name.rpartition(':')
        for child in member:
            if not isinstance(child.tag, str):
                continue
            if etree.QName(child).localname != local:
                continue
            if prefix and child.prefix != prefix:
                continue
            return child
        raise FeatureParseError(f"Member enthält kein Element {type_name}")

    def parse_member(self, member: etree._Element, type_name: str) -> ParsedFeature:
        """Parst ein einzelnes Member zu einem ``ParsedFeature``.

        Raises:
            FeatureParseError: Bei fehlender oder ungültiger Geometrie
        """
        feature = self.find_feature(member, type_name)

        position = None
        for child in feature:
            if isinstance(child.tag, str) and etree.QName(child).localname == GEOMETRY_KEY:
                position = child
                break
        if position is None:
            raise FeatureParseError(f"Feature ohne Geometrie '{GEOMETRY_KEY}'")

        coordinates, polygon = self.geometry_builder.build(position)

        attributes = _attribute_entries(feature)
        attributes.update(child_attributes(feature, exclude=(GEOMETRY_KEY,)))

        return ParsedFeature(
            coordinates=coordinates,
            polygon=polygon,
            attributes=dict(attributes),
            feature_id=feature.get(f"{{{GML_NAMESPACE}}}id"),
        )

    def _member_id(self, member: etree._Element) -> Optional[str]:
        for child in member:
            if isinstance(child.tag, str):
                return child.get(f"{{{GML_NAMESPACE}}}id")
        return None
