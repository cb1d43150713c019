"""
Tests für den WFS-Client.
"""

from unittest.mock import Mock, patch

import pytest
import requests

from wfs_import.client import WFSClient
from wfs_import.exceptions import DatasetFetchError
from wfs_import.models import ProjectedBoundingBox

TEST_URL = "https://test.wfs.nrw.de/alkis"
BBOX = ProjectedBoundingBox(359000.0, 5651000.0, 359100.0, 5651100.0)


@pytest.fixture
def client():
    return WFSClient(url=TEST_URL, timeout=5)


def test_build_params(client):
    params = client.build_params("AX_Gebaeude", BBOX)
    assert params == {
        'VERSION': '2.0.0',
        'SERVICE': 'WFS',
        'REQUEST': 'GetFeature',
        'TYPENAMES': 'AX_Gebaeude',
        'BBOX': '359000.0,5651000.0,359100.0,5651100.0,urn:ogc:def:crs:EPSG::25832',
    }


@patch('wfs_import.client.requests.get')
def test_get_feature(mock_get, client):
    response = Mock(content=b"<xml/>")
    response.raise_for_status.return_value = None
    mock_get.return_value = response

    assert client.get_feature("AX_Gebaeude", BBOX) == b"<xml/>"
    mock_get.assert_called_once_with(
        TEST_URL, params=client.build_params("AX_Gebaeude", BBOX), timeout=5
    )


@patch('wfs_import.client.requests.get')
def test_http_error(mock_get, client):
    response = Mock()
    response.raise_for_status.side_effect = requests.HTTPError("503 Server Error")
    mock_get.return_value = response

    with pytest.raises(DatasetFetchError) as excinfo:
        client.get_feature("AX_Flurstueck", BBOX)
    assert excinfo.value.dataset == "AX_Flurstueck"
    assert "503" in str(excinfo.value)


@patch('wfs_import.client.requests.get')
def test_connection_error(mock_get, client):
    mock_get.side_effect = requests.ConnectionError("keine Verbindung")
    with pytest.raises(DatasetFetchError):
        client.get_feature("AX_Gebaeude", BBOX)


@patch('wfs_import.client.requests.get')
def test_timeout(mock_get, client):
    mock_get.side_effect = requests.Timeout("Zeitüberschreitung")
    with pytest.raises(DatasetFetchError):
        client.get_feature("AX_Gebaeude", BBOX)
