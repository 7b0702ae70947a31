import pytest

import vtapi
from mockservice import MockVtApiService


@pytest.fixture
def mock_service():

    service = MockVtApiService()

    yield service

    service.destroy()


@pytest.fixture
def vtapi_client(mock_service):

    return vtapi.VirusTotalApiClient(mock_service)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
