""" Requests from a VirusTotalApiClient to the mock service and back again,
    with responses arriving on the service worker threads.
"""

import threading

import pytest

import mockservice
import vtapi
from vtapi import constants


timeout = 5


@pytest.mark.parametrize('method,argument,topic,expected', [
    ('domain_report', 'virustotal.com', constants.REQ_TOPIC_DOMAIN_REPORT, mockservice.DOMAIN_REPORT_PAYLOAD),
    ('file_report', '7657fcb7d772448a6d8504e4b20168b8', constants.REQ_TOPIC_FILE_REPORT, mockservice.FILE_REPORT_PAYLOAD),
    ('file_rescan', '7657fcb7d772448a6d8504e4b20168b8', constants.REQ_TOPIC_FILE_RESCAN, mockservice.FILE_RESCAN_PAYLOAD),
    ('ip_report', '90.156.201.27', constants.REQ_TOPIC_IP_ADDRESS_REPORT, mockservice.IP_REPORT_PAYLOAD),
    ('url_report', 'http://www.virustotal.com', constants.REQ_TOPIC_URL_REPORT, mockservice.URL_REPORT_PAYLOAD),
    ('url_scan', 'http://www.virustotal.com', constants.REQ_TOPIC_URL_SCAN, mockservice.URL_SCAN_PAYLOAD),
])
def test_every_request_kind(vtapi_client, mock_service, method, argument, topic, expected):

    future = getattr(vtapi_client, method)(argument)

    assert future.result(timeout=timeout) == expected
    assert mock_service.received[-1][0] == topic


def test_ip_report_callback(vtapi_client, mock_service):

    done = threading.Event()
    outcome = list()

    def callback(error, response):
        outcome.append((error, response))
        done.set()

    vtapi_client.ip_report('90.156.201.27', callback=callback)

    assert done.wait(timeout)
    assert outcome == [(None, mockservice.IP_REPORT_PAYLOAD)]
    assert mock_service.received[-1] == (constants.REQ_TOPIC_IP_ADDRESS_REPORT, {'ip': '90.156.201.27'})


def test_payload_arrives_intact(vtapi_client, mock_service):

    future = vtapi_client.file_report(['a', 'b', 'c'], all_info=True)
    future.result(timeout=timeout)

    assert mock_service.received[-1] == (constants.REQ_TOPIC_FILE_REPORT, {'resource': 'a,b,c', 'allinfo': '1'})

    future = vtapi_client.url_scan(['http://x.com', 'http://y.com'])
    future.result(timeout=timeout)

    assert mock_service.received[-1] == (constants.REQ_TOPIC_URL_SCAN, {'url': 'http://x.com\nhttp://y.com'})


@pytest.mark.parametrize('method,parameter', [
    ('domain_report', 'domain'),
    ('file_report', 'resource'),
    ('file_rescan', 'resource'),
    ('ip_report', 'ip'),
    ('url_report', 'resource'),
    ('url_scan', 'url'),
])
def test_required_parameter_missing(vtapi_client, method, parameter):

    done = threading.Event()
    outcome = list()

    def callback(error, response):
        outcome.append((error, response))
        done.set()

    future = getattr(vtapi_client, method)(None, callback=callback)

    assert done.wait(timeout)
    assert len(outcome) == 1

    error, response = outcome[0]
    assert response is None
    assert isinstance(error, vtapi.ServiceError)
    assert str(error) == 'Required parameter not specified: ' + parameter

    assert future.exception(timeout=timeout) is error


def test_failure_then_success(vtapi_client):

    failed = vtapi_client.ip_report(None)
    assert isinstance(failed.exception(timeout=timeout), vtapi.ServiceError)

    succeeded = vtapi_client.ip_report('90.156.201.27')
    assert succeeded.result(timeout=timeout) == mockservice.IP_REPORT_PAYLOAD


def test_concurrent_requests(vtapi_client):

    futures = list()
    for count in range(20):
        futures.append(vtapi_client.domain_report('example%d.com' % (count)))
        futures.append(vtapi_client.ip_report('10.0.0.%d' % (count)))

    for future in futures:
        assert future.result(timeout=timeout)['response_code'] == 1


def test_no_service_registered(vtapi_client):

    future = vtapi_client._invoke_service({}, constants.SERVICE_TYPE + '/nonexistent')

    error = future.exception(timeout=timeout)
    assert isinstance(error, vtapi.ServiceError)
    assert error.code == mockservice.SERVICE_UNAVAILABLE


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
