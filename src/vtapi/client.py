""" The :class:`VirusTotalApiClient` is a high level wrapper for invoking
    calls to a running VirusTotal API service over DXL.
"""

import concurrent.futures
import logging
import threading

from dxlbootstrap.util import MessageUtils
from dxlclient.callbacks import ResponseCallback
from dxlclient.exceptions import DxlException
from dxlclient.message import ErrorResponse, Request

from . import builder
from . import constants
from . import errors
from . import json

logger = logging.getLogger(__name__)


class VirusTotalApiClient:
    """ Each public method formats its arguments into a request payload,
        sends it to the matching service topic, and returns immediately
        with a :class:`concurrent.futures.Future`. When the request
        completes the future is resolved with the decoded JSON response, or
        with the exception describing the failure: a
        :class:`vtapi.errors.ServiceError` for an error response, a
        :class:`vtapi.errors.PayloadDecodeError` for an unreadable one, or
        whatever the DXL client raised.

        If a *callback* is supplied it is invoked exactly once as
        ``callback(error, response)``, where exactly one of the two is None.
        Callbacks run on a DXL client thread. Nothing is retried.

        The *dxl_client* is a connected :class:`dxlclient.client.DxlClient`,
        or anything else offering the same ``async_request()`` method. This
        class only borrows it: connecting and destroying the client remains
        the caller's business.

        Boolean options such as *all_info* are sent whenever they are not
        None. In particular, ``all_info=False`` requests all info, exactly
        as ``all_info=True`` does; pass None (the default) to leave the flag
        off.
    """

    def __init__(self, dxl_client):
        self.dxl_client = dxl_client


    def file_report(self, resource, all_info=None, callback=None):
        """ Retrieve existing file scan reports for one *resource* (an MD5,
            SHA-1 or SHA-256 hash, or a scan id), or for a sequence of them.
        """

        options = builder.Options(resource=resource, all_info=all_info)
        payload = builder.file_report(options)
        return self._invoke_service(payload, constants.REQ_TOPIC_FILE_REPORT, callback)


    def file_rescan(self, resource, date=None, period=None, repeat=None,
                    notify_url=None, notify_changes_only=None, callback=None):
        """ Rescan files already in the VirusTotal file store without
            resubmitting them. The *date* may be a preformatted string or a
            :class:`datetime.datetime`, to schedule the rescan.
        """

        options = builder.Options(resource=resource, date=date, period=period,
                                  repeat=repeat, notify_url=notify_url,
                                  notify_changes_only=notify_changes_only)
        payload = builder.file_rescan(options)
        return self._invoke_service(payload, constants.REQ_TOPIC_FILE_RESCAN, callback)


    def url_report(self, resource, scan=None, all_info=None, callback=None):
        """ Retrieve existing scan reports for one URL (or scan id), or a
            sequence of them. Setting *scan* asks the service to submit any
            URL it has no report for.
        """

        options = builder.Options(resource=resource, scan=scan, all_info=all_info)
        payload = builder.url_report(options)
        return self._invoke_service(payload, constants.REQ_TOPIC_URL_REPORT, callback)


    def url_scan(self, url, callback=None):
        """ Submit a URL, or a sequence of URLs, for scanning.
        """

        options = builder.Options(url=url)
        payload = builder.url_scan(options)
        return self._invoke_service(payload, constants.REQ_TOPIC_URL_SCAN, callback)


    def ip_report(self, ip, callback=None):
        """ Retrieve a report on an IPv4 address in dotted quad notation.
        """

        options = builder.Options(ip=ip)
        payload = builder.ip_report(options)
        return self._invoke_service(payload, constants.REQ_TOPIC_IP_ADDRESS_REPORT, callback)


    def domain_report(self, domain, callback=None):
        options = builder.Options(domain=domain)
        payload = builder.domain_report(options)
        return self._invoke_service(payload, constants.REQ_TOPIC_DOMAIN_REPORT, callback)


    def _invoke_service(self, payload, topic, callback=None):
        """ Send the *payload* dictionary, as JSON, to the service *topic*.
            The returned future cannot be cancelled; it is already running.
        """

        request = Request(topic)
        MessageUtils.dict_to_json_payload(request, payload)

        future = concurrent.futures.Future()
        future.set_running_or_notify_cancel()

        completion = _Completion(future, callback)

        logger.debug("Invoking %s", topic)

        try:
            self.dxl_client.async_request(request, completion)
        except DxlException as e:
            completion.fail(e)

        return future


# end of class VirusTotalApiClient



def decode_response(response):
    """ Return the JSON body of *response* as a Python object. An empty body
        decodes to None; an error response is raised as a
        :class:`vtapi.errors.ServiceError`.
    """

    if isinstance(response, ErrorResponse):
        raise errors.ServiceError(response.error_message, response.error_code)

    payload = response.payload

    if isinstance(payload, str):
        payload = payload.encode()

    if not payload:
        return None

    try:
        return json.loads(payload)
    except json.decode_errors as e:
        raise errors.PayloadDecodeError('malformed response payload: ' + str(e)) from e



class _Completion(ResponseCallback):
    """ Internal single-shot response callback. The DXL client is expected
        to call it once; any later call is ignored, so the caller never sees
        two outcomes for one request.
    """

    def __init__(self, future, callback):
        super(_Completion, self).__init__()
        self.future = future
        self.callback = callback
        self.fired = False
        self.lock = threading.Lock()


    def on_response(self, response):

        try:
            decoded = decode_response(response)
        except (errors.ServiceError, errors.PayloadDecodeError) as e:
            self.complete(e, None)
        else:
            self.complete(None, decoded)


    def fail(self, error):
        self.complete(error, None)


    def complete(self, error, decoded):

        with self.lock:
            if self.fired:
                return
            self.fired = True

        if error is None:
            self.future.set_result(decoded)
        else:
            self.future.set_exception(error)

        if self.callback is not None:
            self.callback(error, decoded)


# end of class _Completion


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
