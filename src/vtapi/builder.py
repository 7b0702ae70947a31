""" Construction of request payloads for the VirusTotal API service. Every
    function here is pure: an :class:`Options` instance goes in, a fresh
    dictionary of string values comes out, and nothing is sent anywhere.

    Absent options never produce a key in the payload. The remote service
    is responsible for complaining about missing required parameters; the
    functions here never raise on their account.
"""

import collections
import datetime
import time

from . import constants


_fields = ('resource', 'url', 'ip', 'domain', 'date', 'period', 'repeat',
           'notify_url', 'notify_changes_only', 'scan', 'all_info')

Options = collections.namedtuple('Options', _fields,
                                 defaults=(None,) * len(_fields))
Options.__doc__ = """ The caller-supplied options for a single request. Only
    a subset of the fields is meaningful for any given request kind; the
    rest are ignored by the corresponding builder function.
"""


def join(value, separator):
    """ Flatten a string or an ordered sequence of strings into a single
        string. A lone string is returned unchanged; sequences are joined
        with *separator* in their original order, and a None element
        contributes an empty string.
    """

    if isinstance(value, str):
        return value

    try:
        iterator = iter(value)
    except TypeError:
        return str(value)

    return separator.join('' if element is None else str(element) for element in iterator)


def format_date(value):
    """ Render a date as the fourteen digit YYYYMMDDHHmmss string expected
        by the service. Pre-formatted strings pass through untouched. The
        fields of a structured value are used as-is, with no time zone
        conversion.
    """

    if isinstance(value, str):
        return value

    if isinstance(value, datetime.datetime):
        fields = (value.year, value.month, value.day,
                  value.hour, value.minute, value.second)
    elif isinstance(value, datetime.date):
        fields = (value.year, value.month, value.day, 0, 0, 0)
    elif isinstance(value, time.struct_time):
        fields = (value.tm_year, value.tm_mon, value.tm_mday,
                  value.tm_hour, value.tm_min, value.tm_sec)
    else:
        return str(value)

    # strftime() does not pad years before 1000 on every platform.
    return constants.DATE_DIGITS % fields


def add_boolean(payload, name, value):
    """ Boolean parameters are present-or-absent. Any value other than None,
        including False, is sent as the string '1'; this mirrors what the
        service has always received from existing clients.
    """

    if value is not None:
        payload[name] = '1'


def add_string(payload, name, value):
    if value is not None:
        payload[name] = str(value)


def add_date(payload, name, value):
    if value is not None:
        payload[name] = format_date(value)


def add_resource(payload, resource):
    if resource is not None:
        payload[constants.PARAM_RESOURCE] = join(resource, constants.RESOURCE_SEPARATOR)


def add_urls(payload, name, url):
    if url is not None:
        payload[name] = join(url, constants.URL_SEPARATOR)


def file_report(options):
    payload = dict()
    add_resource(payload, options.resource)
    add_boolean(payload, constants.PARAM_ALLINFO, options.all_info)
    return payload


def file_rescan(options):
    payload = dict()
    add_resource(payload, options.resource)
    add_date(payload, constants.PARAM_DATE, options.date)
    add_string(payload, constants.PARAM_PERIOD, options.period)
    add_string(payload, constants.PARAM_REPEAT, options.repeat)
    add_string(payload, constants.PARAM_NOTIFY_URL, options.notify_url)
    add_boolean(payload, constants.PARAM_NOTIFY_CHANGES_ONLY, options.notify_changes_only)
    return payload


def url_report(options):
    """ The URL report names its URLs with the 'resource' parameter, but
        multiple URLs are newline-separated like a URL scan.
    """

    payload = dict()
    add_urls(payload, constants.PARAM_RESOURCE, options.resource)
    add_boolean(payload, constants.PARAM_SCAN, options.scan)
    add_boolean(payload, constants.PARAM_ALLINFO, options.all_info)
    return payload


def url_scan(options):
    payload = dict()
    add_urls(payload, constants.PARAM_URL, options.url)
    return payload


def ip_report(options):
    payload = dict()
    add_string(payload, constants.PARAM_IP, options.ip)
    return payload


def domain_report(options):
    payload = dict()
    add_string(payload, constants.PARAM_DOMAIN, options.domain)
    return payload


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
