""" Topic names and request parameter names understood by the VirusTotal
    API service. These strings are the wire contract with the remote
    service and must not drift.
"""

# The service type for the VirusTotal API.
SERVICE_TYPE = '/opendxl-virustotal/service/vtapi'

REQ_TOPIC_FILE_RESCAN = SERVICE_TYPE + '/file/rescan'
REQ_TOPIC_FILE_REPORT = SERVICE_TYPE + '/file/report'
REQ_TOPIC_URL_SCAN = SERVICE_TYPE + '/url/scan'
REQ_TOPIC_URL_REPORT = SERVICE_TYPE + '/url/report'
REQ_TOPIC_IP_ADDRESS_REPORT = SERVICE_TYPE + '/ip-address/report'
REQ_TOPIC_DOMAIN_REPORT = SERVICE_TYPE + '/domain/report'

REQUEST_TOPICS = frozenset((
    REQ_TOPIC_FILE_RESCAN,
    REQ_TOPIC_FILE_REPORT,
    REQ_TOPIC_URL_SCAN,
    REQ_TOPIC_URL_REPORT,
    REQ_TOPIC_IP_ADDRESS_REPORT,
    REQ_TOPIC_DOMAIN_REPORT,
))

# Resource parameters.

PARAM_RESOURCE = 'resource'
PARAM_URL = 'url'
PARAM_IP = 'ip'
PARAM_DOMAIN = 'domain'

# Optional parameters.

PARAM_ALLINFO = 'allinfo'
PARAM_PERIOD = 'period'
PARAM_REPEAT = 'repeat'
PARAM_NOTIFY_URL = 'notify_url'
PARAM_NOTIFY_CHANGES_ONLY = 'notify_changes_only'
PARAM_DATE = 'date'
PARAM_SCAN = 'scan'

# Separators used when a resource or URL parameter is given as a sequence.

RESOURCE_SEPARATOR = ','
URL_SEPARATOR = '\n'

# Compact date rendering: YYYYMMDDHHmmss, always fourteen digits.

DATE_DIGITS = '%04d%02d%02d%02d%02d%02d'

# Default client configuration file, as read by dxlclient.

CLIENT_CONFIG_FILE = 'dxlclient.config'


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
