""" Python client for the VirusTotal API service. Requests are formatted by
    :mod:`vtapi.builder` and dispatched over DXL by a
    :class:`VirusTotalApiClient`.
"""

# Utility components.

from . import json
from . import constants
from . import errors

# Submodules used by multiple other components.

from . import builder

# Primary public-facing interfaces.

from .client import VirusTotalApiClient
from .errors import ServiceError, PayloadDecodeError

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
