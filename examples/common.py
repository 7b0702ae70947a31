""" Shared setup for the sample programs. Each sample reads its DXL client
    configuration from the file named by CONFIG_FILE: ``$VTAPI_CLIENT_CONFIG``
    if set, otherwise ``dxlclient.config`` beside the samples.
"""

import logging
import os

from vtapi import constants


CONFIG_FILE = os.environ.get('VTAPI_CLIENT_CONFIG',
        os.path.join(os.path.dirname(os.path.abspath(__file__)), constants.CLIENT_CONFIG_FILE))

logging.basicConfig(level=logging.ERROR,
                    format='%(asctime)s %(name)s %(levelname)s %(message)s')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
