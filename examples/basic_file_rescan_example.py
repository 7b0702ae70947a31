""" Invoke the 'file rescan' method of the VirusTotal API service, receiving
    the outcome through a callback rather than by waiting on the future.
"""

import datetime
import threading

from dxlclient.client import DxlClient
from dxlclient.client_config import DxlClientConfig

import common
import vtapi


config = DxlClientConfig.create_dxl_config_from_file(common.CONFIG_FILE)

finished = threading.Event()


def rescan_complete(error, response):

    if error is not None:
        print('Error: ' + str(error))
    else:
        print(vtapi.json.pretty(response))

    finished.set()


with DxlClient(config) as client:
    client.connect()

    virus_total_api_client = vtapi.VirusTotalApiClient(client)

    # Schedule the rescan for this time tomorrow.
    tomorrow = datetime.datetime.now() + datetime.timedelta(days=1)

    virus_total_api_client.file_rescan('7657fcb7d772448a6d8504e4b20168b8',
                                       date=tomorrow, callback=rescan_complete)
    finished.wait()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
