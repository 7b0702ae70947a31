""" Invoke the 'domain report' method of the VirusTotal API service.
"""

from dxlclient.client import DxlClient
from dxlclient.client_config import DxlClientConfig
from dxlclient.exceptions import DxlException

import common
import vtapi


config = DxlClientConfig.create_dxl_config_from_file(common.CONFIG_FILE)

with DxlClient(config) as client:
    client.connect()

    virus_total_api_client = vtapi.VirusTotalApiClient(client)

    future = virus_total_api_client.domain_report('027.ru')

    try:
        response = future.result()
    except (vtapi.ServiceError, vtapi.PayloadDecodeError, DxlException) as e:
        print('Error: ' + str(e))
    else:
        # Print out the returned JSON object.
        print(vtapi.json.pretty(response))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
