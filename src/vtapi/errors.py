""" Exceptions delivered to callers when a request does not produce a usable
    response. Failures raised by the DXL client itself, such as
    :class:`dxlclient.exceptions.DxlException`, are passed through as-is.
"""


class ServiceError(Exception):
    """ The service answered with an error response. The *code* and
        *message* are those carried by the response.
    """

    def __init__(self, message, code=0):
        Exception.__init__(self, message)
        self.code = code
        self.message = message


class PayloadDecodeError(ValueError):
    pass


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
