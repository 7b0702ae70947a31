''' JSON decoding of service response payloads, and encoding for display,
    using msgspec. :func:`dumps` returns bytes.
'''

import msgspec

encoder = msgspec.json.Encoder()
decoder = msgspec.json.Decoder()

dumps = encoder.encode
loads = decoder.decode

# Invalid UTF-8 surfaces from msgspec as a DecodeError, but callers handing
# in str instead of bytes may still see a ValueError.
decode_errors = (msgspec.DecodeError, ValueError)


def pretty(value):
    return msgspec.json.format(dumps(value), indent=4).decode()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
