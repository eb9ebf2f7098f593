import base64
import binascii
import os

from jpeg_errors import InvalidDataUriError

DATA_URI_PREFIX = 'data:image/jpeg;base64,'


def read_jpeg_file(jpeg_file_path):
    with open(jpeg_file_path, 'rb') as jpeg_file:
        return jpeg_file.read()


def decode_data_uri(text):
    if not text.startswith(DATA_URI_PREFIX):
        raise InvalidDataUriError("string must be a base64 encoded JPEG data URI")
    try:
        return base64.b64decode(text[len(DATA_URI_PREFIX):], validate=True)
    except binascii.Error as e:
        raise InvalidDataUriError(f"invalid base64 payload: {e}") from e


def load_jpeg_bytes(source):
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    if isinstance(source, str) and source.startswith('data:'):
        return decode_data_uri(source)
    return read_jpeg_file(os.fspath(source))


def hex_dump(data):
    return [f"{byte:02X}" for byte in data]
