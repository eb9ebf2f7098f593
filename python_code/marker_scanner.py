from jpeg_common import SOI_MARKER, DHT_MARKER, debug_print
from jpeg_errors import NotAJpegError, NoHuffmanTableError


def find_dht_marker(data):
    """Return the offset of the first DHT marker in ``data``.

    Only the first DHT segment is ever located; later ones (progressive files
    usually carry several) are not looked at.
    """
    if data[0:2] != SOI_MARKER:
        raise NotAJpegError("data does not start with an SOI marker")

    marker_offset = data.find(DHT_MARKER)
    if marker_offset < 0:
        raise NoHuffmanTableError("no DHT marker found")

    debug_print(f"DHT marker found at idx={marker_offset}")
    return marker_offset
