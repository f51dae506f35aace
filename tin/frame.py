"""Growable output buffer that holds one complete frame."""

from typing import Union


class FrameBuffer:
    """Collects a frame's bytes so it can be written in a single call.

    Backed by a ``bytearray``, whose appends grow the storage
    geometrically (amortized O(1) per byte).
    """

    def __init__(self):
        self._buf = bytearray()

    def __len__(self) -> int:
        return len(self._buf)

    def append(self, data: Union[bytes, bytearray, str]):
        if isinstance(data, str):
            data = data.encode('utf-8')
        self._buf += data

    def pad(self, count: int, fill: bytes = b' '):
        if count > 0:
            self._buf += fill * count

    def getvalue(self) -> bytes:
        return bytes(self._buf)
