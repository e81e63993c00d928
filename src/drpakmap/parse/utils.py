from io import SEEK_END, SEEK_SET
from struct import Struct
from typing import BinaryIO

from ..errors import DRReadError, DRTableError, assert_eq

INT32 = Struct("<i")
SLOT_SIZE = INT32.size
ZTERM_CHUNK = 64


class StreamReader:
    """Bounds-checked reads from a seekable binary stream.

    The stream size is taken once, when the reader is created. The reader
    assumes exclusive use of the stream's position.
    """

    def __init__(self, f: BinaryIO):
        self.f = f
        self.size = f.seek(0, SEEK_END)
        self.offset = 0
        self.prev = 0
        f.seek(0, SEEK_SET)

    def __len__(self) -> int:
        return self.size

    def remaining(self) -> int:
        return self.size - self.offset

    def seek(self, offset: int) -> None:
        if offset < 0 or offset > self.size:
            raise DRReadError(
                f"seek to {offset} is outside of the stream (size {self.size})"
            )
        self.f.seek(offset, SEEK_SET)
        self.offset = offset

    def read_bytes(self, length: int) -> bytes:
        value = self.f.read(length)
        assert_eq("read length", length, len(value), self.offset, DRReadError)
        self.prev = self.offset
        self.offset += length
        return value

    def read_slot(self) -> bytes:
        if self.remaining() < SLOT_SIZE:
            raise DRTableError(
                f"slot at {self.offset} runs past the end of the stream (size {self.size})"
            )
        return self.read_bytes(SLOT_SIZE)

    def read_zterm(self) -> str:
        """Read a zero-terminated string, one byte per character.

        Reading stops at the first null character, which is consumed but not
        returned.

        :raises DRTableError: If the stream ends before a null character.
        """
        start = self.offset
        buf = bytearray()
        while True:
            chunk = self.f.read(ZTERM_CHUNK)
            if not chunk:
                raise DRTableError(f"string at {start} is not terminated")
            null_index = chunk.find(b"\0")
            if null_index > -1:
                buf += chunk[:null_index]
                break
            buf += chunk

        self.prev = start
        self.offset = start + len(buf) + 1
        # the stream position is past the terminator, keep it in sync
        self.f.seek(self.offset, SEEK_SET)
        return buf.decode("latin-1")


def unpack_pointer(slot: bytes) -> int:
    (value,) = INT32.unpack(slot)
    return value  # type: ignore
