"""TRX Core - header layout and checksum."""
from .crc import build_table, checksum
from .header import TRXHeader, decode_header, encode_header

__all__ = ["build_table", "checksum", "TRXHeader", "decode_header", "encode_header"]
