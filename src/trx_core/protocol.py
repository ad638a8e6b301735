"""TRX protocol constants.

Single source of truth for the on-disk header layout and the legacy values
written into repaired images. Keep this file stable.
"""

# "HDR0" read as a little-endian word
TRX_MAGIC = 0x30524448

# Header: [Magic(4) | Len(4) | CRC(4) | FlagsVers(4) | Offsets(3 * 4)] = 28 bytes
HEADER_FMT = "<7I"
HEADER_LEN = 28

# The checksum covers [flags_vers, len), i.e. everything after magic/len/crc.
CRC_START = 12

# Reflected CRC-32 polynomial and seed
CRC_POLY = 0xEDB88320
CRC_INIT = 0xFFFFFFFF

# Placeholders for images that carry no header at all. Their derivation is
# unknown; existing images depend on them, do not change.
FALLBACK_FLAGS_VERS = 0x10000
FALLBACK_OFFSETS = (0x1C, 0x0930, 0x1DDD0C)

# Linksys web GUIs expect a shorter length field than the real file size.
# The repair logic has always subtracted 978 while the usage text promises 932.
LINKSYS_LENGTH_OFFSET = 978
LINKSYS_DOCUMENTED_OFFSET = 932

# Repaired images are written beside the source
OUTPUT_SUFFIX = ".trx"
