ERRORS = {
  "E_IO_READ": "Source image could not be read",
  "E_IO_WRITE": "Repaired image could not be written",
  "E_NO_HEADER": "TRX header not found",
  "E_SIZE_TOO_SMALL": "TRX length is smaller than the header",
  "E_LENGTH_MISMATCH": "TRX length does not match file size",
  "E_CHECKSUM_MISMATCH": "TRX checksum does not match contents",
}

OUTCOME_VALID = "valid"
OUTCOME_NEW_HEADER = "repaired_new_header"
OUTCOME_OVERWRITE = "repaired_overwrite"
OUTCOME_IO_ERROR = "io_error"

EXIT_CODES = {
  OUTCOME_VALID: 0,
  OUTCOME_IO_ERROR: 1,
  OUTCOME_NEW_HEADER: 3,
  OUTCOME_OVERWRITE: 4,
}
