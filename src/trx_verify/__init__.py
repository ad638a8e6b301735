"""TRX Verify - header validation and repair."""
from .logic import output_path, validate_and_repair, verify_image

__all__ = ["output_path", "validate_and_repair", "verify_image"]
