"""Metadata and payload helpers for uploaded content."""

import base64
import binascii
import mimetypes

from server.apps.files.exceptions import NodeValidationError


def detect_mime_type(filename: str) -> str:
    """Detect MIME type from a node name.

    Uses Python's built-in mimetypes module to guess MIME type
    from the filename extension.

    Args:
        filename: Node name with extension.

    Returns:
        MIME type string (e.g., 'image/jpeg', 'text/plain').
        Returns 'application/octet-stream' if type cannot be determined.
    """
    mime_type, _ = mimetypes.guess_type(filename)
    if mime_type is None:
        return 'application/octet-stream'
    return mime_type


def decode_content(data: str | None) -> bytes | None:
    """Decode base64 upload data.

    Args:
        data: Base64 text from the request body, or None.

    Returns:
        Decoded bytes, or None when no data was sent.

    Raises:
        NodeValidationError: If data is not valid base64.
    """
    if data is None or data == '':
        return None
    if not isinstance(data, str):
        raise NodeValidationError('Missing data')

    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as error:
        raise NodeValidationError('Missing data') from error
