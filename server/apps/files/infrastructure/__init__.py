"""Infrastructure layer for files app.

This package contains integrations with external systems:
- Blob storage on the local content root
- Thumbnail job queue (Redis list)
- Content type detection and payload decoding

Keep infrastructure concerns separate from business logic.
"""
