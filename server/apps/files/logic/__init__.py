"""Business logic layer for files app.

This package contains all business logic for the file hierarchy:
- Folder, file and image creation with parent validation
- Owner-scoped lookup and paginated listing
- Visibility toggling and visibility-gated content reads

All business logic should be implemented here, separate from
models (data layer) and infrastructure (external systems).
"""
