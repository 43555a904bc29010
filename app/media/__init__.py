"""
Media app for image uploads.

This app provides:
- Multipart image uploads stored under generated names
- A live listing of the uploads directory
- Deletion by filename (admin only)
- Public delivery of stored files at /uploads/<filename>

Stored files are the only state; there are no media models.
"""
