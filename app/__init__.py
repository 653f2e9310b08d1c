"""
Resume Share
Upload PDF resumes, get a short shareable link, rename past uploads.

Architecture:
- PostgreSQL: users and resume metadata
- S3-compatible object storage: the PDF files
- JWT bearer sessions
"""

__version__ = "1.0.0"
