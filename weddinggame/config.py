"""Application-wide settings."""

MAX_UPLOAD_SIZE = 1024 * 1024 * 1
"""Largest accepted upload, in bytes."""