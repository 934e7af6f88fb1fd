"""Validation of image upload requests."""

from __future__ import annotations

import io

from werkzeug.datastructures import FileStorage
from werkzeug.wrappers import Request

from . import config
from .errors import ValidationError

ALLOWED_EXTENSIONS = (".jpg", ".jpeg", ".png")


def _base_name(filename: str) -> str:
    return filename.rstrip("/").rsplit("/", 1)[-1]


def _extension(filename: str) -> str:
    name = _base_name(filename)
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def is_allowed_extension(filename: str) -> bool:
    """Whether the file name ends in an accepted image extension (case-sensitive)."""
    return _extension(filename or "") in ALLOWED_EXTENSIONS


def _stream_size(storage: FileStorage) -> int:
    stream = storage.stream
    try:
        position = stream.tell()
        stream.seek(0, io.SEEK_END)
        size = stream.tell()
        stream.seek(position)
        return size
    except (AttributeError, OSError, io.UnsupportedOperation):
        data = stream.read()
        storage.stream = io.BytesIO(data)
        return len(data)


def validate_upload_image_request(request: Request) -> FileStorage:
    """Return the uploaded "image" file, raising ValidationError if it is unacceptable."""
    storage = request.files.get("image")
    if storage is None:
        raise ValidationError("image is required")

    storage.filename = _base_name(storage.filename or "")

    if not is_allowed_extension(storage.filename):
        raise ValidationError("file must be an image")

    size = _stream_size(storage)
    if size == 0:
        raise ValidationError("file is empty")

    if size > config.MAX_UPLOAD_SIZE:
        raise ValidationError(f"maximum file size is {config.MAX_UPLOAD_SIZE} bytes")

    return storage