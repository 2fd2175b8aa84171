"""
Storage Utility
===============

Image upload handling for news items: a single JPEG per request, written to
the local images folder under a collision-resistant name.
"""

import os
import re
import time
from flask import current_app

from .config import Config
from .exceptions import InvalidFileType, UploadError
from .logging_service import LoggingService


def get_images_folder():
    """Folder uploaded images are written to and served from"""
    return current_app.config.get('IMAGES_FOLDER', Config.IMAGES_FOLDER)


def generate_filename(original_filename):
    """Prefix the upload's base name with the current epoch millis"""
    name = re.split(r'[/\\]', original_filename)[-1].strip() or 'image'
    return f"{int(time.time() * 1000)}-{name}"


def image_url(filename, base_url):
    """Public URL an uploaded image is served back from"""
    return f"{base_url.rstrip('/')}/images/{filename}"


def save_upload(files, field=None):
    """Validate and store the image attached to a multipart request.

    Args:
        files: The request's uploaded files (``request.files``).
        field: Form field carrying the image, ``IMAGE_FIELD`` by default.

    Returns:
        The generated filename, or None when no single image was attached.

    Raises:
        UploadError: A file arrived under another field, or could not be saved.
        InvalidFileType: The declared media type is not allowed. Nothing is
            written in this case.
    """
    field = field or current_app.config.get('IMAGE_FIELD', Config.IMAGE_FIELD)
    allowed = current_app.config.get('ALLOWED_IMAGE_MIMETYPES', Config.ALLOWED_IMAGE_MIMETYPES)

    for name in files.keys():
        if name != field:
            raise UploadError(f"Unexpected field: {name}")

    uploads = [f for f in files.getlist(field) if f.filename]
    if len(uploads) != 1:
        if uploads:
            LoggingService.warning('uploads', f"Ignoring {len(uploads)} files sent for '{field}'")
        return None

    file = uploads[0]
    if file.mimetype not in allowed:
        LoggingService.warning('uploads', 'Rejected upload', {
            'filename': file.filename,
            'mimetype': file.mimetype,
        })
        raise InvalidFileType("Invalid file type. Only JPEG files are allowed.")

    upload_dir = get_images_folder()
    filename = generate_filename(file.filename)

    try:
        os.makedirs(upload_dir, exist_ok=True)
        file.save(os.path.join(upload_dir, filename))
    except OSError as e:
        LoggingService.log_error_with_traceback('uploads', e, {'filename': filename})
        raise UploadError(f"Failed to save image: {e}") from e

    LoggingService.info('uploads', f"Saved image {filename}", {
        'original_filename': file.filename,
        'mimetype': file.mimetype,
    })
    return filename
