"""
Newsdesk Core
=============

Configuration, storage, logging and errors shared by the modules.
"""

from .config import Config
from .database import Database
from .exceptions import NewsdeskError, StoreError, UploadError, InvalidFileType
from .logging_service import LoggingService

__all__ = [
    'Config', 'Database', 'LoggingService',
    'NewsdeskError', 'StoreError', 'UploadError', 'InvalidFileType',
]
