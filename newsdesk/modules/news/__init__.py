"""
News Module
===========

JSON API over news items plus serving of their uploaded images.

Provides:
- GET  /api              welcome message
- GET  /api/news         every item
- GET  /api/news/<id>    one item
- POST /api/news         multipart create with a JPEG image
- GET  /images/<file>    uploaded images
"""

from flask import Blueprint

news_bp = Blueprint(
    'news',
    __name__,
    url_prefix='/api'
)

images_bp = Blueprint(
    'images',
    __name__,
    url_prefix='/images'
)

from . import routes

__all__ = ['news_bp', 'images_bp']
