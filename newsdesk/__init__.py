"""
Newsdesk - A small news API
===========================

Flask service for creating and reading news items, each with one uploaded
JPEG image:
- SQLite record store
- Local image uploads served back under /images
- JSON API under /api

Usage:
    from newsdesk import create_app

    app = create_app()
    app.run(port=3000)
"""

__version__ = '0.1.0'

from .extension import Newsdesk, create_app

__all__ = ['Newsdesk', 'create_app']
