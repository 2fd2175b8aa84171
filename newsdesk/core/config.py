import os
from dotenv import load_dotenv

load_dotenv(override=True)

class Config:
    """
    Base configuration for Newsdesk.
    Every value can be overridden through the environment or a .env file.
    """
    # Server settings
    PORT = int(os.getenv('PORT', '3000'))
    HOST = os.getenv('HOST', '0.0.0.0')

    # Get DB_DIR from environment, or use a default if not set
    DB_DIR = os.getenv('DB_DIR', 'db')

    # Database paths - use environment variables or fallback to DB_DIR
    NEWS_DB = os.getenv('NEWS_DB', os.path.join(DB_DIR, 'news.db'))
    LOG_DB = os.getenv('LOG_DB', os.path.join(DB_DIR, 'logs.db'))

    # Table names
    NEWS_TABLE = 'news'
    LOGS_TABLE = 'app_logs'

    # Uploaded images are written here and served back under /images
    IMAGES_FOLDER = os.getenv('IMAGES_FOLDER', os.path.join('public', 'images'))
    IMAGE_FIELD = 'image'
    ALLOWED_IMAGE_MIMETYPES = {'image/jpeg'}

    # Prefix used when rewriting stored filenames into public image URLs
    PUBLIC_BASE_URL = os.getenv('PUBLIC_BASE_URL', f'http://localhost:{PORT}')

    # Comma separated list, or "*" for any origin
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

    @classmethod
    def as_dict(cls):
        """Upper-case settings, ready to be merged into app.config"""
        return {key: getattr(cls, key) for key in dir(cls) if key.isupper()}
