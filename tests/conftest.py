"""
Shared fixtures for the Newsdesk test suite.

Every test gets its own temporary database and images folder.
"""

import io
import os
import shutil
import tempfile

import pytest
from flask import Flask

from newsdesk import Newsdesk

JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00\xff\xd9"
PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"


@pytest.fixture
def tmp_dir():
    """Create a temporary directory for databases and images, cleaned up after."""
    d = tempfile.mkdtemp(prefix="newsdesk-test-")
    yield d
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def images_dir(tmp_dir):
    return os.path.join(tmp_dir, "public", "images")


@pytest.fixture
def app(tmp_dir, images_dir):
    """Flask app with Newsdesk registered against temporary storage."""
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.config["NEWS_DB"] = os.path.join(tmp_dir, "db", "news.db")
    app.config["LOG_DB"] = os.path.join(tmp_dir, "db", "logs.db")
    app.config["IMAGES_FOLDER"] = images_dir
    app.config["PUBLIC_BASE_URL"] = "http://localhost:3000"

    newsdesk = Newsdesk(app)
    yield app
    newsdesk.store.close()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.extensions["newsdesk"].store


def jpeg(filename="valid.jpg"):
    return (io.BytesIO(JPEG_BYTES), filename, "image/jpeg")


def png(filename="valid.png"):
    return (io.BytesIO(PNG_BYTES), filename, "image/png")


def post_news(client, **data):
    return client.post("/api/news", data=data, content_type="multipart/form-data")
