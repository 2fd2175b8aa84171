"""
News Routes
===========

List, read and create news items. Every failure is answered with a JSON
error body; store and upload problems use status 400.
"""

import os
from flask import current_app, jsonify, request, send_from_directory

from . import news_bp, images_bp
from .models import missing_fields, to_public_view, utc_timestamp
from newsdesk.core.exceptions import StoreError, UploadError
from newsdesk.core.logging_service import LoggingService
from newsdesk.core.storage import get_images_folder, save_upload


def get_store():
    """The news store opened by the Newsdesk extension"""
    return current_app.extensions['newsdesk'].store


def get_base_url():
    return current_app.config['PUBLIC_BASE_URL']


# ===== API Routes =====

@news_bp.after_request
def log_api_call(response):
    """Record every API call with its status"""
    LoggingService.log_api_call('news', request.path, request.method, response.status_code)
    return response


@news_bp.route('', methods=['GET'])
def welcome():
    """Welcome message"""
    return jsonify({'message': 'Welcome to the news API'})


@news_bp.route('/news', methods=['GET'])
def list_news():
    """Get all news items"""
    try:
        items = get_store().list_all()
    except StoreError as e:
        LoggingService.error('news', f"Error listing news: {e}")
        return jsonify({'error': str(e)}), 400

    base_url = get_base_url()
    return jsonify([to_public_view(item, base_url) for item in items])


@news_bp.route('/news/<int:news_id>', methods=['GET'])
def get_news(news_id):
    """Get single news item"""
    try:
        item = get_store().get_by_id(news_id)
    except StoreError as e:
        LoggingService.error('news', f"Error getting news {news_id}: {e}")
        return jsonify({'error': str(e)}), 400

    if item is None:
        return jsonify({'error': 'News not found'}), 404
    return jsonify(to_public_view(item, get_base_url()))


@news_bp.route('/news', methods=['POST'])
def create_news():
    """Create news item from a multipart form with an image"""
    try:
        image = save_upload(request.files)
    except UploadError as e:
        return jsonify({'error': str(e)}), 400

    title = request.form.get('title')
    content = request.form.get('content')

    errors = missing_fields(title, content, image)
    if errors:
        return jsonify({'errors': errors}), 400

    try:
        news_id = get_store().insert(title, content, image, utc_timestamp())
    except StoreError as e:
        LoggingService.error('news', f"Error creating news: {e}", {'image': image})
        return jsonify({'error': str(e)}), 400

    LoggingService.info('news', f"Created news {news_id}", {'title': title, 'image': image})
    return jsonify({'message': 'News added successfully'})


# ===== Uploaded Images =====

@images_bp.route('/<path:filename>', methods=['GET'])
def serve_image(filename):
    """Serve an uploaded image"""
    return send_from_directory(os.path.abspath(get_images_folder()), filename)
