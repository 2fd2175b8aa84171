"""
News Models
===========

Shapes of a news item as stored and as returned to clients.
"""

from datetime import datetime, timezone
from typing import List, Optional, TypedDict

from newsdesk.core.storage import image_url


class NewsItem(TypedDict):
    id: int
    title: str
    content: str
    image: str
    date_posted: str


class PublicNewsItem(TypedDict):
    id: int
    title: str
    content: str
    image: str  # absolute URL of the uploaded image
    date_posted: str


def to_public_view(item: NewsItem, base_url: str) -> PublicNewsItem:
    """Stored row -> JSON payload with the image filename turned into a URL"""
    return {
        'id': item['id'],
        'title': item['title'],
        'content': item['content'],
        'image': image_url(item['image'], base_url),
        'date_posted': item['date_posted'],
    }


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-03-01T09:30:12.345Z"""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def missing_fields(title: Optional[str], content: Optional[str], image: Optional[str]) -> List[str]:
    """Collect a message for every required value that is absent"""
    errors = []
    if not image:
        errors.append('No image uploaded')
    if not title:
        errors.append('title is missing')
    if not content:
        errors.append('content is missing')
    return errors
