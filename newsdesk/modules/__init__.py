"""
Newsdesk Modules
================

Flask blueprint modules registered by the Newsdesk extension.
"""

__all__ = ['news']
