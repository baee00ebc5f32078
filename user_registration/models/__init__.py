"""Data models for registered users."""

from .user import UserRecord, UserRecordSchema

__all__ = ['UserRecord', 'UserRecordSchema']
