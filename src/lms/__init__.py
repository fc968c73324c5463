"""LMS - A minimal Learning Management System REST API."""

APP_VERSION = "1.0.0"

__version__ = APP_VERSION
