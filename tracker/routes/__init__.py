"""
Routes package for the Task Tracker application.

This package contains route blueprints:
- api: JSON endpoints over the application's task store
"""
