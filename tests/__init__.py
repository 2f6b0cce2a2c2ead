"""
Test suite for the Task Tracker application.

This package contains:
- unit/: TaskStore, model and seed source tests without Flask
- integration/: API and application factory tests using the Flask test client
"""
