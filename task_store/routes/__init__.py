"""
Routes package for the Task Store application.

This package contains route blueprints:
- api: JSON endpoints for the task collection
"""
