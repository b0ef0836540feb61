# app/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- db: Database configuration and connection management
- errors: Error hierarchy mapped to HTTP responses
- security: Password hashing, token service and authorization guard
- storage: Local storage for post images
"""
