"""
Application Modules.

- backend/: Note board service, JSON API, configuration and logging
"""
