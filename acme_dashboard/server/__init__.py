"""
Acme Dashboard Server Package.

This package contains the web server implementation for the Acme dashboard.

Subpackages:
    api: FastAPI route definitions exposing the dashboard query functions and the seed endpoint.
    core: Server configuration and constants.
    exception_handlers: Mapping of dashboard errors to JSON responses.
    services: FastAPI dependencies.
"""
