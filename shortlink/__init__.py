"""
Shortlink Client.

- core/: Configuration, logging and exceptions shared by the client
- schemas/: Pydantic models for backend responses
- cli/: Interactive session (bootstrap, dispatcher, operations)
"""
