"""
CLI Client Module.

Interactive command-line client for the URL shortener backend.

Architecture:
- The session bootstrapper resolves a user identity (login or creation)
- The operation dispatcher runs the post-login menu against that identity
- All backend calls go through APIClient (httpx), one request at a time
- Console I/O goes through the Terminal protocol (Rich in production)

Usage:
    python cli.py
    python cli.py --debug
"""
