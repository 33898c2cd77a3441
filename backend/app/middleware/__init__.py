# Middleware package init
"""
Notes API — Middleware Package
===============================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID first, so the access log line already carries the id
    2. Logging wraps everything below it, so the duration covers the handler

Authentication is NOT middleware here: /health stays public, and the
notes routes pull the identity through the get_current_user dependency.
"""
