# Middleware package init
"""
Notes API — Middleware Package
================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID first, so every later log line can carry it
    2. Logging sees the final status code and the full duration

    Responses travel back through the chain in reverse order, which is where
    the X-Request-ID header and the access log line are written.
"""
