"""
HelloUsers Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → Route Handler

    1. Request ID first: the access-log line needs the ID already set
    2. Logging: measures duration and logs the request line after the
       handler (or the validation layer) has produced a response
"""
