# Middleware package init
"""
CustomerDesk Backend — Middleware Package
===========================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID first so every later log line can carry it
    - Logging captures response status and duration on the way back out
"""
