"""Gunicorn config for the hazard map server."""
import os

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# One worker: filter state lives in the process, so a second worker would
# hold a separate view of the map.
worker_class = "uvicorn.workers.UvicornWorker"
workers = 1
wsgi_app = "hazardmap.main:app"

timeout = 60
graceful_timeout = 30

# Keep-alive must exceed a typical proxy keep-alive (60s)
keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"
