"""Gunicorn configuration for production."""
import multiprocessing
import os

# Application
wsgi_app = "linehook:create_app()"

# Server socket
# Use PORT environment variable if available (Cloud Run, Heroku, etc.), otherwise default to 8080
port = os.getenv("PORT", "8080")
bind = f"0.0.0.0:{port}"
backlog = 2048

# Worker processes
workers_env = os.getenv("GUNICORN_WORKERS")
if workers_env:
    workers = int(workers_env)
else:
    cpu_count = multiprocessing.cpu_count()
    workers = max(2, min(cpu_count, 8))

# Each request fans its writes out to the persist pool, so a few request
# threads per worker are enough
worker_class = "gthread"
threads = int(os.getenv("GUNICORN_THREADS", "4"))
timeout = 60
keepalive = 5
graceful_timeout = 30

# Logging
accesslog = "-"  # stdout
errorlog = "-"  # stdout
loglevel = "info"
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

capture_output = True
enable_stdio_inheritance = True

# Process naming
proc_name = "linehook"

# Server mechanics
daemon = False
pidfile = None
umask = 0
user = None
group = None
tmp_upload_dir = None
