import os

# gunicorn -c gunicorn_conf.py eventhub.main:app
bind = os.getenv("GUNICORN_BIND", "0.0.0.0:8000")
# Each worker holds its own dashboard view-model and event store
workers = int(os.getenv("WEB_CONCURRENCY", 1))
worker_class = "uvicorn.workers.UvicornWorker"
timeout = int(os.getenv("GUNICORN_TIMEOUT", 30))
graceful_timeout = int(os.getenv("GUNICORN_GRACEFUL_TIMEOUT", 30))
keepalive = int(os.getenv("GUNICORN_KEEPALIVE", 5))

accesslog = "-"
errorlog = "-"
