import os

from celery import Celery
from celery.signals import worker_process_shutdown

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "pixiplayground.settings")

app = Celery("pixiplayground")
app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()


@worker_process_shutdown.connect
def close_shared_clients(**kwargs):
    from playgrounds.services.cache_purge_service import close_purge_client

    close_purge_client()
