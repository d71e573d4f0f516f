import os
from celery import Celery

# Set the default Django settings module for the 'celery' program.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'apps.common.settings.base')

app = Celery('storefront')

# Settings prefixed with CELERY_ configure the app
app.config_from_object('django.conf:settings', namespace='CELERY')

# Event bus listeners are wrapped into tasks at enqueue time, discovery covers any tasks.py
app.autodiscover_tasks()
