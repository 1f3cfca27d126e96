"""
WSGI config for the music center registration site.

It exposes the WSGI callable as a module-level variable named ``application``.
"""
import os

from pathlib import Path
from dotenv import load_dotenv, find_dotenv

from django.core.wsgi import get_wsgi_application

env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path if env_path.exists() else find_dotenv())

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "music_center.settings")

application = get_wsgi_application()
