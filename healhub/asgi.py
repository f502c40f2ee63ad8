"""
ASGI config for the HealHub project.

Only plain HTTP is served; the site has no WebSocket routes.
"""
import os

from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "healhub.settings")

application = get_asgi_application()
