from slowapi import Limiter
from slowapi.util import get_remote_address

from .settings import settings

# Per-IP limiter shared by the app state and the form endpoints
limiter = Limiter(key_func=get_remote_address)

form_limit = limiter.limit(settings.rate_limit)
