from slowapi import Limiter
from slowapi.util import get_remote_address

# Shared limiter; per-IP limits are declared on individual endpoints
limiter = Limiter(key_func=get_remote_address)
