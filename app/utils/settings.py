# app/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# domyslnie baza w pamieci, znika po restarcie
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite://")
REDIS_URL = os.getenv("REDIS_URL", "redis://redis:6379/0")
CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", REDIS_URL)
CELERY_RESULT_BACKEND = os.getenv("CELERY_RESULT_BACKEND", "redis://redis:6379/2")
# domyslnie bez brokera, jak baza w pamieci; z Redisem ustaw false
CELERY_TASK_ALWAYS_EAGER = _flag("CELERY_TASK_ALWAYS_EAGER", "true")
SEED_PRODUCTS = _flag("SEED_PRODUCTS", "true")
# pierwszy admin, tylko on moze nadawac role admin kolejnym
ADMIN_NAME = os.getenv("ADMIN_NAME", "admin")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
