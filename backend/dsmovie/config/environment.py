from pathlib import Path
import os
from dotenv import load_dotenv

env_path = Path(__file__).resolve().parent.parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY')
if not JWT_SECRET_KEY:
    raise ValueError("JWT_SECRET_KEY is not set")

JWT_ALGORITHM = os.getenv('JWT_ALGORITHM', 'HS256')

JWT_ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv('JWT_ACCESS_TOKEN_EXPIRE_MINUTES', '60'))
if JWT_ACCESS_TOKEN_EXPIRE_MINUTES <= 0:
    raise ValueError("JWT_ACCESS_TOKEN_EXPIRE_MINUTES must be positive")

USE_SQLITE = os.getenv('USE_SQLITE', 'true').lower() == 'true'
SQLITE_PATH = os.getenv('SQLITE_PATH', './dsmovie.db')

DB_USER = os.getenv('DB_USER')
DB_PASSWORD = os.getenv('DB_PASSWORD')
DB_HOST = os.getenv('DB_HOST')
DB_PORT = os.getenv('DB_PORT', '5432')
DB_NAME = os.getenv('DB_NAME')

if not USE_SQLITE:
    if not DB_USER:
        raise ValueError("DB_USER is not set")
    if not DB_PASSWORD:
        raise ValueError("DB_PASSWORD is not set")
    if not DB_HOST:
        raise ValueError("DB_HOST is not set")
    if not DB_NAME:
        raise ValueError("DB_NAME is not set")

LOG_DIR = Path(os.getenv('LOG_DIR', 'logs'))
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
if LOG_LEVEL not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
    raise ValueError(f"LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL, got {LOG_LEVEL}")
