import os
from pathlib import Path
from dotenv import load_dotenv

# .env sits next to the package root (lichelper/.env)
env_path = Path(__file__).resolve().parent.parent / '.env'

load_dotenv(dotenv_path=env_path)

# logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# diagnostics: how many rejected licences a report lists before truncating
REPORT_MAX_REJECTED = int(os.getenv("REPORT_MAX_REJECTED", "20"))
