# tenant_service/cli/config.py
import os
from dotenv import load_dotenv
from pathlib import Path

# This cli/config.py file is at <project>/tenant_service/cli/config.py
project_root = Path(__file__).parent.parent.parent.resolve()

load_dotenv(dotenv_path=project_root / '.env', override=True)

# API configuration for CLI client communication
TENANT_SERVICE_CLI_API_BASE_URL = os.getenv("TENANT_SERVICE_CLI_API_BASE_URL", "http://127.0.0.1:8000")

# Admin API key for authenticated operations
TENANT_SERVICE_CLI_ADMIN_API_KEY = os.getenv("ADMIN_API_KEY")
