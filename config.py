import os
from decimal import Decimal
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./invoicing.db")
    DB_ECHO = bool(data.get("DB_ECHO", False))
    CREATE_TABLES_ON_STARTUP = bool(data.get("CREATE_TABLES_ON_STARTUP", True))
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # Pricing
    TAX_RATE = Decimal(str(data.get("TAX_RATE", "0.18")))  # GST

    # Invoice numbering
    INVOICE_NUMBER_PREFIX = data.get("INVOICE_NUMBER_PREFIX", "INV")
    FISCAL_YEAR_START_MONTH = int(data.get("FISCAL_YEAR_START_MONTH", 4))  # April

    # Printable invoice
    COMPANY_NAME = data.get("COMPANY_NAME", "Sales Invoicing")
    COMPANY_ADDRESS = data.get("COMPANY_ADDRESS", "")
    CURRENCY_SYMBOL = data.get("CURRENCY_SYMBOL", "Rs.")
