import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./invoices.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["http://localhost:4200", "http://127.0.0.1:4200"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))

    # Printed invoice header
    COMPANY_NAME = data.get("COMPANY_NAME", "MC Computers")
    COMPANY_ADDRESS = data.get("COMPANY_ADDRESS", "123 Tech Avenue, Colombo 07, Sri Lanka")
    COMPANY_CONTACT = data.get("COMPANY_CONTACT", "+94 11 234 5678 | info@mcccomputers.lk")
    CURRENCY = data.get("CURRENCY", "LKR")

    INVOICE_NUMBER_PREFIX = data.get("INVOICE_NUMBER_PREFIX", "INV")

    # Base URL used by the invoice API client
    API_BASE_URL = data.get("API_BASE_URL", "http://localhost:8000/api")
