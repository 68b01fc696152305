import os
from dotenv import load_dotenv

load_dotenv()

# Portals reject default client identifiers, so send a desktop browser string
USER_AGENT = os.getenv(
    "USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
)
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10"))

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
ALLOW_ORIGINS = os.getenv("ALLOW_ORIGINS", "*")
STATIC_DIR = os.getenv("STATIC_DIR", "public")

# Estimation rates (German market averages)
ESTIMATED_RENT_PER_SQM = float(os.getenv("ESTIMATED_RENT_PER_SQM", "10"))   # EUR per m²
TYPICAL_ANNUAL_YIELD = float(os.getenv("TYPICAL_ANNUAL_YIELD", "0.04"))
TRANSACTION_COST_RATE = float(os.getenv("TRANSACTION_COST_RATE", "0.10"))
RENOVATION_RATE = float(os.getenv("RENOVATION_RATE", "0.05"))
PROPERTY_TAX_RATE = float(os.getenv("PROPERTY_TAX_RATE", "0.0015"))         # annually
MANAGEMENT_COST_RATE = float(os.getenv("MANAGEMENT_COST_RATE", "0.004"))    # annually
