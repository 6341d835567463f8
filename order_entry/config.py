"""
Environment configuration module
Loads and validates the optional environment variables.
"""

import os
from dotenv import load_dotenv

from order_entry.parser.types import Platform

# Load .env file (for local development)
load_dotenv()

SUPPORTED_PLATFORMS = tuple(p.value for p in Platform)

# Optional environment variables (with defaults)
DEFAULT_PLATFORM = os.getenv('ORDER_ENTRY_DEFAULT_PLATFORM', 'pdd').strip().lower()
LOG_LEVEL = os.getenv('ORDER_ENTRY_LOG_LEVEL', 'INFO').strip().upper()
CATALOG_PATH = os.getenv('ORDER_ENTRY_CATALOG_PATH', '')
CSV_INCLUDE_BOM = os.getenv('ORDER_ENTRY_CSV_BOM', 'true').strip().lower() not in ('0', 'false', 'no')

# Validate
if DEFAULT_PLATFORM not in SUPPORTED_PLATFORMS:
    raise ValueError(
        f"Invalid ORDER_ENTRY_DEFAULT_PLATFORM: {DEFAULT_PLATFORM} (expected one of: {', '.join(SUPPORTED_PLATFORMS)})"
    )
