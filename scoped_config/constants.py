"""Application-wide constants and defaults.

This module centralizes literal values shared across the codebase.
"""

# =============================================================================
# Configuration Holder
# =============================================================================
APP_WIDE_CONFIGURATION = "App-wide configuration loaded"

# =============================================================================
# Service Defaults
# =============================================================================
SERVICE_NAME = "scoped-config"
SERVICE_VERSION = "0.1.0"
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8001
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Length of generated request ids (hex chars)
REQUEST_ID_LENGTH = 8
