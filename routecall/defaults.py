"""
Framework Default Values
All hardcoded values should be defined here and accessed via Config.get()
These defaults can be overridden in .env or in config/ modules
"""

# ============================================================================
# URL GENERATION DEFAULTS
# ============================================================================

# Token source backing Call.unique(): 'secure' (OS entropy) or 'seeded'
DEFAULT_URL_TOKEN_SOURCE = 'secure'
DEFAULT_URL_TOKEN_SEED = None

# Signed 64-bit range of cache-busting tokens
URL_TOKEN_BITS = 64

# ============================================================================
# REDIRECT DEFAULTS
# ============================================================================

DEFAULT_REDIRECT_STATUS = 302

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_FORMAT = 'json'
DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
DEFAULT_APP_ENV = 'local'
