"""
ambit Constants

Centralized constants for magic values, defaults, and configuration.
"""

# Router / App Identity
ROUTER_APP_PREFIX = "ambit-"
NAME_SEPARATOR = "-"
ROUTER_TAG_PREFIX = "tag:ambit-"
DEFAULT_FLY_NETWORK = "default"
ROUTER_ID_LENGTH = 6
ROUTER_ID_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"

# Tailscale
TAILSCALE_API_KEY_PREFIX = "tskey-api-"
ENV_TAILSCALE_API_KEY = "TAILSCALE_API_KEY"

# Configuration Directory
ENV_CONFIG_DIR = "AMBIT_CONFIG_DIR"
DEFAULT_CONFIG_DIR = "~/.config/ambit"
CREDENTIALS_FILENAME = "credentials.json"
CREDENTIALS_FILE_PERMISSIONS = 0o600
LOGS_DIRNAME = "logs"

# Subnet Derivation
SUBNET_GROUP_COUNT = 3
SUBNET_SUFFIX = "::/48"

# Tool Names (for prerequisite checks)
FLYCTL_BINARY = "fly"
FLYCTL_INSTALL_URL = "https://fly.io/docs/flyctl/install/"

# Prerequisite Messages
ERROR_FLYCTL_NOT_FOUND = f"Flyctl Not Found. Install from {FLYCTL_INSTALL_URL}"
ERROR_TAILSCALE_KEY_REQUIRED = (
    f"Tailscale API Key Required. Run 'ambit create' or set {ENV_TAILSCALE_API_KEY}"
)
ERROR_MISSING_PREREQUISITES = "Missing Prerequisites"

# Fly stderr decoration
FLY_NOISE_PREFIXES = ("-->",)
FLY_NOISE_LINES = ("Error",)
UNKNOWN_ERROR_DETAIL = "unknown error"

# Log Configuration
LOG_DATE_FORMAT = "%Y-%m-%d"
LOG_TIME_FORMAT = "%H-%M-%S"
