"""Client defaults and API endpoint paths."""

DEFAULT_BASE_URL = "https://putput.io"
DEFAULT_TIMEOUT = 30.0
DEFAULT_CONTENT_TYPE = "application/octet-stream"

GUEST_PATH = "/api/v1/auth/guest"
PRESIGN_PATH = "/api/v1/upload/presign"
CONFIRM_PATH = "/api/v1/upload/confirm"
UPLOAD_URL_PATH = "/api/v1/upload/url"
FILES_PATH = "/api/v1/files"
ACTIVITY_PATH = "/api/v1/dashboard/activity"
WEBHOOKS_PATH = "/api/v1/dashboard/webhooks"
PROJECTS_PATH = "/api/v1/dashboard/projects"
ACCOUNT_PATH = "/api/v1/account"
EXPORT_PATH = "/api/v1/account/export"
