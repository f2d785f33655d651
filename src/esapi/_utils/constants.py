# Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ACCEPT = "Accept"
HEADER_OPAQUE_ID = "X-Opaque-Id"
HEADER_WARNING = "Warning"

# Content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_NDJSON = "application/x-ndjson"

# Environment variables
ENV_URL = "ESAPI_URL"
ENV_TIMEOUT = "ESAPI_TIMEOUT"
ENV_VERIFY = "ESAPI_VERIFY"
ENV_API_VERSION = "ESAPI_API_VERSION"

DEFAULT_BASE_URL = "http://localhost:9200"
DEFAULT_TIMEOUT = 5.0
DEFAULT_API_VERSION = 7
SUPPORTED_API_VERSIONS = (5, 6, 7)
