"""Application-wide constants (cache keys, span names, defaults)."""

# Cache keys: separator between key parts. No key part may contain it.
CACHE_KEY_SEP = ":"

# Wildcard part; a key ending in it is a pattern covering one or more trailing parts.
CACHE_KEY_WILDCARD = "*"

# Operation-name parts used in list and alternate-key cache entries.
CACHE_OP_GET_ALL = "GetAll"
CACHE_OP_GET_ALL_BELONGS_TO = "GetAllBelongsTo"
CACHE_OP_GET_ALL_BY_RECIPIENT = "GetAllByRecipient"
CACHE_OP_GET_BY_KEY = "GetByKey"
CACHE_OP_GET_BY_RESOURCE = "GetByResource"
CACHE_OP_GET_BY_USER = "GetByUser"

# Span name prefixes per backend.
SPAN_PREFIX_CACHE = "repository.redis"
SPAN_PREFIX_RECORD = "repository.pg"
SPAN_PREFIX_STATIC = "repository.s3"

# Redis SCAN batch size used when snapshotting keys for pattern deletes.
CACHE_SCAN_COUNT = 500

# Fallback content type for static files whose type cannot be guessed.
DEFAULT_CONTENT_TYPE = "application/octet-stream"
