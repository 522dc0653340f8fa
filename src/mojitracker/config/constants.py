# Tracker error codes with special meaning to one or more verbs
UNKNOWN_KEY = "unknown_key"
KEY_EXISTS = "key_exists"
NONE_MATCH = "none_match"

# Wire format
RESPONSE_OK = "OK"
RESPONSE_ERROR = "ERR"
LINE_TERMINATOR = "\r\n"
DEFAULT_ENCODING = "utf-8"

# Operation defaults
DEFAULT_PATH_COUNT = 2
DEFAULT_LIST_KEYS_LIMIT = 1000
DEFAULT_MULTI_DESTINATION = True
DEFAULT_NO_VERIFY = False

# Environment variable prefix for TrackerSettings
ENV_PREFIX = "MOJI_"
