"""Default settings for assetcheck.

Every value here can be overridden through keyword arguments on the public
entry points or through CLI flags.
"""

DEFAULT_ENCODING = "utf-8"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_12_4) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/57.0.2987.133 Safari/537.36"
)

# Appended to remote references that have no path
WELL_KNOWN_PATH = "/.well-known/assetlinks.json"

# Scheme-less references ending in these are always treated as local files
LOCAL_FILE_SUFFIXES = frozenset({".json", ".txt"})

# Relation capability tokens
LOGIN_CREDS = "delegate_permission/common.get_login_creds"
HANDLE_ALL_URLS = "delegate_permission/common.handle_all_urls"

# Output verbosity
LOG_SILENT = 0
LOG_INFO = 1
LOG_DEBUG = 2
