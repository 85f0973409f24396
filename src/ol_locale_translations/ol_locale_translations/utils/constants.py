"""Constants for locale translation synchronization."""

# Keys of a leaf record in the persisted processed data
ORIGINAL_KEY = "_original"
TRANSLATED_KEY = "_translated"

# Separator used when a key path is passed around as a single string
KEY_PATH_SEPARATOR = "."

# YAML export options
YAML_DUMP_OPTIONS = {
    "allow_unicode": True,
    "default_flow_style": False,
    "sort_keys": False,
}
EXPORT_FILE_EXTENSION = ".yml"

# Setting defaults
DEFAULT_REQUEST_TIMEOUT = 30  # seconds
DEFAULT_EXPORT_CONTENT_TYPE = "text/yaml"
DEFAULT_UNTRANSLATED_PAGE_SIZE = 50

# Error message truncation limit
MAX_ERROR_MESSAGE_LENGTH = 200
