"""
Constants for the video annotate tool.

Contains all constant values used throughout the application.
"""

# Prefix (lower-cased, first four characters) identifying a Cloud Storage URI
STORAGE_URI_PREFIX = "gs:/"

# Default transcription settings
DEFAULT_LANGUAGE_CODE = "en-US"
DEFAULT_ENABLE_AUTOMATIC_PUNCTUATION = True

# Default configuration - single source of truth
DEFAULT_SETTINGS = {
    'request': {
        'timeout': None,  # Seconds to wait for the long-running operation; None uses the client default
    },
    'transcription': {
        'language_code': DEFAULT_LANGUAGE_CODE,
        'enable_automatic_punctuation': DEFAULT_ENABLE_AUTOMATIC_PUNCTUATION,
    },
    'logging': {
        'level': 'INFO',
        'file': None,
    },
}

def positive_float(value: str) -> float:
    """Parse a strictly positive, finite number of seconds."""
    number = float(value)
    if not 0 < number < float("inf"):
        raise ValueError(f"expected a positive number, got {value!r}")
    return number


# Environment variable -> (dotted setting key, type)
ENV_SETTINGS = {
    'VIDEO_ANNOTATE_TIMEOUT': ('request.timeout', positive_float),
    'VIDEO_ANNOTATE_LANGUAGE_CODE': ('transcription.language_code', str),
    'VIDEO_ANNOTATE_LOG_LEVEL': ('logging.level', str),
    'VIDEO_ANNOTATE_LOG_FILE': ('logging.file', str),
}

# Label kinds printed by the labels verb, in output order
LABEL_KINDS = [
    ("Video", "segment_label_annotations"),
    ("Shot", "shot_label_annotations"),
    ("Frame", "frame_label_annotations"),
]
