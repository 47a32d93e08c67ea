"""Application constants."""

USER_AGENT = "biis-import/0.6 (+gif exchange; contact: configured-email)"
PLUGIN_ID = "biis.xml"
PLUGIN_NAME = "BIIS-XML-Plugin"
PLUGIN_VERSION = "0.6"
MODEL_VERSION_PREFIX = "1-0.6."
STREAM_PARAMETER = "biis-file"
STREAM_ENCODING = "UTF-8"
META_CREATOR = "icred with biis-xml plugin"
META_FORMAT = "XML"
META_VERSION = "1-0.6.2"
META_SUBSET = "S5_7"
PATH_SEPARATOR = "/"
EXIT_SUCCESS = 0
EXIT_PARTIAL = 10
EXIT_HARD_FAIL = 20
JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "stage",
    "event",
    "status",
    "path",
    "token",
    "duration_ms",
    "properties_out",
    "error_code",
    "message",
)
