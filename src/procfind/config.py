"""Static configuration for procfind."""

# Candidates must score strictly above this to be ranked
SCORE_THRESHOLD = 0.7

# Marks the start of a sort directive inside a query
DIRECTIVE_TOKEN = "sort:"
MEMORY_DIRECTIVE = "sort:memory"
CPU_DIRECTIVE = "sort:cpu"

PROMPT = "Enter PID or process name: "

BYTE_UNITS = ("B", "KB", "MB", "GB", "TB")

# Default log level when --verbose is not given
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
