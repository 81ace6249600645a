"""
Framework Default Values
All hardcoded values should be defined here and accessed via Config.get()
This file contains sensible defaults that can be overridden in .env or config files
"""

# ============================================================================
# CALLER DEFAULTS
# ============================================================================

# Separator between container and class in "Container@ClassName"
DEFAULT_CALLER_SEPARATOR = '@'

# Root package every container lives under (app.containers.<Container>...)
DEFAULT_ROOT_NAMESPACE = 'app'

# Directory (and package) holding the containers
DEFAULT_CONTAINERS_DIRECTORY = 'containers'

# Primary entry point every resolvable class exposes
DEFAULT_RUN_METHOD = 'run'

# Container key the resolver is bound to
DEFAULT_PORTO_BINDING = 'porto'

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
DEFAULT_LOG_FORMAT = 'json'
