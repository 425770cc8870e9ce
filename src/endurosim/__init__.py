"""Single-vehicle enduro race simulator."""

import structlog

from endurosim.logging_config import configure_logging

__version__ = "0.1.0"

# Keep library use quiet and off stdout until the caller sets up logging
if not structlog.is_configured():
    configure_logging(log_level="WARNING")
