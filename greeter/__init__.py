""" Initializations """

import os

from greeter.config.logger import apply_logging_settings
from greeter.config.service_settings import ServiceSettings

__version__ = "1.0.0"

CONFIG = ServiceSettings(
    "settings.yaml", os.path.join(os.path.dirname(__file__), "config")
)

# Configure logger
apply_logging_settings(CONFIG.logging)
