"""
Services providing core functionality.
"""

import logging

from greeter.domain.greeting import Greeting

logger = logging.getLogger(__name__)


def get_greeting(name: str) -> Greeting:
    """
    Get personalized greeting

    :param name: name taken verbatim from the request path
    :type name: str

    :return: personalized greeting
    :rtype: Greeting
    """
    logger.debug("Personalizing greeting for %s...", name)

    return Greeting.for_name(name)
