import logging

LOGGER = logging.getLogger("pocketcube")
