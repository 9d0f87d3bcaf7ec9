import logging
import os
import sys

# Log format shared by every module
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "DEBUG").upper(),
    format=LOG_FORMAT,
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

def get_logger(name: str):
    """
    Return the logger for a module.
    """
    return logging.getLogger(name)
