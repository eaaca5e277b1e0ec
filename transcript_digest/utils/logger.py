import os
import sys
import logging

from transcript_digest.config import config

logging_str = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"

# stdout carries the report, so log records go to stderr
handlers = [logging.StreamHandler(sys.stderr)]
if config.LOG_DIR:
    if not os.path.exists(config.LOG_DIR):
        os.makedirs(config.LOG_DIR)
    loging_path = os.path.join(config.LOG_DIR, "transcriptdigest.log")
    handlers.append(logging.FileHandler(loging_path))

logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format=logging_str,
    handlers=handlers
)

logging = logging.getLogger('transcriptdigest')
