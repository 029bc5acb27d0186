import logging
import sys
import json


class JSONFormatter(logging.Formatter):
    def format(self, record):
        log_record = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_record)


def setup_logging(json_output: bool = False):
    """Configures the root logger, either as JSON lines or plain text."""
    if not json_output:
        logging.basicConfig(
            level=logging.INFO,
            format="%(levelname)s:     %(message)s",
        )
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    root = logging.getLogger()
    root.setLevel(logging.INFO)
    # Clear existing handlers if any
    if root.handlers:
        root.handlers = []
    root.addHandler(handler)
