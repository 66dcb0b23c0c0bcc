
import logging, sys, json
from datetime import datetime, timezone

# pola przekazywane przez extra={...} (batch / scoring)
STRUCTURED_FIELDS = ("case_id", "source", "verdict", "score", "hits", "links_found", "reason")

class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.now(tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key in STRUCTURED_FIELDS:
            val = getattr(record, key, None)
            if val is not None and val != "":
                payload[key] = val
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)

PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

def setup_logging(level="INFO", json_output=True):
    # stderr, so stdout stays clean for --json output
    logger = logging.getLogger()
    logger.setLevel(level)
    h = logging.StreamHandler(sys.stderr)
    if json_output:
        h.setFormatter(JsonFormatter())
    else:
        h.setFormatter(logging.Formatter(PLAIN_FORMAT, "%Y-%m-%d %H:%M:%S"))
    logger.handlers = [h]
    return logger
