import logging
import sys


class ContextFormatter(logging.Formatter):
    """Formatter for records that may carry export ``job_id`` and ``stage`` extras."""
    def format(self, record):
        if not hasattr(record, 'job_id'):
            record.job_id = '-'
        if not hasattr(record, 'stage'):
            record.stage = '-'
        return super().format(record)


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [job_id=%(job_id)s stage=%(stage)s] - %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ContextFormatter(LOG_FORMAT))
    logging.basicConfig(
        level=level,
        handlers=[handler],
    )
