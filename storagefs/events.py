# python
"""
storagefs/events.py
JSONL journal of filesystem mutations.
"""
import datetime
import json
import logging
import pathlib
from typing import Any, Optional, Union

from . import __version__

logger = logging.getLogger(__name__)


def iso_ts():
    """
    Return a timezone-aware UTC ISO timestamp (Z suffix) for logging.
    """
    dt = datetime.datetime.now(datetime.timezone.utc).replace(microsecond=0)
    return dt.isoformat().replace("+00:00", "Z")


def ensure_dir(path: pathlib.Path):
    path.mkdir(parents=True, exist_ok=True)


class EventLog:
    def __init__(self, events_file: Optional[Union[str, pathlib.Path]] = None):
        self.events_file = pathlib.Path(events_file) if events_file else None

    @property
    def enabled(self) -> bool:
        return self.events_file is not None

    def log(self, event: str, root_name: str, **fields: Any) -> None:
        if self.events_file is None:
            return
        rec = {
            "ts": iso_ts(),
            "event": event,
            "root_name": root_name,
            "version": __version__,
            "payload": fields or {},
        }
        try:
            ensure_dir(self.events_file.parent)
            with open(self.events_file, "a", encoding="utf-8") as f:
                f.write(json.dumps(rec, ensure_ascii=False) + "\n")
        except OSError:
            # the mutation is already saved; only the journal entry is lost
            logger.warning("Failed to append %s event to %s", event, self.events_file, exc_info=True)
