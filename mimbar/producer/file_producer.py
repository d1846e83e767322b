"""
Producer that replays a saved response from disk.

Useful for offline runs, for re-exporting a script generated earlier,
and for tests.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from mimbar.errors import ProducerRequestFailed

from .base_producer import BaseScriptProducer, ScriptRequest

logger = logging.getLogger(__name__)


class FileScriptProducer(BaseScriptProducer):
    """
    Returns the contents of a JSON file regardless of the request.

    Usage::

        producer = FileScriptProducer("responses/sabar.json")
        raw = producer.produce(ScriptRequest(topic="Sabar"))
    """

    def __init__(self, path: Optional[Union[str, Path]]):
        self.path = Path(path) if path else None

    @property
    def is_available(self) -> bool:
        return self.path is not None

    @property
    def producer_name(self) -> str:
        return str(self.path) if self.path else "file"

    def produce(self, request: ScriptRequest) -> str:
        logger.debug("Replaying saved response for '%s' from %s", request.topic, self.path)
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ProducerRequestFailed(f"Failed to read '{self.path}': {e}") from e
