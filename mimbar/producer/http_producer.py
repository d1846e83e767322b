"""
Producer that posts the prompt to a configurable HTTP endpoint.

The endpoint receives::

    {"system": "...", "prompt": "...", "response_mime_type": "application/json"}

and must answer with the generated script text as the response body.
An optional key is sent as a bearer token.
"""

import json
import logging
import urllib.error
import urllib.request
from typing import Optional

from mimbar.errors import ProducerRequestFailed

from .base_producer import BaseScriptProducer, ScriptRequest
from .prompts import build_system_prompt, build_user_prompt

logger = logging.getLogger(__name__)


class HttpScriptProducer(BaseScriptProducer):
    """
    Calls a JSON-over-HTTP text generation endpoint.

    Usage::

        producer = HttpScriptProducer("http://localhost:8080/generate")
        raw = producer.produce(ScriptRequest(topic="Sabar"))
    """

    def __init__(
        self,
        endpoint: Optional[str],
        api_key: Optional[str] = None,
        timeout: float = 120.0,
    ):
        self.endpoint = endpoint
        self.api_key = api_key
        self.timeout = timeout

    @property
    def is_available(self) -> bool:
        return bool(self.endpoint)

    @property
    def producer_name(self) -> str:
        return self.endpoint or "http"

    def build_payload(self, request: ScriptRequest) -> bytes:
        """Encode the request body sent to the endpoint."""
        body = {
            "system": build_system_prompt(),
            "prompt": build_user_prompt(request),
            "response_mime_type": "application/json",
        }
        return json.dumps(body, ensure_ascii=False).encode("utf-8")

    def produce(self, request: ScriptRequest) -> str:
        headers = {"Content-Type": "application/json; charset=utf-8"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        req = urllib.request.Request(
            self.endpoint,
            data=self.build_payload(request),
            headers=headers,
            method="POST",
        )
        logger.info("Requesting script from %s", self.endpoint)
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                charset = resp.headers.get_content_charset() or "utf-8"
                text = resp.read().decode(charset)
        except urllib.error.HTTPError as e:
            raise ProducerRequestFailed(
                f"Producer rejected the request: HTTP {e.code} {e.reason}"
            ) from e
        except (urllib.error.URLError, OSError) as e:
            raise ProducerRequestFailed(f"Producer request failed: {e}") from e

        logger.debug("Producer answered with %d characters", len(text))
        return text
