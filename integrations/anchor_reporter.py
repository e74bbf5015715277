"""Fire-and-forget reporting of corrected tee/basket anchors to the backend.

When a player drags the tee or basket marker on a hole photo, the corrected
positions are sent back so the shot recommender can learn from them. The
overlay never waits on this and failures are only logged.
"""

from __future__ import annotations

import json
import threading
import time
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from configs.settings import UploadConfig
from contracts.versioning import make_envelope
from exceptions import ReportError
from log_config.logger import get_logger

logger = get_logger(__name__)

Point = Tuple[float, float]  # percent of photo width/height


@dataclass(frozen=True)
class AnchorCorrection:
    tee: Point
    basket: Point
    original_tee: Point
    original_basket: Point
    log_id: Optional[str] = None

    @property
    def changed(self) -> bool:
        return self.tee != self.original_tee or self.basket != self.original_basket

    def to_payload(self) -> Dict[str, Any]:
        def _xy(point: Point) -> Dict[str, float]:
            return {"x": float(point[0]), "y": float(point[1])}

        return make_envelope(
            "anchor_correction",
            {
                "log_id": self.log_id,
                "tee_position": _xy(self.tee),
                "basket_position": _xy(self.basket),
                "original_tee_position": _xy(self.original_tee),
                "original_basket_position": _xy(self.original_basket),
                "reported_utc": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
            },
        )


class AnchorReporter:
    def __init__(self, config: UploadConfig) -> None:
        self._config = config

    @property
    def enabled(self) -> bool:
        return bool(self._config.enabled and self._config.api_base.strip())

    @property
    def url(self) -> str:
        return f"{self._config.api_base.rstrip('/')}{self._config.report_path}"

    def report(self, correction: AnchorCorrection) -> Optional[threading.Thread]:
        """Send the correction on a daemon thread; returns the thread, or None if skipped."""
        if not self.enabled:
            logger.debug("Anchor reporting disabled; skipping")
            return None
        if not correction.changed:
            logger.debug("Anchors unchanged; nothing to report")
            return None
        thread = threading.Thread(
            target=self._send_logged,
            args=(correction,),
            name="anchor-reporter",
            daemon=True,
        )
        thread.start()
        return thread

    def send(self, correction: AnchorCorrection) -> int:
        """Blocking POST of the correction. Returns the HTTP status.

        Raises:
            ReportError: If the request fails or the backend rejects it
        """
        if not self.enabled:
            raise ReportError("Anchor reporting is disabled or has no API base URL")

        data = json.dumps(correction.to_payload()).encode("utf-8")
        headers = {"Content-Type": "application/json"}
        if self._config.api_key:
            headers["x-api-key"] = self._config.api_key
        request = urllib.request.Request(self.url, data=data, headers=headers, method="POST")
        try:
            with urllib.request.urlopen(request, timeout=self._config.timeout_s) as response:
                status = response.status
        except urllib.error.HTTPError as exc:
            raise ReportError(f"Anchor report rejected: {exc.code}", status=exc.code) from exc
        except (urllib.error.URLError, OSError) as exc:
            raise ReportError(f"Anchor report failed: {exc}") from exc
        if status >= 400:
            raise ReportError(f"Anchor report rejected: {status}", status=status)
        return status

    def _send_logged(self, correction: AnchorCorrection) -> None:
        try:
            status = self.send(correction)
        except ReportError as exc:
            logger.warning(f"Could not report anchor correction ({correction.log_id}): {exc}")
            return
        logger.debug(f"Anchor correction reported ({correction.log_id}): HTTP {status}")
