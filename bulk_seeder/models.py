from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


@dataclass
class AnyDocument:
    name: str
    max: int
    min: int
    time: str

    def to_source(self) -> Dict[str, Any]:
        return asdict(self)


class BulkOutcome(BaseModel):
    """Result of one bulk submission, passed through from the backend."""

    index: str = Field(description="Index the batch was submitted to")
    status_code: Optional[int] = Field(
        default=None,
        description="HTTP status reported by the backend, None if no request was sent",
    )
    body: Dict[str, Any] = Field(
        default_factory=dict, description="Raw response body from the bulk API"
    )
    skipped: bool = Field(
        default=False, description="True when the batch was empty and nothing was sent"
    )

    @property
    def errors(self) -> bool:
        if "errors" in self.body:
            return bool(self.body["errors"])
        return self.status_code is not None and self.status_code >= 300

    @property
    def succeeded(self) -> bool:
        status_ok = self.skipped or (
            self.status_code is not None and 200 <= self.status_code < 300
        )
        return status_ok and not self.errors

    def failed_items(self) -> List[Dict[str, Any]]:
        """
        Collect the per-document results the backend marked as failed.

        Returns:
            List of item result dicts (the inner object of each bulk item,
            e.g. ``{"_index": ..., "status": 400, "error": {...}}``)
        """
        failed = []
        for item in self.body.get("items") or []:
            for result in (item or {}).values():
                if result.get("status", 0) >= 300:
                    failed.append(result)
        return failed
