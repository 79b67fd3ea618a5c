"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Mailjet REST client, a product of Garudex Labs

Normalized API response.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict

from mailjet.exceptions import ResponseParseError


@dataclass(frozen=True)
class MailjetResponse:
    """Status code plus parsed JSON body of one call.

    ``status_code`` is ``0`` for dry-run results. ``body`` is never
    ``None``: an empty wire body becomes ``{}``.
    """
    status_code: int
    body: Any = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.body is None:
            object.__setattr__(self, "body", {})

    @classmethod
    def from_text(cls, status_code: int, text: str) -> MailjetResponse:
        """Parse a raw wire body.

        Raises:
            ResponseParseError: If ``text`` is non-empty and not valid JSON.
        """
        if not text:
            return cls(status_code=status_code, body={})
        try:
            body = json.loads(text)
        except ValueError as e:
            raise ResponseParseError(
                f"Response body is not valid JSON (status {status_code}): {e}",
                status_code=status_code,
                text=text,
            ) from e
        return cls(status_code=status_code, body=body)

    @property
    def is_dry_run(self) -> bool:
        return self.status_code == 0

    def to_dict(self) -> Dict[str, Any]:
        return {"status_code": self.status_code, "body": self.body}

    def __str__(self) -> str:
        return f"{self.status_code} {json.dumps(self.body, ensure_ascii=False)}"
