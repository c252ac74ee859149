from pathlib import Path
from typing import Dict, Mapping, Optional

import orjson

from hubspot_form_action.models.schemas import ResolvedContent
from hubspot_form_action.providers.base import ContentResolver

class StaticContentResolver(ContentResolver):
    name = "static"

    def __init__(self, items: Mapping[int, ResolvedContent] | None = None):
        self.items: Dict[int, ResolvedContent] = dict(items or {})

    @classmethod
    def from_file(cls, path: str | Path) -> "StaticContentResolver":
        """Load a JSON index of the form {"42": {"title": ..., "url": ...}}."""
        raw = orjson.loads(Path(path).read_bytes()) or {}
        return cls({int(k): ResolvedContent(**v) for k, v in raw.items()})

    async def resolve(self, post_id: int) -> Optional[ResolvedContent]:
        return self.items.get(post_id)
