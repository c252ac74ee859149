from abc import ABC, abstractmethod
from typing import Optional
from hubspot_form_action.models.schemas import ResolvedContent

class ContentResolver(ABC):
    name: str = "base"

    @abstractmethod
    async def resolve(self, post_id: int) -> Optional[ResolvedContent]:
        """Return title + canonical url of the content item, or None if it does not exist."""
        raise NotImplementedError
