from dataclasses import dataclass, field
from typing import Optional

@dataclass
class Video:
    name: str
    url: str
    duration: int
    id: Optional[int] = None
    like_count: int = 0
    liked_by: set[str] = field(default_factory=set)

    def is_liked_by(self, username: str) -> bool:
        return username in self.liked_by
