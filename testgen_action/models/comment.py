from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class Comment:
    """The subset of a GitHub issue comment the bot looks at."""

    id: int
    body: str
    user_login: str = ""
    app_name: Optional[str] = None
    reactions: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Comment":
        app = data.get("performed_via_github_app") or {}
        raw_reactions = data.get("reactions") or {}
        reactions = {
            key: value
            for key, value in raw_reactions.items()
            if isinstance(value, int)
        }
        return cls(
            id=data["id"],
            body=data.get("body") or "",
            user_login=(data.get("user") or {}).get("login", ""),
            app_name=app.get("name"),
            reactions=reactions,
        )

    @property
    def thumbs_up(self) -> int:
        return self.reactions.get("+1", 0)
