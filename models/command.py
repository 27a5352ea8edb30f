"""
Command related data models
"""
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any
from enum import Enum

from .errors import ErrorKind
from .order import Participant, OrderSnapshot, OrderSummary


class CommandType(Enum):
    START = "start"
    ORDER = "order"
    CANCEL = "cancel"
    END = "end"
    VIEW = "view"
    HELP = "help"


@dataclass(frozen=True)
class InboundCommand:
    """A parsed command issued by one user in one chat"""
    chat_id: str
    user: Participant
    command: CommandType
    order_name: Optional[str] = None
    item: Optional[str] = None


@dataclass
class CommandResult:
    """Outcome of a command, ready to be rendered as a chat reply"""
    success: bool
    command: Optional[CommandType] = None
    order_name: Optional[str] = None
    snapshot: Optional[OrderSnapshot] = None
    summaries: List[OrderSummary] = field(default_factory=list)
    active_snapshots: List[OrderSnapshot] = field(default_factory=list)
    error: Optional[ErrorKind] = None
    candidates: List[str] = field(default_factory=list)
    detail: str = ""
    suggestion: Optional[str] = None
    replaced: bool = False
    removed_item: Optional[str] = None

    @classmethod
    def ok(cls, command: CommandType, **kwargs) -> "CommandResult":
        return cls(success=True, command=command, **kwargs)

    @classmethod
    def failure(cls, command: Optional[CommandType], error: ErrorKind, **kwargs) -> "CommandResult":
        return cls(success=False, command=command, error=error, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "success": self.success,
            "command": self.command.value if self.command else None,
            "order_name": self.order_name,
            "snapshot": self.snapshot.to_dict() if self.snapshot else None,
            "summaries": [summary.to_dict() for summary in self.summaries],
            "active_snapshots": [snap.to_dict() for snap in self.active_snapshots],
            "error": self.error.value if self.error else None,
            "candidates": self.candidates,
            "detail": self.detail,
            "suggestion": self.suggestion,
            "replaced": self.replaced,
            "removed_item": self.removed_item
        }
