"""
Order related data models
"""
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Tuple
from enum import Enum

from .errors import OrderClosed, AlreadyClosed, NotFound


class OrderStatus(Enum):
    ACTIVE = "active"
    ENDED = "ended"


@dataclass(frozen=True)
class Participant:
    """Chat member taking part in an order"""
    user_id: str
    first_name: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "user_id": self.user_id,
            "first_name": self.first_name
        }


@dataclass(frozen=True)
class OrderItem:
    """One participant's choice within an order"""
    participant: Participant
    item: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "participant": self.participant.to_dict(),
            "item": self.item
        }


@dataclass(frozen=True)
class OrderSummary:
    """Short description of an order, used by /view"""
    name: str
    status: OrderStatus
    participant_count: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "name": self.name,
            "status": self.status.value,
            "participant_count": self.participant_count
        }


@dataclass(frozen=True)
class OrderSnapshot:
    """Read-only view of an order for rendering"""
    name: str
    status: OrderStatus
    creator: Participant
    items: Tuple[OrderItem, ...] = ()

    @property
    def is_active(self) -> bool:
        return self.status is OrderStatus.ACTIVE

    def items_by_item(self) -> Dict[str, List[Participant]]:
        # group participants by the item they chose, keeping assignment order
        grouped: Dict[str, List[Participant]] = {}
        for entry in self.items:
            grouped.setdefault(entry.item, []).append(entry.participant)
        return grouped

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "name": self.name,
            "status": self.status.value,
            "creator": self.creator.to_dict(),
            "items": [entry.to_dict() for entry in self.items]
        }


@dataclass
class Order:
    """A named ordering session within one chat"""
    name: str
    creator: Participant
    status: OrderStatus = OrderStatus.ACTIVE
    items: Dict[str, OrderItem] = field(default_factory=dict)

    @property
    def is_active(self) -> bool:
        return self.status is OrderStatus.ACTIVE

    def _ensure_active(self):
        if not self.is_active:
            raise OrderClosed(self.name)

    def set_item(self, participant: Participant, item: str) -> bool:
        # insert or replace; replacing keeps the participant's original position
        self._ensure_active()
        replaced = participant.user_id in self.items
        self.items[participant.user_id] = OrderItem(participant, item)
        return replaced

    def remove_item(self, participant: Participant) -> str:
        self._ensure_active()
        entry = self.items.pop(participant.user_id, None)
        if entry is None:
            raise NotFound(self.name)
        return entry.item

    def get_item(self, participant: Participant) -> Optional[str]:
        entry = self.items.get(participant.user_id)
        return entry.item if entry else None

    def close(self):
        if not self.is_active:
            raise AlreadyClosed(self.name)
        self.status = OrderStatus.ENDED

    def summary(self) -> OrderSummary:
        return OrderSummary(self.name, self.status, len(self.items))

    def snapshot(self) -> OrderSnapshot:
        return OrderSnapshot(
            name=self.name,
            status=self.status,
            creator=self.creator,
            items=tuple(self.items.values())
        )
