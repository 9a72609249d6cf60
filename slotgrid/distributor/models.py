"""
Distributor Models
==================

Slot: one unit of session-hosting capacity on a node, advertising a
stereotype. The stereotype is fixed at registration; re-registering a
slot means creating a new Slot.
"""

import uuid
from typing import Any, Dict

from pydantic import BaseModel, Field, PrivateAttr

from ..capabilities import Capabilities


class Slot(BaseModel):
    """A registered slot and the stereotype it advertises."""

    model_config = {"frozen": True}

    node_id: str
    slot_id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    stereotype: Dict[str, Any] = Field(default_factory=dict)

    _capabilities: Capabilities = PrivateAttr()

    def model_post_init(self, __context: Any) -> None:
        self._capabilities = Capabilities(self.stereotype)

    @property
    def capabilities(self) -> Capabilities:
        """Frozen view of the stereotype, built once at construction."""
        return self._capabilities

    @property
    def key(self) -> str:
        return f"{self.node_id}/{self.slot_id}"

    def serialize(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")

    @staticmethod
    def deserialize(data: Dict[str, Any]) -> "Slot":
        return Slot(**data)
