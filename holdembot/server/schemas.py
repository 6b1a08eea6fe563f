"""
Pydantic schemas for API request/response validation.
"""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field

from holdembot.config import TableConfig
from holdembot.roster import SeatSpec


# ============= Request Schemas =============

class CreateTableRequest(BaseModel):
    """Request to (re)build the table from a roster."""
    config: TableConfig = Field(default_factory=TableConfig.from_env)
    seats: List[SeatSpec] = Field(min_length=2)


class ActionRequest(BaseModel):
    """Request to take a game action for a human seat."""
    player_id: str
    action_type: str = Field(..., description="Action type: FOLD, CHECK, CALL, RAISE, ALL_IN")
    amount: int = Field(default=0, ge=0, description="Raise increment on top of the call")


# ============= Response Schemas =============

class TableStateResponse(BaseModel):
    """Snapshot returned by every endpoint."""
    state: Dict[str, Any]
    waiting_for: Optional[str] = None
    valid_actions: List[str] = []
    summary: Optional[Dict[str, Any]] = None
    balances: Dict[str, int] = {}
    message: Optional[str] = None
