"""
HTTP API Routes for holdembot.

One table per app. Every request takes the app's table lock, so exactly
one decision is being applied at any time.
"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Request

from holdembot.core.errors import InsufficientPlayersError, InvalidActionError
from holdembot.core.rules import ActionType
from holdembot.server.schemas import ActionRequest, CreateTableRequest, TableStateResponse
from holdembot.table import Table

router = APIRouter()


def get_table(request: Request) -> Table:
    """Get the current table instance."""
    table = request.app.state.table
    if table is None:
        raise HTTPException(status_code=400, detail="Table not initialized")
    return table


def _respond(
    request: Request,
    table: Table,
    message: Optional[str] = None,
    player_id: Optional[str] = None,
) -> TableStateResponse:
    game = table.game
    viewer = player_id or table.waiting_for()
    current = game.current_player
    return TableStateResponse(
        state=game.get_state(for_player_id=viewer),
        waiting_for=table.waiting_for(),
        valid_actions=[a.value for a in game.valid_actions(current)] if current else [],
        summary=game.last_summary.to_dict() if game.last_summary else None,
        balances=request.app.state.ledger.balances(),
        message=message,
    )


@router.post("/table")
async def create_table(req: CreateTableRequest, request: Request) -> TableStateResponse:
    """
    Build a fresh table and seat the roster.

    Players the ledger already knows keep their stored balance.
    """
    async with request.app.state.lock:
        table = Table(req.config, ledger=request.app.state.ledger)
        try:
            table.seat_roster(req.seats)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        request.app.state.table = table
        return _respond(request, table, f"Seated {len(req.seats)} players")


@router.post("/hands")
async def start_hand(request: Request) -> TableStateResponse:
    """Start a hand and let bots play until a human must act."""
    async with request.app.state.lock:
        table = get_table(request)
        try:
            table.play_hand()
        except InsufficientPlayersError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except InvalidActionError as e:
            raise HTTPException(status_code=409, detail=str(e))
        return _respond(request, table, f"Hand #{table.game.hand_number} started")


@router.post("/actions")
async def take_action(req: ActionRequest, request: Request) -> TableStateResponse:
    """Apply one human action; bots then act until the next human turn."""
    async with request.app.state.lock:
        table = get_table(request)

        try:
            action_type = ActionType(req.action_type.upper())
        except ValueError:
            raise HTTPException(status_code=400, detail=f"Invalid action type: {req.action_type}")

        try:
            result = table.submit_action(req.player_id, action_type, req.amount)
        except InvalidActionError as e:
            raise HTTPException(status_code=409, detail=str(e))

        return _respond(request, table, result.message, req.player_id)


@router.get("/state")
async def get_state(request: Request, player_id: Optional[str] = None) -> TableStateResponse:
    """Current snapshot, with private info for player_id if given."""
    async with request.app.state.lock:
        return _respond(request, get_table(request), player_id=player_id)
