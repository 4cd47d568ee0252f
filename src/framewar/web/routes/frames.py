"""Frame routes: one endpoint per game action."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from framewar.game.resolver import Action, ActionResult, UnknownActionError, available_actions
from framewar.game.state import GameState
from framewar.game.table import GameTable
from framewar.playtest.display import display_message
from framewar.web.dependencies import get_table
from framewar.web.security import configured_rate_limit, limiter

router = APIRouter()

# Button label and route for each action
ACTION_ROUTES = {
    Action.DRAW: ("Draw Card", "/draw_card"),
    Action.CONTINUE_WAR: ("Continue War", "/continue_war"),
    Action.RESET: ("Reset Game", "/reset_game"),
    Action.VIEW_RULES: ("Rules", "/view_rules"),
    Action.EXIT: ("Exit Game", "/exit_game"),
}


# Request/Response models


class CardModel(BaseModel):
    """A revealed card."""

    value: int
    suit: str
    label: str
    image_ref: str


class StateModel(BaseModel):
    """Game state as rendered by a frame."""

    player_deck_size: int
    computer_deck_size: int
    player_card: Optional[CardModel] = None
    computer_card: Optional[CardModel] = None
    war_pile_size: int
    status: str
    is_war: bool
    message: str
    round_number: int
    winner: Optional[str] = None


class Intent(BaseModel):
    """A button offered by a frame."""

    label: str
    action: Optional[str] = None
    path: str


class FrameResponse(BaseModel):
    """A rendered frame: state plus the buttons to show under it."""

    state: StateModel
    display_message: str
    accepted: bool = True
    reason: Optional[str] = None
    intents: list[Intent]


def _base_path(request: Request) -> str:
    return getattr(request.app.state, "base_path", "")


def _main_intents(state: GameState, base: str) -> list[Intent]:
    """Buttons for the main frame, gated on status."""
    intents: list[Intent] = []
    for action in available_actions(state.status):
        label, path = ACTION_ROUTES[action]
        intents.append(Intent(label=label, action=action.value, path=base + path))
    return intents


def _frame(
    state: GameState,
    intents: list[Intent],
    result: ActionResult | None = None,
) -> FrameResponse:
    return FrameResponse(
        state=StateModel(**state.to_dict()),
        display_message=display_message(state),
        accepted=result.accepted if result else True,
        reason=result.reason if result else None,
        intents=intents,
    )


def _act(action: Action | str, request: Request, table: GameTable) -> FrameResponse:
    """Apply an action and answer with the post-action frame."""
    result = table.apply(action, snapshot=True)
    back = Intent(label="Return to Game", path=_base_path(request) + "/")
    return _frame(result.state, [back], result)


# Endpoints


@router.get("/", response_model=FrameResponse)
@limiter.limit(configured_rate_limit)
async def main_frame(request: Request, table: GameTable = Depends(get_table)):
    """Current game with the buttons valid for its status."""
    state = table.snapshot()
    return _frame(state, _main_intents(state, _base_path(request)))


@router.post("/draw_card", response_model=FrameResponse)
@limiter.limit(configured_rate_limit)
async def draw_card(request: Request, table: GameTable = Depends(get_table)):
    return _act(Action.DRAW, request, table)


@router.post("/continue_war", response_model=FrameResponse)
@limiter.limit(configured_rate_limit)
async def continue_war(request: Request, table: GameTable = Depends(get_table)):
    return _act(Action.CONTINUE_WAR, request, table)


@router.post("/reset_game", response_model=FrameResponse)
@limiter.limit(configured_rate_limit)
async def reset_game(request: Request, table: GameTable = Depends(get_table)):
    return _act(Action.RESET, request, table)


@router.post("/view_rules", response_model=FrameResponse)
@limiter.limit(configured_rate_limit)
async def view_rules(request: Request, table: GameTable = Depends(get_table)):
    return _act(Action.VIEW_RULES, request, table)


@router.post("/exit_game", response_model=FrameResponse)
@limiter.limit(configured_rate_limit)
async def exit_game(request: Request, table: GameTable = Depends(get_table)):
    return _act(Action.EXIT, request, table)


@router.post("/action/{name}", response_model=FrameResponse)
@limiter.limit(configured_rate_limit)
async def apply_named_action(
    name: str,
    request: Request,
    table: GameTable = Depends(get_table),
):
    """Apply an action by name (``draw``, ``continueWar``, ``rules``, ...)."""
    try:
        action = Action.parse(name)
    except UnknownActionError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _act(action, request, table)
