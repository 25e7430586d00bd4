"""POST /api/v1/command/{command} and /api/v1/control/{action}."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends, HTTPException

from scrap_hunter.api.dependencies import get_engine_manager
from scrap_hunter.api.engine_manager import EngineManager
from scrap_hunter.api.routes.state import serialize_event
from scrap_hunter.api.schemas import CommandResponse, ControlResponse
from scrap_hunter.core.enums import Command
from scrap_hunter.engine.session import SessionOverError

router = APIRouter()


class CommandName(str, Enum):
    up = "up"
    down = "down"
    left = "left"
    right = "right"
    exit = "exit"
    quit = "quit"
    wait = "wait"


_COMMANDS: dict[CommandName, Command] = {
    CommandName.up: Command.UP,
    CommandName.down: Command.DOWN,
    CommandName.left: Command.LEFT,
    CommandName.right: Command.RIGHT,
    CommandName.exit: Command.EXIT,
    CommandName.quit: Command.QUIT,
    CommandName.wait: Command.NONE,
}


class ControlAction(str, Enum):
    reset = "reset"


@router.post("/command/{command}", response_model=CommandResponse)
def command(
    command: CommandName,
    manager: EngineManager = Depends(get_engine_manager),
) -> CommandResponse:
    try:
        outcome, notices = manager.submit(_COMMANDS[command])
    except SessionOverError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    snap = manager.get_snapshot()
    return CommandResponse(
        status="over" if manager.over else "ok",
        outcome=outcome.name.lower(),
        tick=snap.tick,
        day=snap.day,
        notices=[serialize_event(ev) for ev in notices],
    )


@router.post("/control/{action}", response_model=ControlResponse)
def control(
    action: ControlAction,
    manager: EngineManager = Depends(get_engine_manager),
) -> ControlResponse:
    match action:
        case ControlAction.reset:
            manager.reset()
            snap = manager.get_snapshot()
            return ControlResponse(status="ok", message="Session reset.", tick=snap.tick if snap else 0)
