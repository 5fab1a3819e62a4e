"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from configurator.errors import (
    InterchangeError, InvalidParameterError, NoPendingDecisionError,
)
from configurator.models import ContainerConfig, MassProperties, Point3D
from configurator.services.design_service import CommitOutcome, DesignSession
from configurator.services.persistence import ConfigRepository, JsonFileStore, MemoryStore
from configurator.settings import Settings
from configurator.api.schemas import (
    BaseFaceRequest, BaseFaceResponse, CommitRequest, EditRequest, ImportRequest,
    NudgeRequest, OverlapRequest, OverlapResponse, RuleInfo, StateResponse,
)

router = APIRouter()

# Shared session, created on first request
_session: DesignSession | None = None


def build_session(settings: Settings) -> DesignSession:
    store = JsonFileStore(settings.store_path) if settings.store_path else MemoryStore()
    return DesignSession(
        repository=ConfigRepository(store),
        history_limit=settings.history_limit,
    )


def get_session() -> DesignSession:
    global _session
    if _session is None:
        _session = build_session(Settings.from_env())
    return _session


def _state(session: DesignSession) -> StateResponse:
    return StateResponse(
        config=session.current,
        properties=session.properties,
        can_undo=session.can_undo,
        can_redo=session.can_redo,
        flagged_fields=sorted(session.flagged_fields),
        pending=session.pending is not None,
    )


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules(session: DesignSession = Depends(get_session)) -> list[RuleInfo]:
    """List all constraint rules in check order."""
    return [
        RuleInfo(id=r.get_id(), message=r.get_message(), priority=r.priority)
        for r in session.validator.registry.list_rules()
    ]


@router.get("/config", response_model=StateResponse)
async def get_config(session: DesignSession = Depends(get_session)) -> StateResponse:
    return _state(session)


@router.patch("/config", response_model=CommitOutcome)
async def edit_config(
    request: EditRequest, session: DesignSession = Depends(get_session),
) -> CommitOutcome:
    """Apply a partial edit. Invalid edits come back as `pending`."""
    try:
        return session.edit(request.changes, request.description)
    except InvalidParameterError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.put("/config", response_model=CommitOutcome)
async def commit_config(
    request: CommitRequest, session: DesignSession = Depends(get_session),
) -> CommitOutcome:
    return session.commit(request.config, request.description)


@router.post("/config/fix", response_model=CommitOutcome)
async def fix_config(session: DesignSession = Depends(get_session)) -> CommitOutcome:
    try:
        return session.fix()
    except NoPendingDecisionError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e


@router.post("/config/ignore", response_model=CommitOutcome)
async def ignore_config(session: DesignSession = Depends(get_session)) -> CommitOutcome:
    try:
        return session.ignore()
    except NoPendingDecisionError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e


@router.post("/config/reset", response_model=StateResponse)
async def reset_config(session: DesignSession = Depends(get_session)) -> StateResponse:
    session.reset_defaults()
    return _state(session)


@router.get("/config/export", response_class=PlainTextResponse)
async def export_config(session: DesignSession = Depends(get_session)) -> str:
    return session.export_config()


@router.post("/config/import", response_model=CommitOutcome)
async def import_config(
    request: ImportRequest, session: DesignSession = Depends(get_session),
) -> CommitOutcome:
    try:
        return session.import_config(request.text)
    except InterchangeError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.post("/history/undo", response_model=StateResponse)
async def undo(session: DesignSession = Depends(get_session)) -> StateResponse:
    session.undo()
    return _state(session)


@router.post("/history/redo", response_model=StateResponse)
async def redo(session: DesignSession = Depends(get_session)) -> StateResponse:
    session.redo()
    return _state(session)


@router.get("/properties", response_model=MassProperties)
async def get_properties(session: DesignSession = Depends(get_session)) -> MassProperties:
    return session.properties


@router.post("/overlap", response_model=OverlapResponse)
async def check_overlap(
    request: OverlapRequest, session: DesignSession = Depends(get_session),
) -> OverlapResponse:
    """Overlaps of the container with every given object."""
    overlaps = session.find_overlaps(request.objects, request.container_offset)
    return OverlapResponse(
        overlaps=overlaps,
        total_volume=sum(o.volume for o in overlaps),
    )


@router.post("/placement/nudge", response_model=Point3D)
async def nudge(request: NudgeRequest, session: DesignSession = Depends(get_session)) -> Point3D:
    """Move an object one step with the configured step size and grid snap."""
    return session.nudge(request.position, request.key)


@router.post("/placement/base-face", response_model=BaseFaceResponse)
async def base_face(
    request: BaseFaceRequest, session: DesignSession = Depends(get_session),
) -> BaseFaceResponse:
    """Rest an object on its bottom, top or center plane."""
    offset = session.base_face_offset(request.bounds, request.mode)
    return BaseFaceResponse(
        offset=offset,
        bounds=request.bounds.translated(Point3D(x=0.0, y=0.0, z=offset)),
    )


@router.get("/log", response_model=list[str])
async def activity_log(session: DesignSession = Depends(get_session)) -> list[str]:
    return list(session.activity)
