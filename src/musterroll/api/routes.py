"""HTTP routes for the Musterroll API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, Field, TypeAdapter

from musterroll.api.runtime import ApiState
from musterroll.domain.models import AllocationState, EnrichedArmyList
from musterroll.services import ArmyWorkspace

router = APIRouter()

_army_adapter: TypeAdapter[EnrichedArmyList] = TypeAdapter(EnrichedArmyList)


def get_state(request: Request) -> ApiState:
    state = getattr(request.app.state, "api_state", None)
    if state is None:  # pragma: no cover - FastAPI should always initialise state
        raise RuntimeError("API state not initialised")
    return state


ApiStateDep = Annotated[ApiState, Depends(get_state)]


class ImportRequest(BaseModel):
    text: str = Field(min_length=1, description="Army list as exported by the roster app")


class LeaderPairingRequest(BaseModel):
    unit_id: str | None = Field(default=None, description="Host unit; null detaches")


class TransportRequest(BaseModel):
    transport_id: str = Field(min_length=1)


class AllocationSnapshot(BaseModel):
    leader_pairings: dict[str, list[str]]
    transport_allocations: dict[str, list[str]]

    @classmethod
    def from_state(cls, state: AllocationState) -> AllocationSnapshot:
        return cls(
            leader_pairings={k: list(v) for k, v in state.leader_pairings.items()},
            transport_allocations={k: list(v) for k, v in state.transport_allocations.items()},
        )


class ArmyResponse(BaseModel):
    army: dict[str, object]
    allocations: AllocationSnapshot
    import_error: str | None = None


class UnitRef(BaseModel):
    instance_id: str
    display_name: str
    available_leader_slots: int


class CapacityResponse(BaseModel):
    transport_id: str
    used: int
    total: int
    embarked: list[str]


def _require_army(workspace: ArmyWorkspace) -> EnrichedArmyList:
    if workspace.army is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="no army list loaded")
    return workspace.army


def _army_response(workspace: ArmyWorkspace) -> ArmyResponse:
    army = _require_army(workspace)
    return ArmyResponse(
        army=_army_adapter.dump_python(army, mode="json"),
        allocations=AllocationSnapshot.from_state(workspace.allocations),
        import_error=workspace.import_error,
    )


@router.get("/health")
async def health(state: ApiStateDep) -> dict[str, object]:
    return {
        "status": "ok",
        "catalog_loaded": state.catalog.is_loaded,
        "catalog_last_update": state.catalog.last_update,
    }


@router.post("/army", response_model=ArmyResponse, status_code=status.HTTP_201_CREATED)
async def import_army(request: ImportRequest, state: ApiStateDep) -> ArmyResponse:
    workspace = state.workspace
    if workspace.import_text(request.text) is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=workspace.import_error or "catalog not loaded",
        )
    return _army_response(workspace)


@router.get("/army", response_model=ArmyResponse)
async def get_army(state: ApiStateDep) -> ArmyResponse:
    return _army_response(state.workspace)


@router.delete("/army", status_code=status.HTTP_204_NO_CONTENT)
async def reset_army(state: ApiStateDep) -> None:
    state.workspace.reset()


@router.put("/army/leaders/{character_id}", response_model=AllocationSnapshot)
async def set_leader(
    character_id: str, request: LeaderPairingRequest, state: ApiStateDep
) -> AllocationSnapshot:
    _require_army(state.workspace)
    allocations = state.workspace.set_leader_pairing(character_id, request.unit_id)
    return AllocationSnapshot.from_state(allocations)


@router.get("/army/leaders/{character_id}/eligible", response_model=list[UnitRef])
async def eligible_units(character_id: str, state: ApiStateDep) -> list[UnitRef]:
    workspace = state.workspace
    _require_army(workspace)
    return [
        UnitRef(
            instance_id=unit.instance_id,
            display_name=unit.display_name,
            available_leader_slots=workspace.available_leader_slots(unit.instance_id),
        )
        for unit in workspace.eligible_leader_targets(character_id)
    ]


@router.put("/army/transports/{unit_id}", response_model=AllocationSnapshot)
async def embark(unit_id: str, request: TransportRequest, state: ApiStateDep) -> AllocationSnapshot:
    _require_army(state.workspace)
    allocations = state.workspace.assign_to_transport(unit_id, request.transport_id)
    return AllocationSnapshot.from_state(allocations)


@router.delete("/army/transports/{unit_id}", response_model=AllocationSnapshot)
async def disembark(unit_id: str, state: ApiStateDep) -> AllocationSnapshot:
    _require_army(state.workspace)
    return AllocationSnapshot.from_state(state.workspace.remove_from_transport(unit_id))


@router.get("/army/transports/{transport_id}/capacity", response_model=CapacityResponse)
async def transport_capacity(transport_id: str, state: ApiStateDep) -> CapacityResponse:
    workspace = state.workspace
    _require_army(workspace)
    total = workspace.total_capacity(transport_id)
    if total is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="not a transport")
    return CapacityResponse(
        transport_id=transport_id,
        used=workspace.used_capacity(transport_id),
        total=total,
        embarked=list(workspace.allocations.transport_allocations.get(transport_id, ())),
    )
