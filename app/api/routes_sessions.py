from contextlib import contextmanager
from typing import Dict
from fastapi import APIRouter, HTTPException
from app.builder.session import (
    BuilderError,
    FeatureBuilderSession,
    UnknownFieldError,
    UnknownRelationError,
    UnknownSessionError,
    sessions,
)
from app.schemas.features import CamelModel, EntityFieldSchema, EntityRelationSchema
from app.schemas.sessions import (
    EntityFieldUpdate,
    EntityRelationUpdate,
    FeatureConfigUpdate,
    ReorderRequest,
    SessionResponse,
)

router = APIRouter(prefix="/sessions")


class CodeResponse(CamelModel):
    files: Dict[str, str]


@contextmanager
def builder_errors():
    try:
        yield
    except UnknownSessionError:
        raise HTTPException(status_code=404, detail="Session not found")
    except UnknownFieldError:
        raise HTTPException(status_code=404, detail="Field not found")
    except UnknownRelationError:
        raise HTTPException(status_code=404, detail="Relation not found")
    except BuilderError as e:
        raise HTTPException(status_code=422, detail=str(e))


def _session(session_id: str) -> FeatureBuilderSession:
    with builder_errors():
        return sessions.get(session_id)


@router.post("", response_model=SessionResponse, status_code=201)
def create_session():
    return SessionResponse.from_session(sessions.create())

@router.get("/{session_id}", response_model=SessionResponse)
def get_session(session_id: str):
    return SessionResponse.from_session(_session(session_id))

@router.delete("/{session_id}", status_code=204)
def delete_session(session_id: str):
    with builder_errors():
        sessions.delete(session_id)

@router.patch("/{session_id}/config", response_model=SessionResponse)
def update_config(session_id: str, req: FeatureConfigUpdate):
    session = _session(session_id)
    with builder_errors():
        session.update_feature_config(**req.model_dump(exclude_unset=True))
    return SessionResponse.from_session(session)

@router.post("/{session_id}/reset", response_model=SessionResponse)
def reset_session(session_id: str):
    session = _session(session_id)
    session.reset()
    return SessionResponse.from_session(session)

@router.get("/{session_id}/code", response_model=CodeResponse)
def session_code(session_id: str):
    return CodeResponse(files=_session(session_id).generate_code())

# Fields

@router.post("/{session_id}/fields", response_model=EntityFieldSchema, status_code=201)
def add_field(session_id: str, req: EntityFieldUpdate):
    session = _session(session_id)
    with builder_errors():
        field_id = session.add_entity_field(**req.model_dump(exclude_unset=True))
        return EntityFieldSchema.from_model(session.get_entity_field(field_id))

@router.patch("/{session_id}/fields/{field_id}", response_model=EntityFieldSchema)
def update_field(session_id: str, field_id: str, req: EntityFieldUpdate):
    session = _session(session_id)
    with builder_errors():
        field = session.update_entity_field(field_id, **req.model_dump(exclude_unset=True))
    return EntityFieldSchema.from_model(field)

@router.delete("/{session_id}/fields/{field_id}", status_code=204)
def remove_field(session_id: str, field_id: str):
    session = _session(session_id)
    with builder_errors():
        session.remove_entity_field(field_id)

@router.post("/{session_id}/fields/reorder", response_model=SessionResponse)
def reorder_fields(session_id: str, req: ReorderRequest):
    session = _session(session_id)
    with builder_errors():
        session.reorder_entity_fields(req.start_index, req.end_index)
    return SessionResponse.from_session(session)

# Relations

@router.post("/{session_id}/relations", response_model=EntityRelationSchema, status_code=201)
def add_relation(session_id: str, req: EntityRelationUpdate):
    session = _session(session_id)
    with builder_errors():
        relation_id = session.add_entity_relation(**req.model_dump(exclude_unset=True))
        return EntityRelationSchema.from_model(session.get_entity_relation(relation_id))

@router.patch("/{session_id}/relations/{relation_id}", response_model=EntityRelationSchema)
def update_relation(session_id: str, relation_id: str, req: EntityRelationUpdate):
    session = _session(session_id)
    with builder_errors():
        relation = session.update_entity_relation(relation_id, **req.model_dump(exclude_unset=True))
    return EntityRelationSchema.from_model(relation)

@router.delete("/{session_id}/relations/{relation_id}", status_code=204)
def remove_relation(session_id: str, relation_id: str):
    session = _session(session_id)
    with builder_errors():
        session.remove_entity_relation(relation_id)

@router.post("/{session_id}/relations/reorder", response_model=SessionResponse)
def reorder_relations(session_id: str, req: ReorderRequest):
    session = _session(session_id)
    with builder_errors():
        session.reorder_entity_relations(req.start_index, req.end_index)
    return SessionResponse.from_session(session)
