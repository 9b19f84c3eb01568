import logging
from typing import List
from fastapi import APIRouter, HTTPException, Response
from app.builder.constants import VALIDATION_TYPES
from app.generators.feature_gen.context import NamingContext
from app.generators.feature_gen.generator import generate_feature_files
from app.generators.feature_gen.packager import PackagingError, zip_feature_files
from app.generators.feature_gen.type_map import FIELD_TYPES, RELATION_TYPES, VIEW_MODES
from app.schemas.features import (
    FeatureDefinition,
    FieldTypeInfo,
    GeneratedFileSchema,
    GenerateResponse,
)

log = logging.getLogger(__name__)

router = APIRouter(prefix="/features")

@router.post("/generate", response_model=GenerateResponse)
def generate(definition: FeatureDefinition):
    config, fields, relations = definition.to_model()
    files = generate_feature_files(config, fields, relations)
    return GenerateResponse(
        feature=config.name,
        files=[GeneratedFileSchema(path=f.path, content=f.content) for f in files],
    )

@router.post("/download")
def download(definition: FeatureDefinition):
    config, fields, relations = definition.to_model()
    ctx = NamingContext.from_config(config)
    try:
        data = zip_feature_files(config, fields, relations)
    except PackagingError as e:
        log.error("Packaging failed for %s: %s", config.name, e)
        raise HTTPException(status_code=422, detail=str(e))
    return Response(
        content=data,
        media_type="application/zip",
        headers={"Content-Disposition": f'attachment; filename="{ctx.archive_name}"'},
    )

@router.get("/field-types", response_model=List[FieldTypeInfo])
def field_types():
    return FIELD_TYPES

@router.get("/relation-types", response_model=List[FieldTypeInfo])
def relation_types():
    return RELATION_TYPES

@router.get("/view-modes", response_model=List[FieldTypeInfo])
def view_modes():
    return VIEW_MODES

@router.get("/validation-types", response_model=List[str])
def validation_types():
    return list(VALIDATION_TYPES)
