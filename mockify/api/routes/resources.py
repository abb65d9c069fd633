"""CRUD routes for one resource collection, generated from its schema.

Response shapes: ``{"success": true, "data": ...}`` on success (plus
``count`` on list). Validation failures, missing records and unexpected
errors are raised and turned into responses by the app's exception
handlers.
"""
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Request

from mockify.api.state import AppState, get_state
from mockify.core.schema import ResourceSchema
from mockify.core.validation import validate


def build_router(schema: ResourceSchema) -> APIRouter:
    """Router with list/get/create/replace/patch/delete for ``schema``."""
    router = APIRouter()
    filter_params = ", ".join(f.param for f in schema.filters) or "none"

    def _store(state: AppState):
        return state.store(schema.name)

    @router.get(
        "",
        summary=f"List {schema.name}",
        description=f"?sort=asc|desc on {schema.display_field}; filters: {filter_params}.",
    )
    @router.get("/", include_in_schema=False)
    def list_records(
        request: Request,
        sort: Optional[str] = None,
        state: AppState = Depends(get_state),
    ):
        records, count = _store(state).list(dict(request.query_params), sort=sort)
        return {"success": True, "data": records, "count": count}

    @router.get("/{record_id}", summary=f"Get one of {schema.name}")
    def get_record(record_id: str, state: AppState = Depends(get_state)):
        return {"success": True, "data": _store(state).get(record_id)}

    @router.post("", status_code=201, summary=f"Create in {schema.name}")
    @router.post("/", status_code=201, include_in_schema=False)
    def create_record(body: Any = Body(None), state: AppState = Depends(get_state)):
        """Create a record; the id is assigned by the server."""
        fields = validate(schema, "create", body)
        return {"success": True, "data": _store(state).create(fields)}

    @router.put("/{record_id}", summary=f"Replace in {schema.name}")
    def replace_record(
        record_id: str,
        body: Any = Body(None),
        state: AppState = Depends(get_state),
    ):
        """Replace every field of a record. The body must repeat the id from the path."""
        fields = validate(schema, "replace", body)
        return {"success": True, "data": _store(state).replace(record_id, fields)}

    @router.patch("/{record_id}", summary=f"Patch in {schema.name}")
    def patch_record(
        record_id: str,
        body: Any = Body(None),
        state: AppState = Depends(get_state),
    ):
        """Update only the supplied fields of a record."""
        store = _store(state)
        # 404 takes precedence over a bad body
        store.get(record_id)
        fields = validate(schema, "patch", body)
        return {"success": True, "data": store.patch(record_id, fields)}

    @router.delete("/{record_id}", summary=f"Delete from {schema.name}")
    def delete_record(record_id: str, state: AppState = Depends(get_state)):
        """Delete a record and return it."""
        return {"success": True, "data": _store(state).delete(record_id)}

    return router
