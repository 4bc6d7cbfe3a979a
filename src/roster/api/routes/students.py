"""Student CRUD endpoints. All require a logged-in session."""

from fastapi import APIRouter, Depends, Query, status

from roster.api.dependencies import RosterStoreDep, require_session
from roster.api.models import (
    APIResponse,
    StudentPayload,
    StudentResponse,
    student_to_response,
)

router = APIRouter(
    prefix="/students",
    tags=["students"],
    dependencies=[Depends(require_session)],
)


@router.get("", response_model=APIResponse[list[StudentResponse]])
def list_students(store: RosterStoreDep) -> APIResponse[list[StudentResponse]]:
    """List all students in insertion order."""
    return APIResponse(data=[student_to_response(s) for s in store.list_students()])


@router.get("/matriculas", response_model=APIResponse[list[str]])
def list_matriculas(
    store: RosterStoreDep,
    exclude_id: str | None = Query(default=None, description="Student being edited"),
) -> APIResponse[list[str]]:
    """List matriculas already in use."""
    return APIResponse(data=store.existing_matriculas(exclude_id=exclude_id))


@router.post(
    "",
    response_model=APIResponse[StudentResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_student(payload: StudentPayload, store: RosterStoreDep) -> APIResponse[StudentResponse]:
    """Create a new student."""
    created = store.add_student(payload.to_draft_input())
    return APIResponse(data=student_to_response(created))


@router.get("/{student_id}", response_model=APIResponse[StudentResponse])
def get_student(student_id: str, store: RosterStoreDep) -> APIResponse[StudentResponse]:
    """Get a student by ID."""
    return APIResponse(data=student_to_response(store.get_student(student_id)))


@router.put("/{student_id}", response_model=APIResponse[StudentResponse])
def update_student(
    student_id: str, payload: StudentPayload, store: RosterStoreDep
) -> APIResponse[StudentResponse]:
    """Replace all fields of a student except its ID."""
    updated = store.update_student(student_id, payload.to_draft_input())
    return APIResponse(data=student_to_response(updated))


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(student_id: str, store: RosterStoreDep) -> None:
    """Delete a student."""
    store.remove_student(student_id)
