# =============================================================================
# app/routers/people.py - Person CRUD Endpoints
# =============================================================================
# GET    /people        list every person
# GET    /people/{id}   one person
# POST   /people        create (id assigned by MongoDB)
# PUT    /people/{id}   replace name/age/address, echo the request body
# DELETE /people/{id}   remove
#
# Handlers are plain `def` so FastAPI runs them in its thread pool: a slow
# MongoDB call blocks only its own request. Errors propagate to the handlers
# in app/exceptions.py.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, Response, status
from pydantic import ValidationError

from app.dependencies import PersonStoreDep, StrictErrorsDep
from app.exceptions import MalformedInputError
from core.models.person import Person

logger = logging.getLogger(__name__)

router = APIRouter()

PersonId = Annotated[str, Path(description="Person id (24-character hex)")]


async def read_person_body(request: Request) -> Person:
    """
    Decode the raw request body as a Person, whatever its Content-Type.

    Raises:
        MalformedInputError: If the body is not JSON of the Person shape
    """
    body = await request.body()
    try:
        return Person.model_validate_json(body)
    except ValidationError as e:
        raise MalformedInputError.from_errors(
            e.errors(include_url=False), location_prefix=("body",)
        ) from e


PersonBody = Annotated[Person, Depends(read_person_body)]


@router.get("", response_model=list[Person], response_model_exclude_none=True)
def list_people(store: PersonStoreDep):
    """
    List all people.

    Returns every record in the collection's natural order. No pagination.
    """
    logger.info("Handling GET request for /people")
    return store.list_people()


@router.get("/{person_id}", response_model=Person, response_model_exclude_none=True)
def get_person(person_id: PersonId, store: PersonStoreDep):
    """
    Get one person by id.
    """
    logger.info(f"Handling GET request for /people/{person_id}")
    return store.get_person(person_id)


@router.post(
    "",
    response_model=Person,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_person(person: PersonBody, store: PersonStoreDep):
    """
    Create a person.

    Any `id` in the body is ignored; the response carries the id MongoDB
    assigned.
    """
    logger.info("Handling POST request for /people")
    return store.create_person(person)


@router.put("/{person_id}", response_model=Person, response_model_exclude_none=True)
def update_person(
    person_id: PersonId,
    person: PersonBody,
    store: PersonStoreDep,
    strict: StrictErrorsDep,
):
    """
    Replace a person's name, age and address.

    Returns the request body as sent, not the stored record. A missing id is
    still a success unless strict error mode is on.
    """
    logger.info(f"Handling PUT request for /people/{person_id}")
    return store.update_person(person_id, person, must_exist=strict)


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_person(person_id: PersonId, store: PersonStoreDep, strict: StrictErrorsDep):
    """
    Delete a person.

    Deleting an id that doesn't exist is a success unless strict error mode
    is on.
    """
    logger.info(f"Handling DELETE request for /people/{person_id}")
    store.delete_person(person_id, must_exist=strict)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
