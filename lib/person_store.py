# =============================================================================
# lib/person_store.py - MongoDB Person Store
# =============================================================================
# This module maps the five record operations onto a single MongoDB
# collection:
# - list_people: every record, in the collection's natural order
# - get_person: one record by id
# - create_person: insert, the store assigns the id
# - update_person: replace name/age/address on the matching record
# - delete_person: remove the matching record
#
# Every operation is one round trip to MongoDB. The store holds no state of
# its own beyond the collection handle it was given, which makes it safe to
# share across request threads (pymongo's connection pool is thread-safe).
#
# Usage:
#   client, store = connect_store(settings)
#   people = store.list_people()
# =============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import pymongo
from bson import ObjectId
from bson.errors import BSONError, InvalidId
from pydantic import ValidationError
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from core.models.person import Person
from lib.utils import ApplicationError, parse_object_id

# Set up logging for this module
logger = logging.getLogger(__name__)

# Fixed namespace
DATABASE = "testdb"
COLLECTION = "people"

# Failures raised by pymongo or while BSON-encoding a document
DRIVER_ERRORS = (PyMongoError, BSONError, OverflowError)


# =============================================================================
# Errors
# =============================================================================

class StoreError(ApplicationError):
    """Raised when the underlying MongoDB call or document decoding fails."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            code="STORE_ERROR",
            suggestion="Check that MongoDB is reachable and the stored documents are well formed",
            details=details,
        )


class InvalidIdentifierError(ApplicationError):
    """Raised when an id string cannot be parsed into an ObjectId."""

    def __init__(self, message: str, person_id: str):
        super().__init__(
            message=message,
            code="INVALID_IDENTIFIER",
            suggestion="Ids are 24-character hex strings as returned by POST /people",
            details={"person_id": person_id},
        )


class PersonNotFoundError(ApplicationError):
    """Raised when no record matches a valid id."""

    def __init__(self, person_id: str):
        super().__init__(
            message=f"no person found with id {person_id}",
            code="PERSON_NOT_FOUND",
            suggestion="Check that the id is correct and the person hasn't been deleted",
            details={"person_id": person_id},
        )


# =============================================================================
# Query Building
# =============================================================================

@dataclass(frozen=True)
class IdFilter:
    """Typed filter selecting a single document by its `_id`."""

    object_id: ObjectId

    @classmethod
    def parse(cls, person_id: str) -> IdFilter:
        """
        Build a filter from an id string.

        Raises:
            InvalidIdentifierError: If the string is not a valid ObjectId
        """
        try:
            return cls(parse_object_id(person_id))
        except InvalidId as e:
            raise InvalidIdentifierError(str(e), person_id) from e

    def to_query(self) -> dict[str, ObjectId]:
        return {"_id": self.object_id}


# =============================================================================
# Store
# =============================================================================

class PersonStore:
    """
    Record store backed by one MongoDB collection.

    Example:
        store = PersonStore(client[DATABASE][COLLECTION])
        created = store.create_person(Person(name="Ann", age=30, address="1 Main St"))
        fetched = store.get_person(created.id)
    """

    def __init__(self, collection: Collection):
        self._collection = collection

    def list_people(self) -> list[Person]:
        """
        Fetch every person in the collection.

        Order is the collection's natural order, not sorted.

        Raises:
            StoreError: If the query or decoding a document fails
        """
        try:
            people = [Person.from_document(doc) for doc in self._collection.find({})]
        except DRIVER_ERRORS + (ValidationError,) as e:
            raise StoreError(str(e)) from e

        logger.debug(f"Fetched {len(people)} people")
        return people

    def get_person(self, person_id: str) -> Person:
        """
        Fetch one person by id.

        Raises:
            InvalidIdentifierError: If person_id is not a valid ObjectId
                (the collection is never queried)
            PersonNotFoundError: If no record has that id
            StoreError: If the query or decoding fails
        """
        id_filter = IdFilter.parse(person_id)

        try:
            document = self._collection.find_one(id_filter.to_query())
            if document is None:
                raise PersonNotFoundError(person_id)
            return Person.from_document(document)
        except DRIVER_ERRORS + (ValidationError,) as e:
            raise StoreError(str(e), details={"person_id": person_id}) from e

    def create_person(self, person: Person) -> Person:
        """
        Insert a new person and return it with the store-assigned id.

        Any id already set on `person` is ignored.

        Raises:
            StoreError: If the insert fails
        """
        try:
            result = self._collection.insert_one(person.to_document())
        except DRIVER_ERRORS as e:
            raise StoreError(str(e)) from e

        logger.info(f"Created person: {result.inserted_id}")
        return person.model_copy(update={"id": str(result.inserted_id)})

    def update_person(
        self,
        person_id: str,
        person: Person,
        must_exist: bool = False,
    ) -> Person:
        """
        Replace name, age and address on the matching record.

        Returns `person` unchanged; the stored record is not re-read.

        By default an id that matches nothing (including one that cannot be
        parsed, and so cannot match) is still a success. Pass must_exist=True
        to get InvalidIdentifierError / PersonNotFoundError instead.

        Raises:
            InvalidIdentifierError: must_exist=True and person_id is malformed
            PersonNotFoundError: must_exist=True and nothing matched
            StoreError: If the update call fails
        """
        id_filter = self._lenient_filter(person_id, must_exist)
        if id_filter is None:
            return person

        try:
            result = self._collection.update_one(
                id_filter.to_query(),
                {"$set": person.to_document()},
            )
        except DRIVER_ERRORS as e:
            raise StoreError(str(e), details={"person_id": person_id}) from e

        if result.matched_count == 0:
            if must_exist:
                raise PersonNotFoundError(person_id)
            logger.debug(f"Update matched no person with id {person_id}")

        return person

    def delete_person(self, person_id: str, must_exist: bool = False) -> None:
        """
        Remove the matching record.

        Succeeds whether or not a record matched, unless must_exist=True.

        Raises:
            InvalidIdentifierError: must_exist=True and person_id is malformed
            PersonNotFoundError: must_exist=True and nothing matched
            StoreError: If the delete call fails
        """
        id_filter = self._lenient_filter(person_id, must_exist)
        if id_filter is None:
            return

        try:
            result = self._collection.delete_one(id_filter.to_query())
        except DRIVER_ERRORS as e:
            raise StoreError(str(e), details={"person_id": person_id}) from e

        if result.deleted_count == 0:
            if must_exist:
                raise PersonNotFoundError(person_id)
            logger.debug(f"Delete matched no person with id {person_id}")
        else:
            logger.info(f"Deleted person: {person_id}")

    @staticmethod
    def _lenient_filter(person_id: str, must_exist: bool) -> IdFilter | None:
        """Parse person_id, returning None for a malformed id unless must_exist."""
        try:
            return IdFilter.parse(person_id)
        except InvalidIdentifierError:
            if must_exist:
                raise
            logger.debug(f"Ignoring malformed id {person_id!r}; it cannot match any person")
            return None


# =============================================================================
# Bootstrap
# =============================================================================

def connect_store(
    uri: str,
    ping_timeout_s: float = 10.0,
) -> tuple[MongoClient, PersonStore]:
    """
    Connect to MongoDB and build the store for the fixed namespace.

    The ping is bounded by ping_timeout_s; requests made later through the
    returned store have no timeout of their own.

    Args:
        uri: MongoDB connection string
        ping_timeout_s: Seconds to wait for the startup ping

    Returns:
        (client, store) - the caller owns the client and must close it

    Raises:
        StoreError: If the URI is invalid or the ping fails
    """
    try:
        client: MongoClient = MongoClient(uri, server_api=ServerApi("1"))
    except PyMongoError as e:
        raise StoreError(f"Error connecting to MongoDB: {e}") from e

    try:
        with pymongo.timeout(ping_timeout_s):
            client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        raise StoreError(f"Error pinging MongoDB: {e}") from e

    logger.info("Connected to MongoDB")
    return client, PersonStore(client[DATABASE][COLLECTION])
