"""
Data client implementing the backend contract on top of the repositories.

Every operation returns a ClientResult carrying either ``data`` or a list of
``errors``; application and database failures are reported, not raised.
Reads are open to any caller that got past the HTTP auth layer, writes require
an authenticated owner, and updates/deletes are limited to the row's owner.
"""

from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar, Union
import logging
import uuid

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from carmarket.repositories import BaseRepository, CarRepository, SellerRepository, InquiryRepository
from carmarket.schemas.car import CarCreate, CarRead, CarUpdate
from carmarket.schemas.seller import SellerCreate, SellerRead
from carmarket.schemas.inquiry import InquiryCreate, InquiryRead, InquiryUpdate
from carmarket.utils.auth import Identity
from carmarket.utils.exceptions import (
    BACKEND_ERROR,
    INVALID_INPUT,
    MISSING_REFERENCE,
    NOT_AUTHORIZED,
    NOT_FOUND,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
ReadSchema = TypeVar("ReadSchema", bound=BaseModel)


class ClientError(BaseModel):
    message: str
    code: str = BACKEND_ERROR


class ClientResult(BaseModel, Generic[T]):
    """Outcome of one backend call."""

    data: Optional[T] = None
    errors: Optional[List[ClientError]] = None

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> List[str]:
        return [error.message for error in self.errors or []]

    @property
    def code(self) -> Optional[str]:
        """Code of the first error, None on success."""
        return self.errors[0].code if self.errors else None

    @classmethod
    def failure(cls, *messages: str, code: str = BACKEND_ERROR) -> "ClientResult":
        return cls(errors=[ClientError(message=message, code=code) for message in messages])


def _validation_messages(exc: PydanticValidationError) -> List[str]:
    messages = []
    for error in exc.errors():
        field_path = ".".join(str(loc) for loc in error["loc"])
        messages.append(f"{field_path}: {error['msg']}" if field_path else error["msg"])
    return messages


class ModelClient(Generic[ReadSchema]):
    """
    list/get/create/update/delete for one entity.

    Args:
        entity: Entity name used in messages ("Car", "Seller", "Inquiry")
        repository: Repository bound to the request's session
        read_schema: Schema of the canonical record returned to callers
        create_schema: Schema validating create payloads
        update_schema: Schema validating partial updates, or None if the entity is never updated
        identity: Caller identity
        references: Foreign-key field -> (entity name, repository) checked before writes
    """

    def __init__(
        self,
        entity: str,
        repository: BaseRepository,
        read_schema: Type[ReadSchema],
        create_schema: Type[BaseModel],
        update_schema: Optional[Type[BaseModel]],
        identity: Identity,
        references: Optional[Dict[str, Tuple[str, BaseRepository]]] = None
    ):
        self.entity = entity
        self.repository = repository
        self.read_schema = read_schema
        self.create_schema = create_schema
        self.update_schema = update_schema
        self.identity = identity
        self.references = references or {}

    def _read(self, obj) -> ReadSchema:
        return self.read_schema.model_validate(obj)

    def _denied(self, action: str) -> ClientResult:
        logger.warning(f"{self.identity!r} denied {action} on {self.entity}")
        return ClientResult.failure(f"Not authorized to {action} {self.entity}", code=NOT_AUTHORIZED)

    async def _check_references(self, values: Dict[str, Any]) -> List[str]:
        missing = []
        for field, (target, repository) in self.references.items():
            if field in values and not await repository.exists(values[field]):
                missing.append(f"{target} {values[field]} does not exist")
        return missing

    async def _owned(self, id: uuid.UUID, action: str) -> Union[Any, ClientResult]:
        """Load a row the caller may modify, or the failure result explaining why not."""
        if not self.identity.is_owner:
            return self._denied(action)
        obj = await self.repository.get_by_id(id)
        if obj is None:
            return ClientResult.failure(f"{self.entity} not found", code=NOT_FOUND)
        if obj.owner != self.identity.subject:
            return self._denied(action)
        return obj

    async def list(self, filter: Optional[Dict[str, Any]] = None, limit: Optional[int] = None) -> ClientResult:
        """
        List records in insertion order.

        Args:
            filter: Exact-match field filters
            limit: Maximum number of records
        """
        try:
            objects = await self.repository.get_multi(filters=filter, limit=limit)
            return ClientResult(data=[self._read(obj) for obj in objects])
        except ValueError as e:
            return ClientResult.failure(str(e), code=INVALID_INPUT)
        except SQLAlchemyError as e:
            logger.error(f"Failed to list {self.entity}: {e}", exc_info=True)
            return ClientResult.failure(f"Failed to list {self.entity}")

    async def get(self, id: uuid.UUID) -> ClientResult:
        """Get one record; a missing record yields data=None without errors."""
        try:
            obj = await self.repository.get_by_id(id)
            return ClientResult(data=self._read(obj) if obj is not None else None)
        except SQLAlchemyError as e:
            logger.error(f"Failed to get {self.entity} {id}: {e}", exc_info=True)
            return ClientResult.failure(f"Failed to get {self.entity}")

    async def create(self, fields: Union[Dict[str, Any], BaseModel]) -> ClientResult:
        """
        Create a record owned by the caller.

        Returns:
            Result with the canonical record (server-assigned id and defaults)
        """
        if not self.identity.is_owner:
            return self._denied("create")
        try:
            if isinstance(fields, BaseModel):
                fields = fields.model_dump(exclude_unset=True)
            payload = self.create_schema.model_validate(fields)
            values = payload.model_dump()

            missing = await self._check_references(values)
            if missing:
                return ClientResult.failure(*missing, code=MISSING_REFERENCE)

            values["owner"] = self.identity.subject
            obj = await self.repository.create(values)
            logger.info(f"Created {self.entity} {obj.id} for {self.identity.subject}")
            return ClientResult(data=self._read(obj))
        except PydanticValidationError as e:
            return ClientResult.failure(*_validation_messages(e), code=INVALID_INPUT)
        except SQLAlchemyError as e:
            logger.error(f"Failed to create {self.entity}: {e}", exc_info=True)
            return ClientResult.failure(f"Failed to create {self.entity}")

    async def update(self, fields: Dict[str, Any]) -> ClientResult:
        """
        Apply a partial update keyed by ``fields["id"]``.

        Only the keys present in ``fields`` are written.
        """
        if self.update_schema is None:
            return ClientResult.failure(f"{self.entity} does not support updates", code=INVALID_INPUT)
        fields = dict(fields)
        id = fields.pop("id", None)
        if id is None:
            return ClientResult.failure("id is required", code=INVALID_INPUT)
        try:
            patch = self.update_schema.model_validate(fields).model_dump(exclude_unset=True)

            owned = await self._owned(id, "update")
            if isinstance(owned, ClientResult):
                return owned

            missing = await self._check_references(patch)
            if missing:
                return ClientResult.failure(*missing, code=MISSING_REFERENCE)

            obj = await self.repository.update(id, patch)
            if obj is None:
                return ClientResult.failure(f"{self.entity} not found", code=NOT_FOUND)
            logger.info(f"Updated {self.entity} {id}: {sorted(patch)}")
            return ClientResult(data=self._read(obj))
        except PydanticValidationError as e:
            return ClientResult.failure(*_validation_messages(e), code=INVALID_INPUT)
        except ValueError as e:
            return ClientResult.failure(str(e), code=INVALID_INPUT)
        except SQLAlchemyError as e:
            logger.error(f"Failed to update {self.entity} {id}: {e}", exc_info=True)
            return ClientResult.failure(f"Failed to update {self.entity}")

    async def delete(self, id: uuid.UUID) -> ClientResult:
        """Delete a record owned by the caller; data is the deleted record."""
        try:
            owned = await self._owned(id, "delete")
            if isinstance(owned, ClientResult):
                return owned

            record = self._read(owned)
            if not await self.repository.delete(id):
                return ClientResult.failure(f"{self.entity} not found", code=NOT_FOUND)
            logger.info(f"Deleted {self.entity} {id}")
            return ClientResult(data=record)
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete {self.entity} {id}: {e}", exc_info=True)
            return ClientResult.failure(f"Failed to delete {self.entity}")


class DataClient:
    """
    Per-request client exposing one ModelClient per entity.

    Constructed explicitly with a session and the caller identity and passed to
    whatever needs it; there is no module-level instance.
    """

    def __init__(self, db: AsyncSession, identity: Identity):
        self.db = db
        self.identity = identity

        car_repository = CarRepository(db)
        seller_repository = SellerRepository(db)

        self.cars: ModelClient[CarRead] = ModelClient(
            "Car",
            car_repository,
            CarRead,
            CarCreate,
            CarUpdate,
            identity,
            references={"seller_id": ("Seller", seller_repository)},
        )
        self.sellers: ModelClient[SellerRead] = ModelClient(
            "Seller",
            seller_repository,
            SellerRead,
            SellerCreate,
            None,
            identity,
        )
        self.inquiries: ModelClient[InquiryRead] = ModelClient(
            "Inquiry",
            InquiryRepository(db),
            InquiryRead,
            InquiryCreate,
            InquiryUpdate,
            identity,
            references={"car_id": ("Car", car_repository)},
        )