"""
Base entity store: an in-memory, ordered cache of one entity's records.

A store lists its records when mounted and exposes mutation helpers that patch
the local collection only after the backend round trip succeeds. Every patch
replaces ``items`` with a new list; a failed operation leaves the existing
list object untouched and records the error instead of raising it.
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar, Union
import logging
import uuid

from pydantic import BaseModel

from carmarket.services.data_client import ClientResult, ModelClient
from carmarket.utils.exceptions import BackendError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class EntityStore(Generic[RecordT]):
    """
    Local collection, loading flag and last error for one entity.

    Args:
        client: ModelClient for the entity
    """

    def __init__(self, client: ModelClient):
        self.client = client
        self.items: List[RecordT] = []
        self.loading = True
        self.error: Optional[Exception] = None

    @property
    def entity(self) -> str:
        return self.client.entity

    def _unwrap(self, result: ClientResult, context: str) -> Any:
        if result.errors:
            raise BackendError(result.messages, context, result.code)
        return result.data

    def _fail(self, action: str, error: Exception) -> None:
        logger.warning(f"{self.entity} {action} failed: {error}")
        self.error = error

    async def mount(self) -> "EntityStore[RecordT]":
        """List records once, as a view does when it first renders."""
        await self.refresh()
        return self

    async def refresh(self) -> None:
        """Re-list records; on failure keep the current collection and record the error."""
        self.loading = True
        try:
            result = await self.client.list()
            self.items = list(self._unwrap(result, f"Error loading {self.entity} records"))
            logger.debug(f"Loaded {len(self.items)} {self.entity} records")
        except Exception as e:
            self._fail("list", e)
        finally:
            self.loading = False

    async def get(self, id: uuid.UUID) -> Optional[RecordT]:
        """
        Fetch one record without listing the collection.

        ``items`` is left as it is. Returns None when the record does not exist
        or the call failed; in the latter case ``error`` is set.
        """
        try:
            return self._unwrap(await self.client.get(id), f"Error loading {self.entity}")
        except Exception as e:
            self._fail("get", e)
            return None

    async def _create(self, payload: Union[Dict[str, Any], BaseModel]) -> Optional[RecordT]:
        try:
            record = self._unwrap(await self.client.create(payload), f"Failed to create {self.entity}")
        except Exception as e:
            self._fail("create", e)
            return None
        self.items = [*self.items, record]
        return record

    async def _update(self, id: uuid.UUID, patch: Dict[str, Any]) -> Optional[RecordT]:
        try:
            record = self._unwrap(
                await self.client.update({"id": id, **patch}),
                f"Failed to update {self.entity}",
            )
        except Exception as e:
            self._fail("update", e)
            return None

        items = list(self.items)
        for index, item in enumerate(items):
            if item.id == id:
                items[index] = record
                break
        self.items = items
        return record

    async def _delete(self, id: uuid.UUID) -> bool:
        try:
            self._unwrap(await self.client.delete(id), f"Failed to delete {self.entity}")
        except Exception as e:
            self._fail("delete", e)
            return False
        self.items = [item for item in self.items if item.id != id]
        return True
