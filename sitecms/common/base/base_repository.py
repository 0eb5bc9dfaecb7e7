"""
Base Repository Classes.
Provides the abstract data-access interface and a Firestore collection implementation.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import TypeVar, Generic, Optional, Any, Dict, List
from google.cloud import firestore
from sitecms.services.firebase.firebase_client import FirebaseNotInitializedError, get_db
from sitecms.services.system.logger_service import get_logger

logger = get_logger(__name__)

# Firestore rejects batches with more writes than this
MAX_BATCH_WRITES = 500

T = TypeVar('T')


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base class for all repositories.
    """

    @abstractmethod
    def find_by_id(self, id: str) -> Optional[T]:
        pass

    @abstractmethod
    def save(self, entity: T) -> T:
        pass


def serialize_value(value: Any) -> Any:
    """Convert Firestore timestamps (and nested values) into JSON-friendly data."""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value


def snapshot_to_dict(doc) -> Dict[str, Any]:
    data = serialize_value(doc.to_dict() or {})
    data['id'] = doc.id
    return data


class CollectionRepository(BaseRepository[Dict[str, Any]]):
    """
    Firestore repository over a single top-level collection.
    Documents are plain dictionaries with an injected `id` key.
    """

    collection_name: str = ''

    @property
    def db(self):
        return get_db()

    def collection(self):
        return self.db.collection(self.collection_name)

    def find_by_id(self, id: str) -> Optional[Dict[str, Any]]:
        doc = self.collection().document(id).get()
        if not doc.exists:
            return None
        return snapshot_to_dict(doc)

    def exists(self, id: str) -> bool:
        return self.collection().document(id).get().exists

    def save(self, entity: Dict[str, Any]) -> Dict[str, Any]:
        """Create (auto ID) or merge-update (explicit `id`) a document."""
        data = dict(entity)
        doc_id = data.pop('id', None)
        if doc_id:
            self.collection().document(doc_id).set(data, merge=True)
        else:
            _, doc_ref = self.collection().add(data)
            doc_id = doc_ref.id
        return {'id': doc_id, **data}

    def add(self, data: Dict[str, Any]) -> str:
        _, doc_ref = self.collection().add(data)
        return doc_ref.id

    def set(self, id: str, data: Dict[str, Any], merge: bool = False) -> None:
        self.collection().document(id).set(data, merge=merge)

    def update(self, id: str, data: Dict[str, Any]) -> None:
        self.collection().document(id).update(data)

    def delete(self, id: str) -> None:
        self.collection().document(id).delete()

    def list_all(self, order_by: Optional[str] = None, descending: bool = False,
                 limit: Optional[int] = None) -> List[Dict[str, Any]]:
        query = self.collection()
        if order_by:
            direction = firestore.Query.DESCENDING if descending else firestore.Query.ASCENDING
            query = query.order_by(order_by, direction=direction)
        if limit:
            query = query.limit(limit)
        return [snapshot_to_dict(doc) for doc in query.stream()]

    def list_with_fallback(self, order_by: str, descending: bool = True,
                           limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Ordered listing that retries unordered when the ordered query fails (missing index/field)."""
        try:
            return self.list_all(order_by=order_by, descending=descending, limit=limit)
        except FirebaseNotInitializedError:
            raise
        except Exception as e:
            logger.warning("Ordered query failed, fetching without order",
                           extra={"collection": self.collection_name, "order_by": order_by, "error": str(e)})
            return self.list_all(limit=limit)

    def count(self) -> int:
        result = self.collection().count().get()
        # Aggregation results come back as [[AggregationResult]]
        return int(result[0][0].value)

    def is_empty(self) -> bool:
        return not list(self.collection().limit(1).stream())

    def add_many(self, items: List[Dict[str, Any]]) -> int:
        """Write new documents (auto IDs) in batches."""
        batch = self.db.batch()
        pending = 0
        for item in items:
            batch.set(self.collection().document(), item)
            pending += 1
            if pending == MAX_BATCH_WRITES:
                batch.commit()
                batch = self.db.batch()
                pending = 0
        if pending:
            batch.commit()
        return len(items)

    def delete_all(self) -> int:
        batch = self.db.batch()
        count = 0
        for doc in self.collection().stream():
            batch.delete(doc.reference)
            count += 1
            if count % MAX_BATCH_WRITES == 0:
                batch.commit()
                batch = self.db.batch()
        if count % MAX_BATCH_WRITES:
            batch.commit()
        return count
