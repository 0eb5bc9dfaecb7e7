"""
Post Repository.
"""
from typing import Any, Dict, List
from google.cloud import firestore
from sitecms.common.base.base_repository import CollectionRepository, snapshot_to_dict
from sitecms.services.system.logger_service import get_logger

logger = get_logger(__name__)


class PostRepository(CollectionRepository):
    collection_name = 'posts'

    def find_published(self, limit: int = 50) -> List[Dict[str, Any]]:
        published = self.collection().where('status', '==', 'published')
        try:
            query = published.order_by('createdAt', direction=firestore.Query.DESCENDING).limit(limit)
            return [snapshot_to_dict(doc) for doc in query.stream()]
        except Exception as e:
            # Composite index (status, createdAt) may not exist yet
            logger.warning("Published posts ordered query failed, fetching without order",
                           extra={"error": str(e)})
            docs = [snapshot_to_dict(doc) for doc in published.limit(limit).stream()]
            return sorted(docs, key=lambda d: str(d.get('createdAt') or ''), reverse=True)

    def increment_views(self, post_id: str, amount: int = 1) -> None:
        self.collection().document(post_id).update({'views': firestore.Increment(amount)})
