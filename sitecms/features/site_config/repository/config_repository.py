"""
Site Config Repository.
Settings live in single documents of the `config` collection.
"""
from typing import Any, Dict, Optional
from sitecms.common.base.base_repository import CollectionRepository, serialize_value

HERO_DOCUMENT = 'hero'
SITE_DOCUMENT = 'site'


class ConfigRepository(CollectionRepository):
    collection_name = 'config'

    def get_document(self, name: str) -> Optional[Dict[str, Any]]:
        doc = self.collection().document(name).get()
        if not doc.exists:
            return None
        return serialize_value(doc.to_dict() or {})

    def merge_document(self, name: str, data: Dict[str, Any]) -> None:
        self.collection().document(name).set(data, merge=True)
