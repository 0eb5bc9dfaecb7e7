"""
Hero Slide Repository.
"""
from typing import Any, Dict, List
from sitecms.common.base.base_repository import CollectionRepository


class SlideRepository(CollectionRepository):
    collection_name = 'heroSlides'

    def list_ordered(self) -> List[Dict[str, Any]]:
        return self.list_all(order_by='order')
