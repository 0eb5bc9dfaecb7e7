"""
Category Repository.
"""
from sitecms.common.base.base_repository import CollectionRepository


class CategoryRepository(CollectionRepository):
    collection_name = 'categories'
