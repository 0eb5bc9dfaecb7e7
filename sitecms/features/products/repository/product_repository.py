"""
Product Repository.
"""
from sitecms.common.base.base_repository import CollectionRepository


class ProductRepository(CollectionRepository):
    collection_name = 'products'
