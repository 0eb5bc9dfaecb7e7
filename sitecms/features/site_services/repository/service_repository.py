"""
Service Repository.
"""
from sitecms.common.base.base_repository import CollectionRepository


class ServiceRepository(CollectionRepository):
    collection_name = 'services'
