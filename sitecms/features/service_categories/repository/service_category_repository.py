"""
Service Category Repository.
"""
from sitecms.common.base.base_repository import CollectionRepository


class ServiceCategoryRepository(CollectionRepository):
    collection_name = 'service_categories'
