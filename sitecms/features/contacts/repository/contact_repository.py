"""
Contact Submission Repository.
"""
from sitecms.common.base.base_repository import CollectionRepository


class ContactRepository(CollectionRepository):
    collection_name = 'contact_submissions'
