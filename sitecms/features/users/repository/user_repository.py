from sitecms.common.base.base_repository import CollectionRepository


class UserRepository(CollectionRepository):
    """Admin user profiles; documents created with an Auth account share its uid."""
    collection_name = 'users'
