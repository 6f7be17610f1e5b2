from .user_create_data import REQUIRED_FIELDS, CompositeUserCreateDataValidator
from .user_unique_email import RepositoryUniqueEmailValidator

__all__ = [
    "REQUIRED_FIELDS",
    "CompositeUserCreateDataValidator",
    "RepositoryUniqueEmailValidator",
]
