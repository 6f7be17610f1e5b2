from .user_create_data import DefaultUserCreateDataSanitizer

__all__ = ["DefaultUserCreateDataSanitizer"]
