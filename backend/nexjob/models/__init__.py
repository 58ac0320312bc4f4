from nexjob.models.admin_settings import AdminSettings
from nexjob.models.user import User

__all__ = ["AdminSettings", "User"]
