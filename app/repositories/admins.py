from app.core.security import hash_password
from app.models.admin import Admin
from app.repositories.base import EmailLookupMixin, Repository


class AdminRepository(EmailLookupMixin, Repository[Admin]):
    model = Admin
    entity_name = "admin"
    entity_plural = "admins"

    def create_admin(self, name: str, email: str, password: str) -> Admin:
        return self.create(name=name, email=email, password_hash=hash_password(password))
