from __future__ import annotations

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer
from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_fields, require_min_length, require_non_empty
from ..core.constants import ADMIN_TOKEN_SALT, DEFAULT_ADMIN_TOKEN_MAX_AGE, MIN_PASSWORD_LENGTH
from ..core.enums import AdminRole
from ..core.exceptions import AuthenticationError, ConflictError, ValidationError
from ..core.logging import get_logger
from .model import AdminIdentity
from .repository import AdminRepository

logger = get_logger(__name__)


class AdminAuthService:
    """Use case: admin accounts and bearer tokens for admin-only routes."""

    def __init__(self, admins: AdminRepository, *, secret_key: str, token_max_age: int = DEFAULT_ADMIN_TOKEN_MAX_AGE):
        self._admins = admins
        self._serializer = URLSafeTimedSerializer(secret_key, salt=ADMIN_TOKEN_SALT)
        self._token_max_age = int(token_max_age)

    def register(self, *, username: str, password: str, role: str) -> int:
        require_fields({"username": username, "password": password, "role": role}, "username", "password", "role")
        username = require_non_empty(username, "username")
        require_min_length(password, "password", MIN_PASSWORD_LENGTH)
        try:
            admin_role = AdminRole(str(role).strip().lower())
        except ValueError:
            raise ValidationError(f"role must be one of: {', '.join(r.value for r in AdminRole)}")

        if self._admins.get_by_username(username):
            raise ConflictError("Username already exists.")

        admin_id = self._admins.create(
            username=username,
            password_hash=generate_password_hash(password),
            role=admin_role,
        )
        logger.info("Registered admin %r (role=%s)", username, admin_role.value)
        return admin_id

    def login(self, *, username: str, password: str) -> str:
        require_fields({"username": username, "password": password}, "username", "password")
        admin = self._admins.get_by_username(str(username).strip())
        if not admin:
            raise AuthenticationError("Invalid username or password.")

        try:
            ok = check_password_hash(admin.password_hash, password)
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False
        if not ok:
            raise AuthenticationError("Invalid username or password.")

        return self._serializer.dumps({"id": admin.admin_id, "role": admin.role.value})

    def verify_token(self, token: str) -> AdminIdentity:
        if not token:
            raise AuthenticationError("Missing admin token.")
        try:
            data = self._serializer.loads(token, max_age=self._token_max_age)
        except SignatureExpired:
            raise AuthenticationError("Admin token has expired.")
        except BadSignature:
            raise AuthenticationError("Invalid admin token.")
        return AdminIdentity(admin_id=int(data["id"]), role=AdminRole(data["role"]))
