import hmac

from passlib.context import CryptContext

from daily_quiz.core.config import settings

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


# Password hashing
def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password, hashed_password) -> bool:
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


# Static admin pair
def check_admin_credentials(admin_id: str, admin_password: str) -> bool:
    id_ok = hmac.compare_digest(admin_id.encode(), settings.ADMIN_ID.encode())
    password_ok = hmac.compare_digest(admin_password.encode(), settings.ADMIN_PASSWORD.encode())
    return id_ok and password_ok


def is_admin_identity(login_id: str, is_admin: bool) -> bool:
    return bool(is_admin) and login_id == settings.ADMIN_ID
