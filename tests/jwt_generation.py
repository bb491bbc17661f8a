from datetime import datetime, timedelta, timezone

import jwt
from tracker.config.settings import Config


def generate_jwt_token(user_id: int = 1, email: str = "admin@example.com", **overrides) -> str:
    """Generate a valid JWT token for testing API endpoints"""
    payload = {
        "sub": str(user_id),
        "email": email,
        "exp": datetime.now(timezone.utc) + timedelta(hours=1),
        "iat": datetime.now(timezone.utc),
        "iss": Config.SERVICE_AUTH_ISSUER,
        "aud": Config.SERVICE_AUTH_AUDIENCE,
    }
    payload.update(overrides)

    token = jwt.encode(payload, Config.SERVICE_AUTH_SECRET, algorithm="HS256")
    return token


if __name__ == "__main__":
    token = generate_jwt_token()
    print(f"Bearer {token}")
