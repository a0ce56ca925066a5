from enum import Enum


class UserTestConstants(Enum):
    MOCK_ADMIN_ID = "d957fd38-cbdf-48b5-8ffa-a5d1d8142372"
    MOCK_ADMIN_EMAIL = "admin@herbs.com"
    MOCK_USER_ID = "5b0d1c4e-7a8f-4f59-9d3a-1b2c3d4e5f60"
    MOCK_USER_EMAIL = "matrix@simulation.com"
    MOCK_JWT_SECRET = "test-jwt-secret"
    MOCK_ADMIN_PROFILE = {
        "id": MOCK_ADMIN_ID,
        "email": MOCK_ADMIN_EMAIL,
        "role": "admin",
    }
    MOCK_USER_PROFILE = {
        "id": MOCK_USER_ID,
        "email": MOCK_USER_EMAIL,
        "role": "user",
    }
