from io import BytesIO

from PIL import Image

USER_DATA = {
    "name": "A",
    "email": "a@x.com",
    "password": "secret1",
    "type_of_institution": "school",
}

ADMIN_DATA = {
    "name": "Admin",
    "email": "admin@x.com",
    "password": "adminpass",
    "type_of_institution": "tertiary",
    "is_admin": True,
}

COMPETITION_DATA = {
    "name": "Winter Cup",
    "description": "Algorithms for everyone",
    "start_date": "2026-12-01T09:00:00",
    "end_date": "2026-12-01T14:00:00",
    "status": "upcoming",
    "category": "high_school",
}


def auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def png_bytes() -> bytes:
    buffer = BytesIO()
    Image.new("RGB", (2, 2), color=(255, 0, 0)).save(buffer, format="PNG")
    return buffer.getvalue()
