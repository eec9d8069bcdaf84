"""
Random input records for tests.
"""

import uuid


def get_image(**overrides):
    image = {
        "description": "an #awesome picture with #Platzi #tags",
        "url": f"https://picstore.test/{uuid.uuid4().hex}.jpg",
        "user_id": str(uuid.uuid4()),
    }
    image.update(overrides)
    return image


def get_images(n=3):
    return [get_image() for _ in range(n)]


def get_user(**overrides):
    user = {
        "username": f"user_{uuid.uuid4().hex[:12]}",
        "email": f"{uuid.uuid4().hex[:8]}@picstore.test",
        "name": "Random User",
        "password": uuid.uuid4().hex,
    }
    user.update(overrides)
    return user
