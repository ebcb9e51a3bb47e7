"""Request helpers shared by the endpoint tests."""


def register_student(client):
    return client.post(
        "/api/users/register",
        json={
            "username": "jeanine",
            "email": "jeanine@student.ehb.be",
            "password": "Password1!",
        },
    )


def register_teacher(client):
    return client.post(
        "/api/users/register",
        json={"username": "bob", "email": "bob@ehb.be", "password": "P@ssw0rd!"},
    )


def create_thread(client, user_id, **overrides):
    payload = {
        "user_id": user_id,
        "title": "How do I start",
        "content": "Where can I find the first assignment?",
    }
    payload.update(overrides)
    return client.post("/api/threads", json=payload)
