from fastapi import HTTPException

from genro_endpoints import EndpointBase

from .services import UserRepository


class UsersEndpoint(EndpointBase):
    def __init__(self, repository: UserRepository):
        self.repository = repository

    def handle_endpoint(self, router):
        repository = self.repository

        @router.get("/users")
        def list_users():
            return repository.all()

        @router.get("/users/{user_id}")
        def get_user(user_id: int):
            user = repository.get(user_id)
            if user is None:
                raise HTTPException(status_code=404, detail="User not found")
            return user
