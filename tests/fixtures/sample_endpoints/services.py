class UserRepository:
    def all(self):
        return [{"id": 1, "name": "alice"}, {"id": 2, "name": "bob"}]

    def get(self, user_id: int):
        for user in self.all():
            if user["id"] == user_id:
                return user
        return None
