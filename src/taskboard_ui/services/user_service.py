"""
UserService - team member calls for the Streamlit components.
"""

from typing import Any, Dict, List

from taskboard_ui.app_lib.api.client import api_client


class UserService:
    def __init__(self, client=None):
        self.client = client or api_client

    def list_users(self) -> List[Dict[str, Any]]:
        return self.client.call("getUsers")

    def create_user(self, name: str, email: str) -> Dict[str, Any]:
        return self.client.call("createUser", {"name": name.strip(), "email": email.strip()})

    def update_user(self, user_id: str, **changes: Any) -> Dict[str, Any]:
        return self.client.call("updateUser", {"id": user_id, **changes})

    def delete_user(self, user_id: str) -> None:
        self.client.call("deleteUser", {"id": user_id})


user_service = UserService()
