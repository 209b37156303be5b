"""
Typed client for the users, posts, comments and todos resources.

Each operation issues exactly one request (the derived operations issue one
per resource they touch) and maps non-success statuses to an absent result
instead of raising. Transport and decode failures propagate to the caller.
"""

import logging
from typing import List, NamedTuple, Optional, Sequence
from urllib.parse import quote

from fakerest.codec import EntityCodec
from fakerest.config import Config
from fakerest.entities import Comment, Post, Todo, User
from fakerest.transport import HttpTransport, Response, get_transport

logger = logging.getLogger(__name__)


class LastPostComments(NamedTuple):
    """Comments of a user's last post, together with the id of that post."""

    post_id: Optional[int]
    comments: List[Comment]


def select_last_post(posts: Sequence[Post]) -> Optional[Post]:
    """
    Pick the post with the highest id.

    On equal ids the first one encountered wins.

    Args:
        posts: Posts in server order

    Returns:
        The last post, or None if there are no posts
    """
    last = None
    for post in posts:
        if last is None or post.id > last.id:
            last = post
    return last


class ResourceClient:
    """
    Client for the JSONPlaceholder-style REST resources.

    Example:
        client = ResourceClient()
        user = client.get_user(1)
        todos = client.open_todos(user.id)
    """

    def __init__(
        self,
        transport: Optional[HttpTransport] = None,
        base_url: Optional[str] = None,
        decoder: Optional[str] = None,
    ):
        """
        Initialize the ResourceClient.

        Args:
            transport: Transport used for every request (defaults to the global transport)
            base_url: Service root (defaults to Config.base_url())
            decoder: Response decoding strategy (defaults to Config.decoder())
        """
        self.transport = transport or get_transport()
        self.base_url = (base_url or Config.base_url()).rstrip("/")
        self.users = EntityCodec(User, decoder)
        self.posts = EntityCodec(Post, decoder)
        self.comments = EntityCodec(Comment, decoder)
        self.todos = EntityCodec(Todo, decoder)

    def _send(self, method: str, path: str, body: Optional[str] = None) -> Response:
        return self.transport.request(method, f"{self.base_url}{path}", body)

    def _expect(self, response: Response, expected: int, method: str, path: str) -> bool:
        if response.status == expected:
            return True
        logger.warning(f"{method} {path} returned {response.status}, expected {expected}")
        return False

    def list_users(self) -> List[User]:
        """GET /users."""
        response = self._send("GET", "/users")
        if not self._expect(response, 200, "GET", "/users"):
            return []
        return self.users.decode_many(response.body)

    def get_user(self, user_id: int) -> Optional[User]:
        """GET /users/{id}; None if the user is not found."""
        path = f"/users/{user_id}"
        response = self._send("GET", path)
        if not self._expect(response, 200, "GET", path):
            return None
        return self.users.decode_one(response.body)

    def find_users_by_username(self, username: str) -> List[User]:
        """GET /users?username={username}; the remote answers with an array even for one match."""
        path = f"/users?username={quote(username, safe='')}"
        response = self._send("GET", path)
        if not self._expect(response, 200, "GET", path):
            return []
        return self.users.decode_many(response.body)

    def create_user(self, user: User) -> Optional[User]:
        """
        Create a user.

        Args:
            user: User to send; its id is included in the payload

        Returns:
            The user as echoed by the server (201), or None on any other status
        """
        response = self._send("POST", "/users", self.users.encode(user))
        if not self._expect(response, 201, "POST", "/users"):
            return None
        return self.users.decode_one(response.body)

    def update_user(self, user: User) -> Optional[User]:
        """
        Replace a user.

        Args:
            user: User carrying the new field values; addressed by its id

        Returns:
            The user as returned by the server (200), or None on any other status
        """
        path = f"/users/{user.id}"
        response = self._send("PUT", path, self.users.encode(user))
        if not self._expect(response, 200, "PUT", path):
            return None
        return self.users.decode_one(response.body)

    def delete_user(self, user_id: int) -> bool:
        """
        Delete a user.

        Returns:
            True for any 2xx status, False otherwise. The body is ignored.
        """
        path = f"/users/{user_id}"
        response = self._send("DELETE", path)
        if not response.ok:
            logger.warning(f"DELETE {path} returned {response.status}")
        return response.ok

    def list_posts_of_user(self, user_id: int) -> List[Post]:
        """GET /users/{id}/posts."""
        path = f"/users/{user_id}/posts"
        response = self._send("GET", path)
        if not self._expect(response, 200, "GET", path):
            return []
        return self.posts.decode_many(response.body)

    def list_comments_of_post(self, post_id: int) -> List[Comment]:
        """GET /posts/{id}/comments."""
        path = f"/posts/{post_id}/comments"
        response = self._send("GET", path)
        if not self._expect(response, 200, "GET", path):
            return []
        return self.comments.decode_many(response.body)

    def list_todos_of_user(self, user_id: int) -> List[Todo]:
        """GET /users/{id}/todos."""
        path = f"/users/{user_id}/todos"
        response = self._send("GET", path)
        if not self._expect(response, 200, "GET", path):
            return []
        return self.todos.decode_many(response.body)

    def comments_for_last_post(self, user_id: int) -> LastPostComments:
        """
        Fetch the comments of a user's last post.

        The last post is the one with the highest id, not the most recent in
        time. No comments request is made when the user has no posts.

        Args:
            user_id: Author of the posts

        Returns:
            LastPostComments with the selected post id (None without posts)
            and its comments in server order
        """
        last_post = select_last_post(self.list_posts_of_user(user_id))
        if last_post is None:
            return LastPostComments(None, [])
        return LastPostComments(last_post.id, self.list_comments_of_post(last_post.id))

    def open_todos(self, user_id: int) -> List[Todo]:
        """Todos of a user that are not completed, in server order."""
        return [todo for todo in self.list_todos_of_user(user_id) if not todo.completed]
