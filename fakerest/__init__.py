"""
Fakerest - A scripted CRUD demo and typed client for the JSONPlaceholder fake REST API.
"""

from fakerest.entities import User, Post, Comment, Todo
from fakerest.codec import EntityCodec, DecodeError
from fakerest.transport import HttpTransport, Response, TransportError, get_transport
from fakerest.client import ResourceClient, LastPostComments, select_last_post
from fakerest.storage import save_comments_to_file
from fakerest.config import Config, config
from fakerest.cli import run_demo

__all__ = [
    "User",
    "Post",
    "Comment",
    "Todo",
    "EntityCodec",
    "DecodeError",
    "HttpTransport",
    "Response",
    "TransportError",
    "get_transport",
    "ResourceClient",
    "LastPostComments",
    "select_last_post",
    "save_comments_to_file",
    "Config",
    "config",
    "run_demo",
]

__version__ = "0.1.0"
