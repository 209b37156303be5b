"""
File artifacts written by the demo.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from fakerest.codec import COMMENTS
from fakerest.config import Config
from fakerest.entities import Comment
from fakerest.output import OutputManager, get_output

logger = logging.getLogger(__name__)


def comments_filename(user_id: int, post_id: int) -> str:
    """Name of the comments file for a user's post."""
    return f"user-{user_id}-post-{post_id}-comments.json"


def save_comments_to_file(
    user_id: int,
    post_id: Optional[int],
    comments: Sequence[Comment],
    directory: Optional[Union[str, Path]] = None,
    output: Optional[OutputManager] = None,
) -> Optional[Path]:
    """
    Write comments as a JSON array to ``user-{uid}-post-{pid}-comments.json``.

    Nothing is written for an empty list. An existing file with the same
    name is overwritten.

    Args:
        user_id: Author of the post
        post_id: Id of the post the comments belong to, as selected by the caller
        comments: Comments to write
        directory: Target directory (defaults to Config.output_dir())
        output: Output manager for the step messages (defaults to the global one)

    Returns:
        Path of the written file, or None if there was nothing to save

    Raises:
        ValueError: If comments are given without a post id
        OSError: If the file cannot be written
    """
    output = output or get_output()
    if not comments:
        output.notice("No comments to save.")
        return None
    if post_id is None:
        raise ValueError("post_id is required to name the comments file")

    target_dir = Path(directory) if directory is not None else Config.output_dir()
    file_path = target_dir / comments_filename(user_id, post_id)

    logger.debug(f"Writing {len(comments)} comment(s) to {file_path}")
    with open(file_path, "w", encoding="utf-8") as f:
        f.write(COMMENTS.encode_many(comments))
    output.result("Comments saved to file", file_path.name)
    output.verbose(f"Full path: {file_path.resolve()}")
    return file_path
