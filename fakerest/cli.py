#!/usr/bin/env python3
"""
Command-line interface for fakerest.

Runs the fixed demo script against the remote REST service: create, update
and delete a user, read users back, save the comments of a user's last post
to a file, and list that user's open todos.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from fakerest.client import ResourceClient
from fakerest.codec import DecodeError
from fakerest.config import DEFAULT_BASE_URL
from fakerest.entities import User
from fakerest.output import OutputManager, Verbosity, get_output, set_output
from fakerest.storage import save_comments_to_file
from fakerest.transport import TransportError

DEMO_USER = User(11, "New User", "newuser@example.com")
DEMO_RENAMED = "Updated User"
DEMO_USER_ID = 1
DEMO_USERNAME = "Bret"


def describe(value: Any) -> str:
    """Render a step result: lists element by element, everything else with str()."""
    if isinstance(value, list):
        return "[" + ", ".join(str(item) for item in value) + "]"
    return str(value)


def run_demo(
    client: ResourceClient,
    output: Optional[OutputManager] = None,
    directory: Optional[Path] = None,
) -> Optional[Path]:
    """
    Execute the demo script step by step.

    Non-success statuses are reported as None, empty lists or False and the
    script moves on. Transport and decode errors propagate.

    Args:
        client: Client used for every request
        output: Output manager (defaults to the global one)
        directory: Where to write the comments file (defaults to Config.output_dir())

    Returns:
        Path of the comments file, or None if no comments were saved

    Raises:
        TransportError: If a request cannot be completed
        DecodeError: If a response body cannot be decoded
    """
    output = output or get_output()
    output.info(f"Using {client.base_url}")

    output.section("Step 1: Create user")
    created = client.create_user(User(DEMO_USER.id, DEMO_USER.name, DEMO_USER.email))
    output.result("Created User", created)

    if created is None:
        output.warning("User was not created, skipping update and delete")
    else:
        output.section("Step 2: Update user")
        created.name = DEMO_RENAMED
        updated = client.update_user(created)
        output.result("Updated User", updated)

        output.section("Step 3: Delete user")
        deleted = client.delete_user(created.id)
        output.result("User Deleted", deleted)

    output.section("Step 4: List users")
    output.result("All Users", describe(client.list_users()))

    output.section("Step 5: Get user by id")
    output.result("User by ID", client.get_user(DEMO_USER_ID))

    output.section("Step 6: Find users by username")
    output.result("User by Username", describe(client.find_users_by_username(DEMO_USERNAME)))

    output.section("Step 7: Save comments of the last post")
    last = client.comments_for_last_post(DEMO_USER_ID)
    if last.post_id is not None:
        output.verbose(f"Last post of user {DEMO_USER_ID}: {last.post_id}")
    saved = save_comments_to_file(DEMO_USER_ID, last.post_id, last.comments, directory, output)

    output.section("Step 8: Open todos")
    output.result(f"Open Todos for User {DEMO_USER_ID}", describe(client.open_todos(DEMO_USER_ID)))

    output.rule()
    return saved


def cmd_run(args: argparse.Namespace) -> None:
    """Build the client from configuration and run the demo."""
    output = get_output()
    try:
        client = ResourceClient()
        run_demo(client, output)
    except TransportError as e:
        output.error(f"Error: {e}", suggestion="Check your network connection and FAKEREST_BASE_URL")
        sys.exit(1)
    except DecodeError as e:
        output.error(f"Error: {e}", suggestion="Try FAKEREST_DECODER=json if the positional decoder is selected")
        sys.exit(1)
    except OSError as e:
        output.error(f"Error: {e}", suggestion="Check that FAKEREST_OUTPUT_DIR exists and is writable")
        sys.exit(1)
    except ValueError as e:
        output.error(f"Error: {e}")
        sys.exit(1)


def main() -> None:
    """Main entry point for the fakerest CLI."""
    parser = argparse.ArgumentParser(
        prog="fakerest",
        description="Run a scripted CRUD demo against the JSONPlaceholder fake REST API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Environment:
  FAKEREST_BASE_URL    Service root (default {DEFAULT_BASE_URL})
  FAKEREST_TIMEOUT     Per-request timeout in seconds (default: none)
  FAKEREST_DECODER     json or positional (default json)
  FAKEREST_OUTPUT_DIR  Where the comments file is written (default: current directory)
        """,
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only show errors and step results",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show every HTTP request and response status",
    )
    args = parser.parse_args()

    if args.quiet:
        verbosity = Verbosity.QUIET
    elif args.verbose:
        verbosity = Verbosity.VERBOSE
    else:
        verbosity = Verbosity.NORMAL

    logging.basicConfig(
        level=logging.DEBUG if verbosity == Verbosity.VERBOSE else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    set_output(OutputManager(verbosity=verbosity))
    cmd_run(args)


if __name__ == "__main__":
    main()
