"""Tests for comment queries and mutations."""

from launchwatch.models import User
from launchwatch.services.comments import (
    add_comment,
    display_name,
    get_comments_by_launch,
    remove_comment,
)
from launchwatch.services.results import ErrorKind

from conftest import SEED_TIME


def test_add_comment_requires_identity(db, seeded):
    result = add_comment(db, None, seeded["CRS-31"].id, "Go Dragon!")

    assert result.error == ErrorKind.UNAUTHENTICATED
    assert get_comments_by_launch(db, seeded["CRS-31"].id) == []


def test_add_comment_unknown_launch(db, seeded, make_identity):
    result = add_comment(db, make_identity(), 9999, "hello?")

    assert result.error == ErrorKind.NOT_FOUND


def test_new_comment_listed_first_with_user_name(db, seeded, make_identity):
    launch_id = seeded["CRS-31"].id
    alice = make_identity("alice@example.com")
    bob = make_identity("bob.smith@example.com")

    add_comment(db, alice, launch_id, "first", now=SEED_TIME)
    result = add_comment(db, bob, launch_id, "second", now=SEED_TIME + 1000)

    assert result.ok
    comments = get_comments_by_launch(db, launch_id)
    assert [c.content for c in comments] == ["second", "first"]
    assert comments[0].id == result.value
    assert comments[0].user_name == "bob.smith"
    assert comments[1].user_name == "alice"


def test_guest_comment_is_anonymous(db, seeded, make_identity):
    launch_id = seeded["Crew-9"].id

    add_comment(db, make_identity(None), launch_id, "watching from the beach")

    assert get_comments_by_launch(db, launch_id)[0].user_name == "Anonymous"


def test_empty_content_is_not_rejected_here(db, seeded, make_identity):
    result = add_comment(db, make_identity(), seeded["Crew-9"].id, "   ")

    assert result.ok


def test_display_name_edge_cases():
    assert display_name(None) == "Anonymous"
    assert display_name(User(email="")) == "Anonymous"
    assert display_name(User(email="@nolocal.com")) == "Anonymous"
    assert display_name(User(email="kate@spacex.com")) == "kate"


def test_remove_comment_by_non_author_forbidden(db, seeded, make_identity):
    launch_id = seeded["CRS-31"].id
    author = make_identity("author@example.com")
    other = make_identity("other@example.com")
    comment_id = add_comment(db, author, launch_id, "mine").value

    result = remove_comment(db, other, comment_id)

    assert result.error == ErrorKind.FORBIDDEN
    assert len(get_comments_by_launch(db, launch_id)) == 1


def test_remove_comment_by_author(db, seeded, make_identity):
    launch_id = seeded["CRS-31"].id
    author = make_identity()
    comment_id = add_comment(db, author, launch_id, "oops").value

    result = remove_comment(db, author, comment_id)

    assert result.ok
    assert get_comments_by_launch(db, launch_id) == []


def test_remove_comment_missing_or_unauthenticated(db, seeded, make_identity):
    assert remove_comment(db, None, 1).error == ErrorKind.UNAUTHENTICATED
    assert remove_comment(db, make_identity(), 9999).error == ErrorKind.NOT_FOUND
