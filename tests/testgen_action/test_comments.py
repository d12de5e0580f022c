from testgen_action.comments import (
    group_patches_by_filename,
    is_accepted,
    is_bot_comment,
    parse_comment_to_patch,
)
from testgen_action.models import Comment, Patch

DIFF = "@@ -1,2 +1,3 @@\n import pytest\n+import os\n \n"

BODY = (
    "<details open>\n"
    "<summary><h3>Test 1: test_env</h3></summary>\n"
    "Checks that the environment is read\n"
    "```diff\n"
    f"{DIFF}\n"
    "```\n"
    "tests/test_env.py\n"
    "</details>\n"
)


def _comment(body=BODY, app="GitHub Actions", plus_one=0) -> Comment:
    return Comment(id=1, body=body, app_name=app, reactions={"+1": plus_one, "-1": 0})


def test_parse_comment_to_patch():
    patch = parse_comment_to_patch(BODY)
    assert patch == Patch("tests/test_env.py", "--- a/tests/test_env.py\n+++ b/tests/test_env.py\n" + DIFF)


def test_parse_comment_normalizes_crlf():
    patch = parse_comment_to_patch(BODY.replace("\n", "\r\n"))
    assert patch is not None
    assert "\r" not in patch.text
    assert patch.filename == "tests/test_env.py"


def test_parse_comment_without_diff_block():
    assert parse_comment_to_patch("LGTM, thanks!") is None


def test_parse_comment_without_filename():
    body = BODY.replace("tests/test_env.py\n</details>", "</details>")
    assert parse_comment_to_patch(body) is None


def test_bot_and_accepted_filters():
    assert is_bot_comment(_comment())
    assert not is_bot_comment(_comment(app=None))
    assert is_bot_comment(_comment(app="my-bot"), app_name="my-bot")
    assert not is_accepted(_comment())
    assert is_accepted(_comment(plus_one=2))


def test_comment_from_api_payload():
    comment = Comment.from_api(
        {
            "id": 42,
            "body": BODY,
            "user": {"login": "github-actions[bot]"},
            "performed_via_github_app": {"id": 15368, "name": "GitHub Actions"},
            "reactions": {"url": "https://api.github.com/x", "total_count": 1, "+1": 1, "-1": 0},
        }
    )
    assert comment.id == 42
    assert comment.user_login == "github-actions[bot]"
    assert comment.app_name == "GitHub Actions"
    assert comment.thumbs_up == 1
    assert "url" not in comment.reactions


def test_comment_from_api_without_app_or_reactions():
    comment = Comment.from_api({"id": 7, "body": None, "performed_via_github_app": None})
    assert comment.app_name is None
    assert comment.body == ""
    assert comment.thumbs_up == 0


def test_group_patches_preserves_first_seen_order():
    a1, b1, a2 = Patch("a.py", "1"), Patch("b.py", "2"), Patch("a.py", "3")
    grouped = group_patches_by_filename([a1, b1, a2])
    assert list(grouped) == ["a.py", "b.py"]
    assert grouped["a.py"] == [a1, a2]
