"""Tests for request option models."""

import pytest
from pydantic import ValidationError

from github_discussions_mcp.models import (
    DiscussionCommentListOptions,
    DiscussionCommentRequest,
    DiscussionListOptions,
    DiscussionRequest,
    GitHubResponse,
    ListOptions,
)


class TestListOptions:
    """Test pagination options."""

    def test_defaults(self):
        opts = ListOptions()

        assert opts.page == 1
        assert opts.per_page == 30
        assert opts.to_params() == {"page": "1", "per_page": "30"}

    def test_accepts_camel_case_alias(self):
        opts = ListOptions(page=3, perPage=50)

        assert opts.to_params() == {"page": "3", "per_page": "50"}

    @pytest.mark.parametrize("kwargs", [{"page": 0}, {"per_page": 0}, {"per_page": 101}])
    def test_rejects_out_of_range_values(self, kwargs):
        with pytest.raises(ValidationError):
            ListOptions(**kwargs)

    def test_comment_list_options_share_pagination(self):
        opts = DiscussionCommentListOptions(page=2, per_page=10)

        assert opts.to_params() == {"page": "2", "per_page": "10"}


class TestDiscussionListOptions:
    """Test discussion list filters."""

    def test_unset_filters_are_omitted(self):
        params = DiscussionListOptions().to_params()

        assert params == {"page": "1", "per_page": "30"}

    def test_all_filters(self):
        opts = DiscussionListOptions(
            page=1, per_page=30, direction="desc", category_id="1", pinned=True
        )

        assert opts.to_params() == {
            "page": "1",
            "per_page": "30",
            "direction": "desc",
            "category": "1",
            "pinned": "true",
        }

    def test_pinned_false_is_sent(self):
        params = DiscussionListOptions(pinned=False).to_params()

        assert params["pinned"] == "false"

    def test_invalid_direction(self):
        with pytest.raises(ValidationError):
            DiscussionListOptions(direction="sideways")


class TestRequestBodies:
    """Test create request bodies."""

    def test_discussion_request_body(self):
        request = DiscussionRequest(title="Hello", body="World", category_id="DIC_1")

        assert request.model_dump() == {
            "title": "Hello",
            "body": "World",
            "category_id": "DIC_1",
        }

    def test_comment_request_body(self):
        assert DiscussionCommentRequest(body="Thanks!").model_dump() == {"body": "Thanks!"}


def test_github_response_defaults():
    response = GitHubResponse(status_code=204)

    assert response.data is None
    assert response.text == ""
