import pytest
import logging
from unittest.mock import MagicMock

from issuemigrator.utils.config import MigrationConfig
from issuemigrator.gitea.models import SourceIssue, SourceComment

# Configure logging for tests
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

@pytest.fixture
def mock_config():
    """Fixture to provide a validated migration configuration."""
    return MigrationConfig(
        source_repo_url="http://gitea.example.com/api/v1/repos/owner/repo",
        source_token="mock_gitea_token",
        dest_issue_api_url="https://api.github.com/repos/owner/repo/issues",
        dest_token="mock_github_token",
    )

@pytest.fixture
def gitea_issue_json():
    """Fixture to provide an issue as returned by the Gitea API."""
    return {
        "number": 5,
        "title": "Test Issue",
        "body": "Hello",
        "state": "open",
        "html_url": "http://x/issues/5",
        "assets": [
            {"browser_download_url": "http://x/attachments/abc", "name": "log.txt"}
        ],
        "user": {"username": "bob"}
    }

@pytest.fixture
def gitea_comment_json():
    """Fixture to provide a comment as returned by the Gitea API."""
    return {
        "id": 10,
        "body": "fix this",
        "user": {"username": "alice"},
        "issue_url": "http://gitea.example.com/owner/repo/issues/2"
    }

@pytest.fixture
def make_issue():
    """Fixture to build SourceIssue records."""
    def _make(number, state='open', body='Body', title=None):
        return SourceIssue(
            title=title or f"Issue {number}",
            body=body,
            number=number,
            url=f"http://gitea.example.com/owner/repo/issues/{number}",
            state=state,
        )
    return _make

@pytest.fixture
def make_comment():
    """Fixture to build SourceComment records."""
    def _make(issue_number, author='alice', body='fix this'):
        return SourceComment(
            author_name=author,
            body=body,
            parent_issue_ref=f"http://gitea.example.com/owner/repo/issues/{issue_number}",
        )
    return _make

@pytest.fixture
def make_response():
    """Fixture to build mock requests responses."""
    def _make(status_code=200, json_data=None, headers=None):
        response = MagicMock()
        response.status_code = status_code
        response.json.return_value = json_data
        response.headers = headers or {}
        return response
    return _make
