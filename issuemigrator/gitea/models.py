"""Issue and comment records read from the Gitea API."""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Asset:
    """A file attached to a Gitea issue. Kept for reference, never uploaded."""

    download_url: str
    name: str

    @classmethod
    def from_api(cls, data):
        return cls(
            download_url=data.get('browser_download_url') or '',
            name=data.get('name') or '',
        )


@dataclass(frozen=True)
class SourceIssue:
    """An issue as returned by GET /repos/{owner}/{repo}/issues."""

    title: str
    body: str
    number: int
    url: str
    state: str
    assets: Tuple[Asset, ...] = field(default_factory=tuple)

    @property
    def is_closed(self):
        return self.state == 'closed'

    @classmethod
    def from_api(cls, data):
        return cls(
            title=data['title'],
            body=data.get('body') or '',
            number=int(data['number']),
            url=data.get('html_url') or '',
            state=data.get('state', 'open'),
            assets=tuple(Asset.from_api(a) for a in data.get('assets') or []),
        )


@dataclass(frozen=True)
class SourceComment:
    """A comment as returned by GET /repos/{owner}/{repo}/issues/comments.

    parent_issue_ref is the comment's issue_url, e.g.
    https://gitea.example.com/owner/repo/issues/12
    """

    author_name: str
    body: str
    parent_issue_ref: str

    @classmethod
    def from_api(cls, data):
        user = data.get('user') or {}
        return cls(
            author_name=user.get('username') or user.get('login') or '',
            body=data.get('body') or '',
            parent_issue_ref=data.get('issue_url') or '',
        )
