import re
import logging
import requests

from .issue import gitea_headers
from .models import SourceComment
from .pagination import fetch_all_pages

logger = logging.getLogger('gitea-github-migrator')

ISSUE_REF_PATTERN = re.compile(r'/issues/(\d+)')

def get_gitea_comments_page(gitea_repo_url, gitea_token, page):
    """Get one page of comments across all issues of the Gitea repository"""
    response = requests.get(
        f"{gitea_repo_url}/issues/comments",
        headers=gitea_headers(gitea_token),
        params={'page': page}
    )
    response.raise_for_status()
    return response.json()

def get_all_gitea_comments(gitea_repo_url, gitea_token):
    """Get every comment of the Gitea repository as one flat list"""
    logger.info(f"Fetching comments from Gitea repository {gitea_repo_url}")
    
    raw_comments = fetch_all_pages(
        lambda page: get_gitea_comments_page(gitea_repo_url, gitea_token, page),
        label='comments'
    )
    comments = [SourceComment.from_api(comment) for comment in raw_comments]
    
    logger.info(f"Found {len(comments)} comments in Gitea")
    return comments

def parse_issue_number(issue_ref):
    """Extract the issue number from a Gitea issue URL, or None if there is none"""
    match = ISSUE_REF_PATTERN.search(issue_ref or '')
    if not match:
        return None
    return int(match.group(1))

def comments_for_issue(issue_number, all_comments):
    """Select the comments that belong to the given issue, keeping their order"""
    return [
        comment for comment in all_comments
        if parse_issue_number(comment.parent_issue_ref) == issue_number
    ]
