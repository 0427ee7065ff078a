import logging
import requests

from .models import SourceIssue
from .pagination import fetch_all_pages

logger = logging.getLogger('gitea-github-migrator')

def gitea_headers(gitea_token):
    """Headers for authenticated Gitea API requests"""
    return {
        'Accept': 'application/json',
        'Authorization': f'token {gitea_token}',
        'Content-Type': 'application/json',
    }

def get_gitea_issues_page(gitea_repo_url, gitea_token, page):
    """Get one page of open and closed issues from Gitea"""
    response = requests.get(
        f"{gitea_repo_url}/issues",
        headers=gitea_headers(gitea_token),
        params={'page': page, 'state': 'all'}
    )
    response.raise_for_status()
    return response.json()

def get_all_gitea_issues(gitea_repo_url, gitea_token):
    """Get every issue from the Gitea repository, sorted by issue number"""
    logger.info(f"Fetching issues from Gitea repository {gitea_repo_url}")
    
    raw_issues = fetch_all_pages(
        lambda page: get_gitea_issues_page(gitea_repo_url, gitea_token, page),
        label='issues'
    )
    issues = sorted((SourceIssue.from_api(issue) for issue in raw_issues), key=lambda issue: issue.number)
    
    open_issues = sum(1 for issue in issues if not issue.is_closed)
    logger.info(f"Found {len(issues)} issues in Gitea ({open_issues} open, {len(issues) - open_issues} closed)")
    return issues
