import logging

from .gitea.issue import get_all_gitea_issues
from .gitea.comment import get_all_gitea_comments, comments_for_issue
from .github.issue import (
    github_issue_exists,
    create_github_issue,
    close_github_issue,
    throttle_if_needed
)

logger = logging.getLogger('gitea-github-migrator')

LINE_BREAK = '\r\n'

def format_issue_body(issue, comments):
    """Build the GitHub issue body: the original text followed by a quoted provenance footer"""
    comment_lines = LINE_BREAK.join(f"> - {comment.author_name}: {comment.body}" for comment in comments)
    footer = LINE_BREAK.join([
        f"> *Imported from Gitea: {issue.url}*",
        "> Original Comments:",
        comment_lines or "> (none)",
    ])
    return issue.body + LINE_BREAK * 2 + footer

def migrate_issue(config, issue, all_comments):
    """Copy a single Gitea issue to GitHub
    
    Returns:
        str: 'skipped' if the issue number already exists in GitHub, otherwise 'created'
    """
    if github_issue_exists(config.dest_issue_api_url, config.dest_token, issue.number):
        logger.info(f"Issue #{issue.number} already exists in GitHub. Skipping...")
        return 'skipped'
    
    comments = comments_for_issue(issue.number, all_comments)
    if issue.assets:
        logger.debug(f"Issue #{issue.number} has {len(issue.assets)} attachments, which are not migrated")
    
    create_response = create_github_issue(
        config.dest_issue_api_url,
        config.dest_token,
        issue.title,
        format_issue_body(issue, comments),
        retry_delay=config.retry_delay,
        max_attempts=config.max_create_attempts
    )
    github_issue_number = create_response.json()['number']
    logger.info(f"Successfully copied issue #{issue.number} to GitHub as issue #{github_issue_number}")
    
    # Skip detection relies on GitHub numbering matching Gitea numbering
    if github_issue_number != issue.number:
        logger.warning(f"Gitea issue #{issue.number} became GitHub issue #{github_issue_number}; "
                       f"existing-issue checks on later runs will be unreliable")
    
    if issue.is_closed:
        close_github_issue(config.dest_issue_api_url, config.dest_token, github_issue_number)
        logger.info(f"Set issue #{issue.number} to closed")
    
    throttle_if_needed(create_response, threshold=config.throttle_threshold, delay=config.throttle_delay)
    return 'created'

def migrate_all_issues(config):
    """Migrate every Gitea issue to GitHub in ascending issue number order"""
    logger.info(f"Migrating issues from {config.source_repo_url} to {config.dest_issue_api_url}")
    
    issues = get_all_gitea_issues(config.source_repo_url, config.source_token)
    all_comments = get_all_gitea_comments(config.source_repo_url, config.source_token)
    
    summary = {'total': len(issues), 'created': 0, 'skipped': 0}
    for issue in issues:
        result = migrate_issue(config, issue, all_comments)
        summary[result] += 1
    
    logger.info(f"Migration completed: {summary['created']} created, {summary['skipped']} skipped, {summary['total']} total")
    return summary
