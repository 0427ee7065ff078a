# Pagination
from .pagination import fetch_all_pages

# Models
from .models import (
    Asset,
    SourceIssue,
    SourceComment
)

# Issue functions
from .issue import (
    get_gitea_issues_page,
    get_all_gitea_issues
)

# Comment functions
from .comment import (
    get_gitea_comments_page,
    get_all_gitea_comments,
    parse_issue_number,
    comments_for_issue
)
