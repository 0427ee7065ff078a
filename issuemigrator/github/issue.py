import time
import logging
import requests

from ..exceptions import RateLimitExceededError

logger = logging.getLogger('gitea-github-migrator')

RATE_LIMIT_STATUSES = (403, 429)

def github_headers(github_token):
    """Headers for authenticated GitHub REST API requests"""
    return {
        'Accept': 'application/json',
        'Authorization': f'Bearer {github_token}',
        'X-GitHub-Api-Version': '2022-11-28',
        'Content-Type': 'application/json',
    }

def github_issue_exists(issue_api_url, github_token, issue_number):
    """Check if an issue with the given number already exists in GitHub"""
    response = requests.get(f"{issue_api_url}/{issue_number}", headers=github_headers(github_token))
    return response.status_code == 200

def _rate_limit_message(response):
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        return data.get('message')
    return None

def create_github_issue(issue_api_url, github_token, title, body, retry_delay=3, max_attempts=100):
    """Create an issue in GitHub, waiting and retrying while rate limited
    
    A 403 or 429 answer means the request was rate limited: the same payload is
    posted again after retry_delay seconds, at most max_attempts times in total.
    Any other status is returned to the caller as the creation response.
    
    Raises:
        RateLimitExceededError: If every attempt was rate limited
    """
    payload = {
        'title': title,
        'body': body,
    }
    
    for attempt in range(1, max_attempts + 1):
        response = requests.post(issue_api_url, headers=github_headers(github_token), json=payload)
        if response.status_code not in RATE_LIMIT_STATUSES:
            return response
        
        logger.warning(f"Rate limit exceeded creating '{title}' (attempt {attempt}/{max_attempts}), waiting {retry_delay}s...")
        message = _rate_limit_message(response)
        if message:
            logger.warning(message)
        
        time.sleep(retry_delay)
    
    raise RateLimitExceededError(title, max_attempts)

def close_github_issue(issue_api_url, github_token, issue_number):
    """Set a GitHub issue to closed"""
    response = requests.patch(
        f"{issue_api_url}/{issue_number}",
        headers=github_headers(github_token),
        json={'state': 'closed'}
    )
    response.raise_for_status()
    return response

def throttle_if_needed(response, threshold=10, delay=10):
    """Pause when the remaining GitHub request quota runs low
    
    Returns:
        bool: True if execution was paused
    """
    remaining = response.headers.get('x-ratelimit-remaining')
    if remaining is None:
        return False
    
    logger.info(f"{remaining} requests remain before being rate limited")
    
    try:
        remaining_count = float(remaining)
    except ValueError:
        logger.warning(f"Could not parse x-ratelimit-remaining header: {remaining!r}")
        return False
    
    if remaining_count < threshold:
        logger.info(f"Fewer than {threshold} requests remain, pausing for {delay}s")
        time.sleep(delay)
        return True
    return False
