import os
import logging
from dataclasses import dataclass
from dotenv import load_dotenv

from ..exceptions import ConfigError

logger = logging.getLogger('gitea-github-migrator')

REQUIRED_VARS = {
    'GITEA_REPO_URL': 'source_repo_url',
    'GITEA_TOKEN': 'source_token',
    'GITHUB_ISSUE_API_URL': 'dest_issue_api_url',
    'GITHUB_API_KEY': 'dest_token',
}

# Optional tuning knobs: env var -> (field, type, default)
OPTIONAL_VARS = {
    'RATE_LIMIT_RETRY_DELAY': ('retry_delay', float, 3.0),
    'RATE_LIMIT_MAX_ATTEMPTS': ('max_create_attempts', int, 100),
    'RATE_LIMIT_THRESHOLD': ('throttle_threshold', int, 10),
    'RATE_LIMIT_COOLDOWN': ('throttle_delay', float, 10.0),
}


@dataclass(frozen=True)
class MigrationConfig:
    """Settings shared by every migration step."""

    source_repo_url: str
    source_token: str
    dest_issue_api_url: str
    dest_token: str
    retry_delay: float = 3.0
    max_create_attempts: int = 100
    throttle_threshold: int = 10
    throttle_delay: float = 10.0


def _mask(token):
    return '*' * 5 + token[-5:] if token else 'Not set'

def _parse_optional(name, cast, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = cast(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{name} must be greater than zero, got {raw!r}")
    return value

def load_config(env_file=None):
    """Load and validate configuration from environment variables
    
    Args:
        env_file (str): Optional path to a .env file; defaults to searching for .env
        
    Returns:
        MigrationConfig: The validated configuration
        
    Raises:
        ConfigError: If a required variable is missing or a tuning value is invalid
    """
    logger.debug("Loading environment variables from .env file...")
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()
    
    values = {}
    missing = []
    for name, field in REQUIRED_VARS.items():
        value = (os.getenv(name) or '').strip()
        if not value:
            missing.append(name)
        values[field] = value
    
    if missing:
        raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")
    
    values['source_repo_url'] = values['source_repo_url'].rstrip('/')
    values['dest_issue_api_url'] = values['dest_issue_api_url'].rstrip('/')
    
    for name, (field, cast, default) in OPTIONAL_VARS.items():
        values[field] = _parse_optional(name, cast, default)
    
    logger.debug(f"GITEA_REPO_URL: {values['source_repo_url']}")
    logger.debug(f"GITHUB_ISSUE_API_URL: {values['dest_issue_api_url']}")
    logger.debug(f"GITEA_TOKEN: {_mask(values['source_token'])}")
    logger.debug(f"GITHUB_API_KEY: {_mask(values['dest_token'])}")
    
    return MigrationConfig(**values)
