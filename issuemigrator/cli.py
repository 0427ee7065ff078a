import sys
import argparse
import requests
from .utils.logging import setup_logging
from .utils.config import load_config
from .migrate import migrate_all_issues
from .exceptions import MigrationError

def main():
    """Main entry point for the CLI"""
    # Parse command line arguments
    parser = argparse.ArgumentParser(description='Migrate issues and comments from Gitea to GitHub')
    parser.add_argument('--env-file', help='Path to a .env file with the migration settings')
    parser.add_argument('--log-level', default='INFO', help='Logging level (DEBUG, INFO, WARNING, ERROR)')
    args = parser.parse_args()
    
    logger = setup_logging(args.log_level)
    
    try:
        config = load_config(args.env_file)
    except MigrationError as e:
        logger.error(str(e))
        logger.error("Please set GITEA_REPO_URL, GITEA_TOKEN, GITHUB_ISSUE_API_URL, and GITHUB_API_KEY")
        sys.exit(1)
        return
    
    try:
        migrate_all_issues(config)
    except (MigrationError, requests.exceptions.RequestException) as e:
        logger.error(f"Migration aborted: {e}")
        sys.exit(1)
        return
    
    sys.exit(0)

if __name__ == "__main__":
    main()
