import logging

logger = logging.getLogger('gitea-github-migrator')

def fetch_all_pages(fetch_page, label='items'):
    """Collect every item from a paged endpoint.
    
    Calls fetch_page(1), fetch_page(2), ... until a page comes back empty and
    returns the items of all earlier pages in order. Errors raised by
    fetch_page propagate unchanged.
    """
    all_items = []
    page = 1
    
    while True:
        logger.debug(f"Fetching {label} page {page}")
        items = fetch_page(page)
        if not items:
            logger.debug(f"No more {label} found on page {page}")
            break
        
        logger.debug(f"Found {len(items)} {label} on page {page}")
        all_items.extend(items)
        page += 1
    
    return all_items
