import logging
import webbrowser

logger = logging.getLogger(__name__)


def open_browser(url: str) -> bool:
    """
    Open a URL in the user's default browser.

    Returns:
        bool: True if a browser was launched, False otherwise
    """
    try:
        opened = webbrowser.open(url, autoraise=True)
    except webbrowser.Error as e:
        logger.warning("Could not launch a browser: %s", e)
        return False
    if not opened:
        logger.info("No runnable browser found")
    return opened
