import logging

from dotenv import load_dotenv

from calverlex.version import __version__

logger = logging.getLogger(__name__)

# Ensure environment variables are loaded
load_dotenv()

USER_AGENT = {"User-Agent": f"calverlex/{__version__}"}
