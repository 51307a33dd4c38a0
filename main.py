"""
Entry point for the User API
"""

import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from user_api.app import app
from user_api.config.settings import PORT, LOG_LEVEL

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting User API on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
