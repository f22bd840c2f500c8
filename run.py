#!/usr/bin/env python3
"""
Novaria Proxy local server launcher
"""
import os
import sys
import logging
import uvicorn
from dotenv import load_dotenv

load_dotenv()

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from novaria_proxy.main import app

logger = logging.getLogger("NovariaProxy.Runner")

def main():
    """Start the Novaria Proxy server"""
    try:
        logger.info("Starting Novaria Proxy server...")

        host = os.getenv("HOST", "0.0.0.0")
        port = int(os.getenv("PORT", "3000"))
        log_level = os.getenv("LOG_LEVEL", "info").lower()

        logger.info(f"Host: {host}, Port: {port}")
        logger.info(f"Log Level: {log_level.upper()}")

        uvicorn.run(
            app,
            host=host,
            port=port,
            log_level=log_level,
        )

    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user (Ctrl+C)")
    except Exception as e:
        logger.error(f"Failed to start server: {e}", exc_info=True)
        sys.exit(1)

if __name__ == "__main__":
    main()
