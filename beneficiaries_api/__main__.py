"""
Run the API server.

Usage:
    python -m beneficiaries_api [--host HOST] [--port PORT] [--reload]
"""

import argparse
import logging

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Beneficiaries API server")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    import uvicorn

    logger.info("Starting Beneficiaries API at http://%s:%d", args.host, args.port)
    uvicorn.run("beneficiaries_api.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
