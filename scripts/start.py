"""Production startup script for the AI Readiness Index API.

Starts uvicorn with host, port and worker count taken from the
environment, and exits cleanly on SIGTERM/SIGINT.
"""

import os
import signal
import sys


def uvicorn_args(host: str, port: str, workers: str) -> list[str]:
    """Command line used to launch the API."""
    return [
        "uvicorn",
        "api.main:app",
        "--host",
        host,
        "--port",
        port,
        "--workers",
        workers,
        "--proxy-headers",
        "--forwarded-allow-ips",
        "*",
    ]


def start_api() -> None:
    """Start the FastAPI application with uvicorn."""
    port = os.getenv("PORT") or os.getenv("API_PORT", "8000")
    workers = os.getenv("API_WORKERS", "1")
    host = os.getenv("API_HOST", "0.0.0.0")

    print(f"Starting API server on {host}:{port} with {workers} worker(s)...")

    # Use exec to replace the current process
    os.execvp("uvicorn", uvicorn_args(host, port, workers))


def signal_handler(signum: int, _frame: object) -> None:
    """Handle shutdown signals gracefully."""
    print(f"Received signal {signum}, shutting down...")
    sys.exit(0)


def main() -> None:
    """Main entry point."""
    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)

    start_api()


if __name__ == "__main__":
    main()
