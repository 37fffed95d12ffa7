"""Main entry point for Floodwatch."""

import sys
import time

from loguru import logger

from floodwatch.utils.logger import setup_logging


def main():
    """Run the application."""
    if len(sys.argv) < 2:
        print("Usage: python main.py [api|ingest|poll] [start_date] [end_date]")
        sys.exit(1)

    setup_logging()
    cmd = sys.argv[1]
    start_date = sys.argv[2] if len(sys.argv) > 2 else None
    end_date = sys.argv[3] if len(sys.argv) > 3 else None

    if cmd == "api":
        import uvicorn
        from floodwatch.utils.config import settings
        logger.info("Starting API server...")
        uvicorn.run(
            "floodwatch.api.main:app",
            host=settings.api.host,
            port=settings.api.port,
            reload=settings.api.reload,
        )

    elif cmd == "ingest":
        from floodwatch.core.errors import FloodwatchError
        from floodwatch.core.formatter import format_output
        from floodwatch.core.snapshot import SnapshotBuilder
        try:
            snapshot = SnapshotBuilder().ingest(start_date, end_date)
        except FloodwatchError as e:
            print(f"Error: {e.message}")
            sys.exit(2)
        print(format_output(snapshot, "summary"))

    elif cmd == "poll":
        from floodwatch.core.formatter import format_output
        from floodwatch.core.poller import SnapshotPoller
        from floodwatch.core.snapshot import SnapshotBuilder
        poller = SnapshotPoller(SnapshotBuilder(), start_date=start_date, end_date=end_date)
        poller.start()
        try:
            while True:
                time.sleep(poller.interval_seconds)
                snapshot = poller.current()
                if snapshot is not None:
                    print(format_output(snapshot, "summary"))
        except KeyboardInterrupt:
            poller.shutdown()

    else:
        print(f"Unknown command: {cmd}")
        sys.exit(1)


if __name__ == "__main__":
    main()
