from __future__ import annotations

import argparse
import logging
import sys

from src.adapters.persistence.local_gtfs_repository import LocalGtfsRepository
from src.adapters.persistence.local_timetable_repository import LocalTimetableRepository
from src.adapters.persistence.s3_timetable_repository import S3TimetableRepository
from src.app.ports.output import ITimetableRepository
from src.app.services.ingestion_service import IngestionService
from src.domain.exceptions import IngestionError

logger = logging.getLogger("src.ingest")


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build stops.json and timetable.json from a GTFS directory."
    )
    parser.add_argument("--gtfs", help="GTFS directory (default: $GTFS_PATH or data/gtfs)")
    parser.add_argument(
        "--out", help="Output directory (default: $TIMETABLE_DATA_PATH or data)"
    )
    parser.add_argument(
        "--s3",
        action="store_true",
        help="Upload to $TIMETABLE_BUCKET instead of writing local files",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = make_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    repository: ITimetableRepository
    if args.s3:
        repository = S3TimetableRepository()
    else:
        repository = LocalTimetableRepository(base_path=args.out)

    service = IngestionService(
        gtfs_repository=LocalGtfsRepository(base_path=args.gtfs),
        timetable_repository=repository,
    )

    try:
        service.run()
    except IngestionError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
