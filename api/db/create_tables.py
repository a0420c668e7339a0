"""Create (or recreate) the users/cards schema: python -m api.db.create_tables [--reset]."""
from __future__ import annotations

import argparse
import logging

from sqlalchemy.exc import SQLAlchemyError

from api.core.config import get_settings
from api.core.log import configure_logging
from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata

logger = logging.getLogger(__name__)


def create_all(*, reset: bool = False) -> list[str]:
    """Create missing tables, dropping existing ones first when reset is set."""
    engine = get_engine()
    if reset:
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    return sorted(Base.metadata.tables)


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Create the loyalty database schema")
    ap.add_argument("--reset", action="store_true", help="drop users/cards before creating them")
    args = ap.parse_args(argv)

    configure_logging(get_settings().log_level)
    try:
        tables = create_all(reset=args.reset)
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
    logger.info("tables ready: %s", ", ".join(tables))


if __name__ == "__main__":
    main()
