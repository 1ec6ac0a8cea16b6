# app/data/seed.py
import logging

from sqlalchemy.engine import Engine
from sqlmodel import Session

from app.core.validators import validate_product
from app.database import create_db_and_tables, engine
from app.models.product import Product
from app.repositories.fallback_catalog import FallbackProductRepository
from app.repositories.product_repo import ProductRepository

logger = logging.getLogger(__name__)


def seed(bind: Engine = engine) -> int:
    """
    Load the static catalog into an empty products table.

    Every entry goes through the product validator first; an invalid
    entry aborts the seed with ValueError. Does nothing when products
    already exist.

    Returns:
        Number of products inserted.
    """
    create_db_and_tables(bind)
    repo = ProductRepository()

    with Session(bind) as session:
        # not forcing: only seed if empty
        if repo.count(session):
            logger.info("Products table not empty, skipping seed")
            return 0

        inserted = 0
        for entry in FallbackProductRepository().entries():
            errors = validate_product(entry)
            if errors:
                raise ValueError(f"Invalid catalog entry {entry.get('sku')!r}: {errors}")
            repo.create(session, Product(**entry))
            inserted += 1

    logger.info("Seeded %d products", inserted)
    return inserted


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed()
