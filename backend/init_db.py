#!/usr/bin/env python3
"""
Initialize database tables, optionally loading the sample listings
"""
import argparse

from sqlmodel import Session

from config.db_connection import get_database_url, get_engine, init_db
from models.property import Property
from services.sample_data import sample_properties


def seed_properties(engine) -> int:
    """Insert the sample listings that are not in the table yet"""
    added = 0
    with Session(engine) as session:
        for prop in sample_properties():
            if session.get(Property, prop.id) is None:
                session.add(prop)
                added += 1
        session.commit()
    return added


def init_tables(seed: bool = False):
    """Initialize all tables"""
    print(f"Connecting to database: {get_database_url()}")

    engine = get_engine()

    print("Creating tables...")
    init_db(engine)
    print("Tables created successfully!")

    if seed:
        print(f"Seeded {seed_properties(engine)} sample listings")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", action="store_true", help="Load the sample listings")
    args = parser.parse_args()
    init_tables(seed=args.seed)
