"""Patient clinical-records client: schemas, repositories, aggregate loading and form workflows."""

__version__ = "1.0.0"
