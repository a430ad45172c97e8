"""The fixed catalog of demonstration operations on the books collection."""

from dataclasses import dataclass
from typing import Iterator, Optional

from query_catalog.models.config import CatalogConfig
from query_catalog.models.operation import (
    Operation,
    aggregate,
    create_index,
    delete_one,
    explain,
    find,
    update_one,
)

# Fields returned by the projection and pagination entries
SUMMARY_PROJECTION = {"title": 1, "author": 1, "price": 1, "_id": 0}
PRICE_PROJECTION = {"title": 1, "price": 1, "_id": 0}


@dataclass(frozen=True)
class CatalogSection:
    """A titled group of operations, numbered from 1 when displayed."""

    title: str
    operations: tuple[Operation, ...]


def basic_queries() -> CatalogSection:
    return CatalogSection(
        title="Basic queries",
        operations=(
            find(
                "Fiction books",
                filter={"genre": "Fiction"},
                template="- {title} by {author}",
            ),
            find(
                "Books published after 1950",
                filter={"published_year": {"$gt": 1950}},
                template="- {title} ({published_year})",
            ),
            find(
                "Books by George Orwell",
                filter={"author": "George Orwell"},
                template="- {title} ({published_year})",
            ),
            find(
                "Books with a price set",
                filter={"price": {"$exists": True}},
                template="- {title}: ${price}",
            ),
            update_one(
                "Update the price of 1984",
                filter={"title": "1984"},
                update={"$set": {"price": 12.50}},
            ),
            delete_one("Delete Moby Dick", filter={"title": "Moby Dick"}),
        ),
    )


def advanced_queries(page: int = 1, page_size: int = 5) -> CatalogSection:
    """Filters, projection, sorting and skip/limit pagination."""
    return CatalogSection(
        title="Advanced queries",
        operations=(
            find(
                "Books in stock and published after 2010",
                filter={"in_stock": True, "published_year": {"$gt": 2010}},
                template="- {title} ({published_year})",
            ),
            find(
                "Books with projection (title, author, price only)",
                projection=SUMMARY_PROJECTION,
            ),
            find(
                "Books sorted by price (ascending)",
                projection=PRICE_PROJECTION,
                sort=[("price", 1)],
                template="{title}: ${price}",
            ),
            find(
                "Books sorted by price (descending)",
                projection=PRICE_PROJECTION,
                sort=[("price", -1)],
                template="{title}: ${price}",
            ),
            find(
                f"Page {page} ({page_size} books per page)",
                projection=SUMMARY_PROJECTION,
                skip=(page - 1) * page_size,
                limit=page_size,
            ),
        ),
    )


def aggregations() -> CatalogSection:
    """Grouping pipelines."""
    return CatalogSection(
        title="Aggregations",
        operations=(
            aggregate(
                "Average price of books by genre",
                pipeline=[
                    {"$group": {"_id": "$genre", "averagePrice": {"$avg": "$price"}}},
                    {"$sort": {"averagePrice": -1}},
                ],
                template="{_id}: ${averagePrice:.2f}",
            ),
            aggregate(
                "Author with the most books",
                pipeline=[
                    {"$group": {"_id": "$author", "bookCount": {"$sum": 1}}},
                    {"$sort": {"bookCount": -1}},
                    {"$limit": 1},
                ],
                template="{_id}: {bookCount} books",
            ),
            aggregate(
                "Books grouped by publication decade",
                pipeline=[
                    {
                        "$project": {
                            "decade": {
                                "$multiply": [
                                    {"$floor": {"$divide": ["$published_year", 10]}},
                                    10,
                                ]
                            }
                        }
                    },
                    {"$group": {"_id": "$decade", "count": {"$sum": 1}}},
                    {"$sort": {"_id": 1}},
                ],
                template="{_id:.0f}s: {count} books",
            ),
        ),
    )


def indexing() -> CatalogSection:
    # Both explains run after the indexes exist; the first is labelled
    # "without index" only for the narrative
    title_filter = {"title": "1984"}
    return CatalogSection(
        title="Indexing",
        operations=(
            create_index("Create index on title", keys=[("title", 1)]),
            create_index(
                "Create compound index on author and published_year",
                keys=[("author", 1), ("published_year", -1)],
            ),
            explain("Query without index (explain plan)", filter=title_filter),
            explain("Query with index (explain plan)", filter=title_filter),
        ),
    )


def build_catalog(config: Optional[CatalogConfig] = None) -> list[CatalogSection]:
    """
    Build the ordered catalog.

    Args:
        config: Configuration supplying the pagination page and size

    Returns:
        Sections in display order
    """
    config = config or CatalogConfig()
    return [
        basic_queries(),
        advanced_queries(config.page, config.page_size),
        aggregations(),
        indexing(),
    ]


def entries(sections: list[CatalogSection]) -> Iterator[Operation]:
    """Iterate over all operations in catalog order."""
    for section in sections:
        yield from section.operations
