"""Query service for supplier directory database operations."""

import uuid
from datetime import date, datetime
from typing import Any, Optional

from api.services.database import DatabaseService, get_db
from api.services.filters import build_filter_clause, build_order_clause
from config.logging_config import get_logger
from src.listing.filter_state import SupplierFilter
from src.listing.pagination import PaginationMeta
from src.submissions.schemas import (
    ContactMessageForm,
    QuoteRequestForm,
    ReviewForm,
    SupplierSubmission,
)
from src.submissions.slugs import create_slug, unique_slug

logger = get_logger("api.queries")

SUPPLIER_SELECT = """
    SELECT
        s.*,
        c.name AS category_name,
        c.slug AS category_slug
    FROM suppliers s
    LEFT JOIN categories c ON c.id = s.category_id
"""


def _serialize(row: dict) -> dict:
    """Make a database row JSON-friendly."""
    result = {}
    for key, value in row.items():
        if isinstance(value, (datetime, date)):
            value = value.isoformat()
        result[key] = value
    return result


def _shape_supplier(row: dict, tags: list[str]) -> dict:
    supplier = _serialize(row)
    category_name = supplier.pop("category_name", None)
    category_slug = supplier.pop("category_slug", None)
    supplier["category"] = (
        {"id": supplier["category_id"], "name": category_name, "slug": category_slug}
        if category_name is not None
        else None
    )
    supplier["service_areas"] = list(supplier.get("service_areas") or [])
    supplier["tags"] = tags
    return supplier


class SupplierQueryService:
    """Service for executing supplier directory queries."""

    def __init__(self, db: Optional[DatabaseService] = None):
        self.db = db or get_db()

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def list_suppliers(
        self,
        filters: SupplierFilter,
        default_limit: int,
        max_limit: int,
    ) -> tuple[list[dict], PaginationMeta]:
        """Get one page of approved suppliers matching the filter.

        Args:
            filters: Decoded listing filter.
            default_limit: Page size when the filter has none.
            max_limit: Largest page size honoured.

        Returns:
            Tuple of (suppliers, pagination metadata).
        """
        page = filters.page or 1
        limit = min(filters.limit or default_limit, max_limit)

        where_clause, params = build_filter_clause(filters)
        order_clause = build_order_clause(filters.sort_by, filters.sort_order)

        total = self.db.fetch_one(
            f"SELECT COUNT(*) FROM suppliers s WHERE {where_clause}", params
        )[0]
        offset = (page - 1) * limit
        if offset >= total:
            # Past the last page; DuckDB cannot take an OFFSET beyond BIGINT
            return [], PaginationMeta.from_total(page=page, limit=limit, total=total)

        rows = self.db.fetch_dicts(
            f"{SUPPLIER_SELECT} WHERE {where_clause} {order_clause} LIMIT ? OFFSET ?",
            params + [limit, offset],
        )
        tags = self.get_tags([row["id"] for row in rows])
        suppliers = [_shape_supplier(row, tags.get(row["id"], [])) for row in rows]

        return suppliers, PaginationMeta.from_total(page=page, limit=limit, total=total)

    def get_tags(self, supplier_ids: list[str]) -> dict[str, list[str]]:
        """Get tags for each supplier id, alphabetically."""
        if not supplier_ids:
            return {}
        placeholders = ", ".join(["?" for _ in supplier_ids])
        rows = self.db.fetch_all(
            f"""
            SELECT supplier_id, tag FROM supplier_tags
            WHERE supplier_id IN ({placeholders})
            ORDER BY tag
            """,
            supplier_ids,
        )
        tags: dict[str, list[str]] = {}
        for supplier_id, tag in rows:
            tags.setdefault(supplier_id, []).append(tag)
        return tags

    def get_supplier(self, slug: str, record_view: bool = True) -> Optional[dict]:
        """Get an approved supplier by slug, counting the view.

        Returns:
            Supplier with category, tags and latest reviews, or None.
        """
        rows = self.db.fetch_dicts(
            f"{SUPPLIER_SELECT} WHERE s.slug = ? AND s.status = 'approved'", [slug]
        )
        if not rows:
            return None

        row = rows[0]
        if record_view:
            self.db.execute(
                "UPDATE suppliers SET view_count = view_count + 1 WHERE id = ?", [row["id"]]
            )
            row["view_count"] = (row.get("view_count") or 0) + 1

        supplier = _shape_supplier(row, self.get_tags([row["id"]]).get(row["id"], []))
        supplier["reviews"] = self.list_reviews(row["id"])
        return supplier

    def find_supplier(self, supplier_id: str) -> Optional[dict]:
        """Get an approved supplier's id, name and quote setting."""
        rows = self.db.fetch_dicts(
            """
            SELECT id, name, slug, contact_email, accepts_quotes
            FROM suppliers WHERE id = ? AND status = 'approved'
            """,
            [supplier_id],
        )
        return rows[0] if rows else None

    def slug_exists(self, slug: str) -> bool:
        row = self.db.fetch_one("SELECT 1 FROM suppliers WHERE slug = ?", [slug])
        return row is not None

    # ------------------------------------------------------------------
    # Catalogue
    # ------------------------------------------------------------------

    def list_categories(self) -> list[dict]:
        """Get all categories with their approved supplier counts (cached)."""
        cached = self.db.category_cache.get("categories")
        if cached is not None:
            return cached

        rows = self.db.fetch_dicts(
            """
            SELECT
                c.id, c.name, c.slug, c.description, c.icon,
                COUNT(s.id) AS supplier_count
            FROM categories c
            LEFT JOIN suppliers s ON s.category_id = c.id AND s.status = 'approved'
            GROUP BY c.id, c.name, c.slug, c.description, c.icon
            ORDER BY c.name
            """
        )
        categories = [_serialize(row) for row in rows]
        self.db.category_cache.set("categories", categories)
        return categories

    def category_exists(self, category_id: str) -> bool:
        row = self.db.fetch_one("SELECT 1 FROM categories WHERE id = ?", [category_id])
        return row is not None

    def get_feature_flag(self, flag_id: str) -> Optional[bool]:
        """Get a flag's enabled state, or None if the flag is unknown (cached)."""
        cached = self.db.flag_cache.get(flag_id)
        if cached is not None:
            return cached

        row = self.db.fetch_one("SELECT enabled FROM feature_flags WHERE id = ?", [flag_id])
        if row is None:
            return None
        enabled = bool(row[0])
        self.db.flag_cache.set(flag_id, enabled)
        return enabled

    # ------------------------------------------------------------------
    # Submissions
    # ------------------------------------------------------------------

    def create_supplier(self, submission: SupplierSubmission) -> dict:
        """Store a public submission as a pending supplier.

        Returns:
            The stored supplier's id, name, slug and status.
        """
        supplier_id = str(uuid.uuid4())
        base_slug = create_slug(submission.name) or "supplier"
        slug = unique_slug(base_slug, self.slug_exists)

        with self.db.transaction() as db:
            db.execute(
                """
                INSERT INTO suppliers (
                    id, name, slug, category_id, description, short_summary,
                    website_url, contact_email, contact_phone, location, service_areas,
                    founded_year, employee_count, pricing_model, status,
                    has_discount, discount_description, discount_code, accepts_quotes
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, 'pending', ?, ?, ?, ?)
                """,
                [
                    supplier_id,
                    submission.name,
                    slug,
                    str(submission.category_id),
                    submission.description,
                    submission.short_summary,
                    submission.website_url,
                    submission.contact_email,
                    submission.contact_phone,
                    submission.location,
                    submission.service_areas,
                    submission.founded_year,
                    submission.employee_count,
                    submission.pricing_model,
                    submission.has_discount,
                    submission.discount_description,
                    submission.discount_code,
                    submission.accepts_quotes,
                ],
            )
            for tag in submission.tags:
                db.execute(
                    "INSERT INTO supplier_tags (supplier_id, tag) VALUES (?, ?)",
                    [supplier_id, tag],
                )

        logger.info(f"Stored pending supplier {slug} ({supplier_id})")
        return {"id": supplier_id, "name": submission.name, "slug": slug, "status": "pending"}

    def list_reviews(self, supplier_id: str, limit: int = 20) -> list[dict]:
        rows = self.db.fetch_dicts(
            """
            SELECT id, supplier_id, rating, title, content, company_name,
                   verified, helpful_count, created_at
            FROM reviews WHERE supplier_id = ?
            ORDER BY created_at DESC
            LIMIT ?
            """,
            [supplier_id, limit],
        )
        return [_serialize(row) for row in rows]

    def create_review(self, form: ReviewForm) -> dict:
        """Store a review and refresh the supplier's rating summary."""
        review_id = str(uuid.uuid4())
        supplier_id = str(form.supplier_id)
        with self.db.transaction() as db:
            db.execute(
                """
                INSERT INTO reviews (id, supplier_id, rating, title, content, company_name)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                [review_id, supplier_id, form.rating, form.title, form.content, form.company_name],
            )
            db.execute(
                """
                UPDATE suppliers SET
                    rating_average = (SELECT ROUND(AVG(rating), 2) FROM reviews WHERE supplier_id = ?),
                    rating_count = (SELECT COUNT(*) FROM reviews WHERE supplier_id = ?)
                WHERE id = ?
                """,
                [supplier_id, supplier_id, supplier_id],
            )
        rows = self.db.fetch_dicts("SELECT * FROM reviews WHERE id = ?", [review_id])
        return _serialize(rows[0])

    def create_quote_request(self, form: QuoteRequestForm) -> dict:
        quote_id = str(uuid.uuid4())
        values = form.model_dump(mode="json")
        self.db.execute(
            """
            INSERT INTO quote_requests (
                id, supplier_id, requester_name, requester_email, company_name,
                phone, service_type, budget_range, timeline, location, message
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            [
                quote_id,
                values["supplier_id"],
                values["requester_name"],
                values["requester_email"],
                values["company_name"],
                values["phone"],
                values["service_type"],
                values["budget_range"],
                values["timeline"],
                values["location"],
                values["message"],
            ],
        )
        self._count_contact(values["supplier_id"])
        return {"id": quote_id, "supplier_id": values["supplier_id"], "status": "new"}

    def create_contact_message(self, form: ContactMessageForm) -> dict:
        message_id = str(uuid.uuid4())
        values = form.model_dump(mode="json")
        self.db.execute(
            """
            INSERT INTO contact_messages (
                id, name, email, company, phone, subject, message, supplier_id
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            [
                message_id,
                values["name"],
                values["email"],
                values["company"],
                values["phone"],
                values["subject"],
                values["message"],
                values["supplier_id"],
            ],
        )
        if values["supplier_id"]:
            self._count_contact(values["supplier_id"])
        return {"id": message_id, "status": "new"}

    def _count_contact(self, supplier_id: Any) -> None:
        self.db.execute(
            "UPDATE suppliers SET contact_count = contact_count + 1 WHERE id = ?", [supplier_id]
        )
