"""SQLAlchemy-backed repository for transactions, assets, and budgets."""

from datetime import date
from uuid import uuid4

from sqlalchemy import text

from finance_timeline.application.ports.database import DatabaseEnginePort
from finance_timeline.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from finance_timeline.domain.models import (
    Asset,
    AssetBalanceSnapshot,
    Budget,
    BudgetCategoryLine,
    MonthlyBankBalance,
    Transaction,
)
from finance_timeline.domain.services.normalization import (
    normalize_asset_type,
    normalize_signed_amount,
    normalize_source,
)
from finance_timeline.domain.services.validation import validate_budget_line
from finance_timeline.utils.date_utils import coerce_date
from finance_timeline.utils.decimal_utils import coerce_decimal


SELECT_ASSETS_SQL = """
SELECT id, name, asset_type, created_on, current_balance, last_updated
FROM assets
WHERE user_id = :user_id
"""

SELECT_SNAPSHOTS_SQL = """
SELECT s.id, s.asset_id, s.amount, s.recorded_on
FROM asset_balance_snapshots s
JOIN assets a ON a.id = s.asset_id
WHERE a.user_id = :user_id
"""

DELETE_SNAPSHOTS_SQL = text(
    "DELETE FROM asset_balance_snapshots WHERE asset_id = :asset_id"
)

INSERT_SNAPSHOT_SQL = text(
    """
    INSERT INTO asset_balance_snapshots (
        id,
        asset_id,
        amount,
        recorded_on,
        position
    )
    VALUES (:id, :asset_id, :amount, :recorded_on, :position)
    """
)

UPDATE_ASSET_BALANCE_SQL = text(
    """
    UPDATE assets
    SET current_balance = :current_balance,
        last_updated = :last_updated
    WHERE id = :asset_id AND user_id = :user_id
    """
)


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository reading and writing user ledger data with SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_transactions(
        self,
        user_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> list[Transaction]:
        query = text(
            """
            SELECT id, amount, kind, category, description, occurred_on, source
            FROM transactions
            WHERE user_id = :user_id
            """
        )
        params: dict[str, object] = {"user_id": user_id}
        if start_date:
            query = text(query.text + " AND occurred_on >= :start_date")
            params["start_date"] = start_date
        if end_date:
            query = text(query.text + " AND occurred_on <= :end_date")
            params["end_date"] = end_date
        query = text(query.text + " ORDER BY occurred_on, id")
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [self._build_transaction(row) for row in rows]

    def fetch_assets(self, user_id: str) -> list[Asset]:
        engine = self._db_port.get_finance_engine()
        params = {"user_id": user_id}
        with engine.connect() as conn:
            asset_rows = conn.execute(
                text(SELECT_ASSETS_SQL + " ORDER BY name, id"),
                params,
            ).all()
            snapshot_rows = conn.execute(
                text(SELECT_SNAPSHOTS_SQL + " ORDER BY s.asset_id, s.position"),
                params,
            ).all()
        snapshots = self._group_snapshots(snapshot_rows)
        return [
            self._build_asset(row, snapshots.get(row.id, ()))
            for row in asset_rows
        ]

    def fetch_asset(self, user_id: str, asset_id: str) -> Asset | None:
        engine = self._db_port.get_finance_engine()
        params = {"user_id": user_id, "asset_id": asset_id}
        with engine.connect() as conn:
            asset_row = conn.execute(
                text(SELECT_ASSETS_SQL + " AND id = :asset_id"),
                params,
            ).first()
            if asset_row is None:
                return None
            snapshot_rows = conn.execute(
                text(
                    SELECT_SNAPSHOTS_SQL
                    + " AND s.asset_id = :asset_id ORDER BY s.position"
                ),
                params,
            ).all()
        snapshots = self._group_snapshots(snapshot_rows)
        return self._build_asset(asset_row, snapshots.get(asset_id, ()))

    def save_asset_snapshots(self, user_id: str, asset: Asset) -> None:
        if asset.asset_id is None:
            raise RuntimeError("Cannot save snapshots of an unsaved asset")
        payload = [
            {
                "id": snapshot.snapshot_id or uuid4().hex,
                "asset_id": asset.asset_id,
                "amount": snapshot.amount,
                "recorded_on": snapshot.date,
                "position": position,
            }
            for position, snapshot in enumerate(asset.snapshots)
        ]
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            conn.execute(DELETE_SNAPSHOTS_SQL, {"asset_id": asset.asset_id})
            if payload:
                conn.execute(INSERT_SNAPSHOT_SQL, payload)
            conn.execute(
                UPDATE_ASSET_BALANCE_SQL,
                {
                    "current_balance": asset.current_balance,
                    "last_updated": asset.last_updated,
                    "asset_id": asset.asset_id,
                    "user_id": user_id,
                },
            )

    def fetch_budget(self, user_id: str) -> Budget | None:
        """Return the user's budget with its lines in stored order.

        Raises:
            ValueError: If a stored line has an unknown kind or frequency,
                or a negative planned amount.
        """
        budget_query = text(
            """
            SELECT id, name, description
            FROM budgets
            WHERE user_id = :user_id
            """
        )
        lines_query = text(
            """
            SELECT name, kind, planned_amount, frequency, category_id,
                   description
            FROM budget_category_lines
            WHERE budget_id = :budget_id
            ORDER BY position
            """
        )
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            budget_row = conn.execute(budget_query, {"user_id": user_id}).first()
            if budget_row is None:
                return None
            line_rows = conn.execute(
                lines_query,
                {"budget_id": budget_row.id},
            ).all()
        lines = tuple(
            validate_budget_line(
                BudgetCategoryLine(
                    name=row.name,
                    kind=row.kind,
                    planned_amount=coerce_decimal(row.planned_amount),
                    frequency=row.frequency,
                    category_id=row.category_id,
                    description=row.description or "",
                )
            )
            for row in line_rows
        )
        return Budget(
            name=budget_row.name,
            lines=lines,
            description=budget_row.description or "",
        )

    def fetch_monthly_bank_balances(
        self,
        user_id: str,
    ) -> list[MonthlyBankBalance]:
        query = text(
            """
            SELECT year, month, balance
            FROM monthly_bank_balances
            WHERE user_id = :user_id
            ORDER BY year, month
            """
        )
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, {"user_id": user_id}).all()
        return [
            MonthlyBankBalance(
                year=int(row.year),
                month=int(row.month),
                balance=coerce_decimal(row.balance),
            )
            for row in rows
        ]

    @staticmethod
    def _build_transaction(row) -> Transaction:
        # Rows without a kind hold signed amounts; negative means expense.
        if row.kind:
            amount, kind = coerce_decimal(row.amount), row.kind
        else:
            amount, kind = normalize_signed_amount(row.amount)
        return Transaction(
            amount=amount,
            kind=kind,
            category=row.category,
            date=coerce_date(row.occurred_on),
            source=normalize_source(row.source),
            description=row.description or "",
            transaction_id=row.id,
        )

    @staticmethod
    def _group_snapshots(rows) -> dict[str, tuple[AssetBalanceSnapshot, ...]]:
        grouped: dict[str, list[AssetBalanceSnapshot]] = {}
        for row in rows:
            grouped.setdefault(row.asset_id, []).append(
                AssetBalanceSnapshot(
                    amount=coerce_decimal(row.amount),
                    date=coerce_date(row.recorded_on),
                    snapshot_id=row.id,
                )
            )
        return {asset_id: tuple(items) for asset_id, items in grouped.items()}

    @staticmethod
    def _build_asset(row, snapshots: tuple[AssetBalanceSnapshot, ...]) -> Asset:
        return Asset(
            name=row.name,
            created_on=coerce_date(row.created_on),
            current_balance=coerce_decimal(row.current_balance),
            snapshots=snapshots,
            last_updated=(
                coerce_date(row.last_updated) if row.last_updated else None
            ),
            asset_type=normalize_asset_type(row.asset_type),
            asset_id=row.id,
        )


__all__ = ["SqlAlchemyLedgerRepository"]
