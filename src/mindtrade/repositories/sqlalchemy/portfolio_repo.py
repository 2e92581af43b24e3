"""SQLAlchemy implementations of PortfolioRepository and TradeRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from mindtrade.core.timezone import ensure_aware, to_utc
from mindtrade.domain.models import Portfolio, Trade
from mindtrade.repositories.sqlalchemy.orm_models import PortfolioORM, TradeORM


class SqlAlchemyPortfolioRepository:
    """SQLAlchemy-backed portfolio repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, portfolio: Portfolio) -> Portfolio:
        """Persist a new portfolio."""
        orm_portfolio = PortfolioORM(
            id=portfolio.id,
            user_id=portfolio.user_id,
            name=portfolio.name,
            description=portfolio.description,
            created_at=to_utc(portfolio.created_at),
        )
        self._db.add(orm_portfolio)
        self._db.commit()
        self._db.refresh(orm_portfolio)
        return self._to_domain(orm_portfolio)

    def get_by_id(self, portfolio_id: str) -> Optional[Portfolio]:
        """Retrieve portfolio by ID."""
        orm_portfolio = self._db.query(PortfolioORM).filter(
            PortfolioORM.id == portfolio_id
        ).first()
        return self._to_domain(orm_portfolio) if orm_portfolio else None

    def list_by_user(self, user_id: str) -> list[Portfolio]:
        """List a user's portfolios, oldest first."""
        orm_portfolios = (
            self._db.query(PortfolioORM)
            .filter(PortfolioORM.user_id == user_id)
            .order_by(PortfolioORM.created_at.asc())
            .all()
        )
        return [self._to_domain(p) for p in orm_portfolios]

    def delete(self, portfolio_id: str) -> None:
        """Delete a portfolio; its trades go with it."""
        orm_portfolio = self._db.query(PortfolioORM).filter(
            PortfolioORM.id == portfolio_id
        ).first()
        if orm_portfolio:
            self._db.delete(orm_portfolio)
            self._db.commit()

    @staticmethod
    def _to_domain(orm: PortfolioORM) -> Portfolio:
        return Portfolio(
            id=orm.id,
            user_id=orm.user_id,
            name=orm.name,
            description=orm.description,
            created_at=ensure_aware(orm.created_at) if orm.created_at else None,
        )


class SqlAlchemyTradeRepository:
    """SQLAlchemy-backed trade repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, trade: Trade) -> Trade:
        """Persist a new trade."""
        orm_trade = TradeORM(
            id=trade.id,
            portfolio_id=trade.portfolio_id,
            ticker_symbol=trade.ticker_symbol,
            company_name=trade.company_name,
            action=trade.action,
            shares=trade.shares,
            price_per_share=trade.price_per_share,
            trade_date=trade.trade_date,
            notes=trade.notes,
            created_at=to_utc(trade.created_at),
        )
        self._db.add(orm_trade)
        self._db.commit()
        self._db.refresh(orm_trade)
        return self._to_domain(orm_trade)

    def list_by_portfolio(self, portfolio_id: str) -> list[Trade]:
        """List trades of a portfolio, most recent trade date first."""
        orm_trades = (
            self._db.query(TradeORM)
            .filter(TradeORM.portfolio_id == portfolio_id)
            .order_by(TradeORM.trade_date.desc(), TradeORM.created_at.desc())
            .all()
        )
        return [self._to_domain(t) for t in orm_trades]

    def delete(self, trade_id: str) -> None:
        """Delete a trade."""
        self._db.query(TradeORM).filter(TradeORM.id == trade_id).delete()
        self._db.commit()

    @staticmethod
    def _to_domain(orm: TradeORM) -> Trade:
        return Trade(
            id=orm.id,
            portfolio_id=orm.portfolio_id,
            ticker_symbol=orm.ticker_symbol,
            action=orm.action,
            shares=Decimal(str(orm.shares)),
            price_per_share=Decimal(str(orm.price_per_share)),
            trade_date=orm.trade_date,
            company_name=orm.company_name,
            notes=orm.notes,
            created_at=ensure_aware(orm.created_at) if orm.created_at else None,
        )
